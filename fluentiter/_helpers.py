"""internal helpers shared by the async operations."""

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """await value if it is awaitable, otherwise hand it back unchanged"""
    if inspect.isawaitable(value):
        return await value
    return value
