from collections.abc import Iterable, AsyncIterable
from typing import Any

from .types import TEXT_TYPES


def is_iterable(x: Any) -> bool:
    """true if x can produce a synchronous iterator. text does not count."""
    return x is not None and isinstance(x, Iterable) and not isinstance(x, TEXT_TYPES)


def is_async_iterable(x: Any) -> bool:
    """true if x can produce an asynchronous iterator"""
    return x is not None and isinstance(x, AsyncIterable)
