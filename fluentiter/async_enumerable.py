from __future__ import annotations

from .types import *
from .classify import is_async_iterable
from .enumerable import _BaseFluent

# --- core functionality ---
from .extensions.async_core import _AsyncCoreOperations
from .extensions.async_terminal import _AsyncTerminalOperations

# --- accessors ---
from .extensions.async_terminal import AsyncTerminalAccessor


class FluentAsyncIterable(
    _BaseFluent[T],
    _AsyncCoreOperations[T],
    _AsyncTerminalOperations[T]
):
    """
    the async twin of FluentIterable. same operations, same semantics;
    terminal operations are coroutines and caller functions may be async.
    """
    _kind = 'async iterable'

    def __init__(self, source: Union[AsyncIterable[T], Callable[[], AsyncIterable[T]]]):
        super().__init__(source)
        self.to = AsyncTerminalAccessor(self)

    @staticmethod
    def _accepts(source: Any) -> bool:
        return is_async_iterable(source)

    def __aiter__(self) -> AsyncIterator[T]:
        return aiter(self._source)
