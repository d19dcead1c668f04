from __future__ import annotations
import asyncio
import logging
import typing
from ..types import *
from .._helpers import resolve
from .flatten import aflatten

if typing.TYPE_CHECKING:
    from ..async_enumerable import FluentAsyncIterable

logger = logging.getLogger(__name__)

# end-of-sequence marker for zip, never a real element
_DONE = object()


async def _pull(iterator: AsyncIterator[T]) -> Any:
    """fetch the next element, or _DONE once the iterator is exhausted"""
    try:
        return await anext(iterator)
    except StopAsyncIteration:
        return _DONE


class _AsyncCoreOperations(Generic[T]):
    """
    lazy async transformations. every pull from an async source is a suspension point,
    and so is every awaitable returned by a caller-supplied function.
    """

    def map(self: 'FluentAsyncIterable[T]', fn: AsyncSelector[T, U]) -> 'FluentAsyncIterable[U]':
        """project each element to a new form. fn may be a coroutine function"""
        from ..async_enumerable import FluentAsyncIterable
        source = self.unwrap()
        async def map_data():
            async for x in source:
                yield await resolve(fn(x))
        return FluentAsyncIterable(map_data)

    def filter(self: 'FluentAsyncIterable[T]', predicate: AsyncPredicate[T]) -> 'FluentAsyncIterable[T]':
        """keep the elements that satisfy a predicate. predicate may be a coroutine function"""
        from ..async_enumerable import FluentAsyncIterable
        source = self.unwrap()
        async def filter_data():
            async for x in source:
                if await resolve(predicate(x)):
                    yield x
        return FluentAsyncIterable(filter_data)

    def where(self: 'FluentAsyncIterable[T]', predicate: AsyncPredicate[T]) -> 'FluentAsyncIterable[T]':
        return self.filter(predicate)

    def for_each(self: 'FluentAsyncIterable[T]', fn: AsyncSelector[T, Any]) -> 'FluentAsyncIterable[Any]':
        """alias for map, lazy like it"""
        return self.map(fn)

    def concat(self: 'FluentAsyncIterable[T]', other: AsyncIterable[U]) -> 'FluentAsyncIterable[Union[T, U]]':
        """this sequence followed by other"""
        from ..async_enumerable import FluentAsyncIterable
        source = self.unwrap()
        async def concat_data():
            async for x in source:
                yield x
            async for x in other:
                yield x
        return FluentAsyncIterable(concat_data)

    def flat(self: 'FluentAsyncIterable[T]') -> 'FluentAsyncIterable[Any]':
        """flatten nested async and sync iterables of any depth into their leaf values"""
        from ..async_enumerable import FluentAsyncIterable
        source = self.unwrap()
        return FluentAsyncIterable(lambda: aflatten(source))

    def enumerate(self: 'FluentAsyncIterable[T]') -> 'FluentAsyncIterable[Tuple[int, T]]':
        """pair each element with its position, starting at 0"""
        from ..async_enumerable import FluentAsyncIterable
        source = self.unwrap()
        async def enumerate_data():
            i = 0
            async for x in source:
                yield i, x
                i += 1
        return FluentAsyncIterable(enumerate_data)

    def zip(self: 'FluentAsyncIterable[T]', other: AsyncIterable[U]) -> 'FluentAsyncIterable[Tuple[T, U]]':
        """
        pair elements in lockstep, stopping at the end of the shorter sequence.
        both fetches of a round are started together and awaited jointly.
        """
        from ..async_enumerable import FluentAsyncIterable
        source = self.unwrap()
        async def zip_data():
            left, right = aiter(source), aiter(other)
            try:
                while True:
                    # both fetches settle before anything is raised, so neither cursor is left mid-step
                    a, b = await asyncio.gather(_pull(left), _pull(right), return_exceptions=True)
                    for result in (a, b):
                        if isinstance(result, BaseException):
                            raise result
                    if a is _DONE or b is _DONE:
                        logger.debug("zip stopped: left exhausted=%s, right exhausted=%s", a is _DONE, b is _DONE)
                        return
                    yield a, b
            finally:
                for cursor in (left, right):
                    if hasattr(cursor, "aclose"):
                        await cursor.aclose()
        return FluentAsyncIterable(zip_data)
