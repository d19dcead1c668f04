from __future__ import annotations
import logging
import typing
from ..types import *
from .flatten import flatten

if typing.TYPE_CHECKING:
    from ..enumerable import FluentIterable

logger = logging.getLogger(__name__)

# end-of-sequence marker for zip, never a real element
_DONE = object()


class _CoreOperations(Generic[T]):
    def map(self: 'FluentIterable[T]', fn: Selector[T, U]) -> 'FluentIterable[U]':
        """project each element to a new form"""
        from ..enumerable import FluentIterable
        source = self.unwrap()
        def map_data():
            for x in source:
                yield fn(x)
        return FluentIterable(map_data)

    def filter(self: 'FluentIterable[T]', predicate: Predicate[T]) -> 'FluentIterable[T]':
        """keep the elements that satisfy a predicate"""
        from ..enumerable import FluentIterable
        source = self.unwrap()
        def filter_data():
            for x in source:
                if predicate(x):
                    yield x
        return FluentIterable(filter_data)

    def where(self: 'FluentIterable[T]', predicate: Predicate[T]) -> 'FluentIterable[T]':
        """alias for filter"""
        return self.filter(predicate)

    def for_each(self: 'FluentIterable[T]', fn: Callable[[T], Any]) -> 'FluentIterable[Any]':
        """
        alias for map. still lazy: nothing runs until the result is consumed,
        and the sequence produced holds whatever fn returned (usually None).
        """
        return self.map(fn)

    def concat(self: 'FluentIterable[T]', other: Iterable[U]) -> 'FluentIterable[Union[T, U]]':
        """this sequence followed by other"""
        from ..enumerable import FluentIterable
        source = self.unwrap()
        def concat_data():
            yield from source
            yield from other
        return FluentIterable(concat_data)

    def flat(self: 'FluentIterable[T]') -> 'FluentIterable[Any]':
        """flatten nested iterables of any depth into their leaf values"""
        from ..enumerable import FluentIterable
        source = self.unwrap()
        return FluentIterable(lambda: flatten(source))

    def enumerate(self: 'FluentIterable[T]') -> 'FluentIterable[Tuple[int, T]]':
        """pair each element with its position, starting at 0"""
        from ..enumerable import FluentIterable
        source = self.unwrap()
        def enumerate_data():
            i = 0
            for x in source:
                yield i, x
                i += 1
        return FluentIterable(enumerate_data)

    def zip(self: 'FluentIterable[T]', other: Iterable[U]) -> 'FluentIterable[Tuple[T, U]]':
        """pair elements in lockstep, stopping at the end of the shorter sequence"""
        from ..enumerable import FluentIterable
        source = self.unwrap()
        def zip_data():
            left, right = iter(source), iter(other)
            try:
                while True:
                    # both sides advance every round, like the async variant
                    a, b = next(left, _DONE), next(right, _DONE)
                    if a is _DONE or b is _DONE:
                        logger.debug("zip stopped: left exhausted=%s, right exhausted=%s", a is _DONE, b is _DONE)
                        return
                    yield a, b
            finally:
                for cursor in (left, right):
                    if hasattr(cursor, "close"):
                        cursor.close()
        return FluentIterable(zip_data)
