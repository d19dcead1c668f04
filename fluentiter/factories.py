import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import FluentIterable
    from .async_enumerable import FluentAsyncIterable

def from_iterable(data: Iterable[T]) -> 'FluentIterable[T]':
    """wrap an iterable without consuming it"""
    from .enumerable import FluentIterable
    return FluentIterable(data)

def from_async_iterable(data: AsyncIterable[T]) -> 'FluentAsyncIterable[T]':
    """wrap an async iterable without consuming it"""
    from .async_enumerable import FluentAsyncIterable
    return FluentAsyncIterable(data)

def from_range(start: int, count: int) -> 'FluentIterable[int]':
    """create fluent iterable over count consecutive integers"""
    from .enumerable import FluentIterable
    return FluentIterable(range(start, start + count))

def empty() -> 'FluentIterable[Any]':
    """create empty fluent iterable"""
    from .enumerable import FluentIterable
    return FluentIterable(())

# --- mapping views ---

def keys(mapping: Mapping[K, V]) -> 'FluentIterable[K]':
    from .enumerable import FluentIterable
    return FluentIterable.keys(mapping)

def values(mapping: Mapping[K, V]) -> 'FluentIterable[V]':
    from .enumerable import FluentIterable
    return FluentIterable.values(mapping)

def entries(mapping: Mapping[K, V]) -> 'FluentIterable[Tuple[K, V]]':
    from .enumerable import FluentIterable
    return FluentIterable.entries(mapping)

# --- aliases ---
fluent = from_iterable
F = from_iterable
