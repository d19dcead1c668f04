from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, AsyncIterator, AsyncIterable,
    Awaitable, Any, Optional, Union, Dict, List, Tuple, Set, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]

# async operations accept plain callables or coroutine functions
AsyncPredicate = Callable[[T], Union[bool, Awaitable[bool]]]
AsyncSelector = Callable[[T], Union[U, Awaitable[U]]]
AsyncAccumulator = Callable[[U, T], Union[U, Awaitable[U]]]

# text is iterable in python but is always treated as a single value
TEXT_TYPES = (str, bytes, bytearray)

DEFAULT_SEPARATOR = ','
