r"""
'     ___ _                 _   _ _
'    | __| |_  _ ___ _ _  | |_(_) |_ ___ _ _
'    | _|| | || / -_) ' \ |  _| |  _/ -_) '_|
'    |_| |_|\_,_\___|_||_| \__|_|\__\___|_|
"""

# expose the main classes
from .enumerable import FluentIterable
from .async_enumerable import FluentAsyncIterable

# expose the factory functions
from .factories import (
    from_iterable,
    from_async_iterable,
    from_range,
    empty,
    keys,
    values,
    entries,
    fluent,
    F
)

# expose the capability checks
from .classify import is_iterable, is_async_iterable

# define what `import *` does
__all__ = [
    "FluentIterable",
    "FluentAsyncIterable",
    "from_iterable",
    "from_async_iterable",
    "from_range",
    "empty",
    "keys",
    "values",
    "entries",
    "fluent",
    "F",
    "is_iterable",
    "is_async_iterable"
]
