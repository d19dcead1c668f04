from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .classify import is_iterable

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class _BaseFluent(ABC, Generic[T]):
    """
    holds exactly one source sequence. the input is either the sequence itself or a
    zero-argument function returning it, called once here. nothing is consumed.
    """
    _kind = 'iterable'

    def __init__(self, source: Any):
        if self._accepts(source):
            self._source = source
        elif callable(source):
            self._source = source()
        else:
            logger.debug("rejected %s input of type %s", type(self).__name__, type(source).__name__)
            raise TypeError(f"input is not an {self._kind}")

    @staticmethod
    @abstractmethod
    def _accepts(source: Any) -> bool:
        """true if source already has the capability this wrapper needs"""
        pass

    def unwrap(self) -> Any:
        """the raw underlying source"""
        return self._source

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

# --- main fluent class ---

class FluentIterable(
    _BaseFluent[T],
    _CoreOperations[T],
    _TerminalOperations[T]
):
    """a lazy, chainable wrapper around any python iterable."""

    def __init__(self, source: Union[Iterable[T], Callable[[], Iterable[T]]]):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @staticmethod
    def _accepts(source: Any) -> bool:
        return is_iterable(source)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    # --- mapping constructors ---

    @staticmethod
    def keys(mapping: Mapping[K, V]) -> 'FluentIterable[K]':
        """wrap the keys of a mapping, in the mapping's own order"""
        return FluentIterable(list(mapping.keys()))

    @staticmethod
    def values(mapping: Mapping[K, V]) -> 'FluentIterable[V]':
        """wrap the values of a mapping"""
        return FluentIterable(list(mapping.values()))

    @staticmethod
    def entries(mapping: Mapping[K, V]) -> 'FluentIterable[Tuple[K, V]]':
        """wrap the (key, value) pairs of a mapping"""
        return FluentIterable(list(mapping.items()))
