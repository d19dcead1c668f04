from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import FluentIterable


class _TerminalOperations(Generic[T]):
    """eager consumers. each one drives the pipeline to completion (or to a short-circuit)."""

    def to_list(self: 'FluentIterable[T]') -> List[T]:
        """materialize into a list, in order"""
        return list(self.unwrap())

    def to_set(self: 'FluentIterable[T]') -> Set[T]:
        """materialize into a set"""
        return set(self.unwrap())

    def join(self: 'FluentIterable[T]', sep: str = DEFAULT_SEPARATOR) -> str:
        """stringify every element and join them with sep"""
        return sep.join(str(x) for x in self.unwrap())

    def all(self: 'FluentIterable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence"""
        return all(predicate(x) for x in self.unwrap())

    def every(self: 'FluentIterable[T]', predicate: Predicate[T]) -> bool:
        return self.all(predicate)

    def any(self: 'FluentIterable[T]', predicate: Predicate[T]) -> bool:
        """check if any element satisfies condition. false for an empty sequence"""
        return any(predicate(x) for x in self.unwrap())

    def some(self: 'FluentIterable[T]', predicate: Predicate[T]) -> bool:
        return self.any(predicate)

    def reduce(self: 'FluentIterable[T]', reducer: Accumulator[U, T], initial: U) -> U:
        """left fold starting from initial"""
        return reduce(reducer, self.unwrap(), initial)


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'FluentIterable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable.to_list()

    def set(self) -> Set[T]:
        """convert to set"""
        return self._enumerable.to_set()

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable.to_list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable.to_list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable.to_list())
