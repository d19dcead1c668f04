from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .._helpers import resolve

if typing.TYPE_CHECKING:
    from ..async_enumerable import FluentAsyncIterable


class _AsyncTerminalOperations(Generic[T]):
    """eager async consumers. every method is a coroutine"""

    async def to_list(self: 'FluentAsyncIterable[T]') -> List[T]:
        """materialize into a list, in order"""
        return [x async for x in self.unwrap()]

    async def to_set(self: 'FluentAsyncIterable[T]') -> Set[T]:
        """materialize into a set"""
        return set(await self.to_list())

    async def join(self: 'FluentAsyncIterable[T]', sep: str = DEFAULT_SEPARATOR) -> str:
        """stringify every element and join them with sep"""
        return sep.join([str(x) async for x in self.unwrap()])

    async def all(self: 'FluentAsyncIterable[T]', predicate: AsyncPredicate[T]) -> bool:
        """check if all elements satisfy condition, stopping at the first failure"""
        async for x in self.unwrap():
            if not await resolve(predicate(x)):
                return False
        return True

    async def every(self: 'FluentAsyncIterable[T]', predicate: AsyncPredicate[T]) -> bool:
        return await self.all(predicate)

    async def any(self: 'FluentAsyncIterable[T]', predicate: AsyncPredicate[T]) -> bool:
        """check if any element satisfies condition, stopping at the first match"""
        async for x in self.unwrap():
            if await resolve(predicate(x)):
                return True
        return False

    async def some(self: 'FluentAsyncIterable[T]', predicate: AsyncPredicate[T]) -> bool:
        return await self.any(predicate)

    async def reduce(self: 'FluentAsyncIterable[T]', reducer: AsyncAccumulator[U, T], initial: U) -> U:
        """left fold starting from initial. reducer may be a coroutine function"""
        current = initial
        async for x in self.unwrap():
            current = await resolve(reducer(current, x))
        return current


class AsyncTerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'FluentAsyncIterable[T]'):
        self._enumerable = enumerable_instance

    async def list(self) -> List[T]:
        return await self._enumerable.to_list()

    async def set(self) -> Set[T]:
        return await self._enumerable.to_set()

    async def dict(self, key_selector: KeySelector[T, K],
                   value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) async for item in self._enumerable}

    async def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(await self._enumerable.to_list())

    async def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(await self._enumerable.to_list())

    async def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(await self._enumerable.to_list())
