'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import asyncio
import numpy as np
from faker import Faker
from fluentiter import from_iterable, FluentIterable, FluentAsyncIterable
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Dict = {}) -> Any:
        try:
            method = getattr(self._fake, method_name)
            return method(**kwargs)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def nested(self, depth: int, width: int) -> List[Any]:
        """
        a list whose elements are ints or further lists, down to the given depth.
        leaves are numbered 0, 1, 2, ... in depth-first order so a flattened
        result can be checked against range(leaf_count).
        """
        # built top-down with an explicit stack so deep fixtures don't recurse
        root: List[Any] = []
        stack = [(root, depth)]
        while stack:
            target, level = stack.pop()
            for _ in range(width):
                if level > 0 and self._rng.random() < 0.5:
                    child: List[Any] = []
                    target.append(child)
                    stack.append((child, level - 1))
                else:
                    target.append(None)

        # number the leaves in the order a depth-first walk will meet them
        leaf_count = 0
        walk = [iter(root)]
        parents = [root]
        positions = [0]
        while walk:
            try:
                item = next(walk[-1])
            except StopIteration:
                walk.pop()
                parents.pop()
                positions.pop()
                continue
            index = positions[-1]
            positions[-1] += 1
            if isinstance(item, list):
                walk.append(iter(item))
                parents.append(item)
                positions.append(0)
            else:
                parents[-1][index] = leaf_count
                leaf_count += 1
        return root


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> FluentIterable:
        """count generated records behind a restartable sync wrapper"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def stream(self, count: int) -> FluentAsyncIterable:
        """count generated records, produced one at a time by an async generator"""
        records = [self._generator.create(self._schema) for _ in range(count)]

        async def produce():
            for record in records:
                await asyncio.sleep(0)
                yield record

        return FluentAsyncIterable(produce)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def nested(depth: int, width: int = 3, seed: Optional[int] = None) -> List[Any]:
    """random nested lists of ints for flattening tests"""
    return Generator(seed).nested(depth, width)


def deep(depth: int, leaf: Any = 0) -> List[Any]:
    """a single leaf wrapped in depth levels of lists"""
    value: Any = leaf
    for _ in range(depth):
        value = [value]
    return value


async def async_range(count: int):
    """async generator counting 0..count-1, suspending before every element"""
    for i in range(count):
        await asyncio.sleep(0)
        yield i
