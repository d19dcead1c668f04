from __future__ import annotations
from ..types import *
from ..classify import is_iterable, is_async_iterable


def flatten(source: Iterable[Any]) -> Iterator[Any]:
    """
    depth-first flattening of arbitrarily nested iterables.
    walks an explicit stack of iterators instead of recursing, so nesting depth
    is never bounded by the interpreter's recursion limit.
    only non-iterable leaves are yielded; text counts as a leaf.
    """
    stack: List[Iterator[Any]] = [iter(source)]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if is_iterable(item):
            stack.append(iter(item))
        else:
            yield item


async def aflatten(source: AsyncIterable[Any]) -> AsyncIterator[Any]:
    """
    async counterpart of flatten().
    descends into nested async iterables and nested sync iterables alike.
    sync levels are pulled without suspending.
    """
    # each level remembers how it was opened, since async cursors need not be iterators
    stack: List[Tuple[Any, bool]] = [(aiter(source), True)]
    while stack:
        top, is_async = stack[-1]
        if is_async:
            try:
                item = await anext(top)
            except StopAsyncIteration:
                stack.pop()
                continue
        else:
            try:
                item = next(top)
            except StopIteration:
                stack.pop()
                continue

        if is_async_iterable(item):
            stack.append((aiter(item), True))
        elif is_iterable(item):
            stack.append((iter(item), False))
        else:
            yield item
