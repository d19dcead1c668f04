import sys
import suite
from dgen import nested, deep, async_range
from fluentiter import F, FluentIterable, FluentAsyncIterable, from_async_iterable

test = suite.test
assert_that = suite.assert_that


async def _agen(*items):
    for item in items:
        yield item


# sync flat() tests

@test("flat unwraps mixed nesting depths")
def test_flat_mixed_depths():
    result = F([1, [2, [3, 4]], 7]).flat().to_list()
    assert_that(result == [1, 2, 3, 4, 7], f"flat failed: {result}")


@test("flat never descends into strings")
def test_flat_strings_are_leaves():
    result = F(['ab', ['cd', [b'ef']], 'g']).flat().to_list()
    assert_that(result == ['ab', 'cd', b'ef', 'g'], f"text should stay whole: {result}")


@test("flat drops empty nested sequences")
def test_flat_empty_levels():
    result = F([[], [[], [[]]], 1, []]).flat().to_list()
    assert_that(result == [1], f"empty levels contribute nothing: {result}")


@test("flat descends into any iterable: tuples, sets, generators, wrappers")
def test_flat_iterable_kinds():
    result = F([(1, 2), {3}, (x for x in [4, 5]), F([6, [7]]), range(8, 10)]).flat().to_list()
    assert_that(result == [1, 2, 3, 4, 5, 6, 7, 8, 9], f"every iterable kind should be flattened: {result}")


@test("flat over a dict yields its keys")
def test_flat_dict():
    result = F([{'a': 1, 'b': [2]}]).flat().to_list()
    assert_that(result == ['a', 'b'], f"mappings iterate their keys: {result}")


@test("flat of random nesting yields leaves in depth-first order")
def test_flat_random_nesting():
    for seed in range(5):
        data = nested(depth=6, width=4, seed=seed)
        result = F(data).flat().to_list()
        assert_that(result == list(range(len(result))), f"seed {seed}: leaves out of order: {result}")


@test("flat handles nesting deeper than the recursion limit")
def test_flat_beyond_recursion_limit():
    depth = sys.getrecursionlimit() * 5
    result = F(deep(depth, leaf='bottom')).flat().to_list()
    assert_that(result == ['bottom'], f"deep leaf should surface: {result}")


@test("flat is lazy")
def test_flat_lazy():
    pulled = []
    def gen():
        for i in range(3):
            pulled.append(i)
            yield [i]
    iterator = iter(FluentIterable(gen).flat())
    assert_that(next(iterator) == 0, "first leaf")
    assert_that(pulled == [0], f"only one outer element should be pulled: {pulled}")


@test("sync flat emits nested async iterables as leaves")
def test_flat_sync_does_not_enter_async():
    inner = _agen(1, 2)
    result = F([0, inner]).flat().to_list()
    assert_that(result[0] == 0 and result[1] is inner, "async iterable should be emitted unchanged")


# async flat() tests

@test("async flat unwraps mixed nesting depths")
async def test_aflat_mixed_depths():
    result = await FluentAsyncIterable(lambda: _agen(1, [2, [3, 4]], 7)).flat().to_list()
    assert_that(result == [1, 2, 3, 4, 7], f"async flat failed: {result}")


@test("async flat descends into async iterables nested inside sync ones and back")
async def test_aflat_mixed_capabilities():
    source = _agen(1, [2, _agen(3, [4, _agen(5)])], async_range(2))
    result = await from_async_iterable(source).flat().to_list()
    assert_that(result == [1, 2, 3, 4, 5, 0, 1], f"mixed nesting failed: {result}")


@test("async flat never descends into strings")
async def test_aflat_strings_are_leaves():
    result = await from_async_iterable(_agen('ab', ['cd'], _agen('ef'))).flat().to_list()
    assert_that(result == ['ab', 'cd', 'ef'], f"text should stay whole: {result}")


@test("async flat handles nesting deeper than the recursion limit")
async def test_aflat_beyond_recursion_limit():
    depth = sys.getrecursionlimit() * 5
    result = await from_async_iterable(_agen(deep(depth, leaf=1), 2)).flat().to_list()
    assert_that(result == [1, 2], f"deep leaf should surface: {result}")

class _Cursor:
    """a bare async cursor: __anext__ only, no __aiter__"""

    def __init__(self, items):
        self._items = iter(items)

    async def __anext__(self):
        try:
            return next(self._items)
        except StopIteration:
            raise StopAsyncIteration


class _Source:
    """hand-written async iterable whose cursor is not an async generator"""

    def __init__(self, items):
        self._items = items

    def __aiter__(self):
        return _Cursor(self._items)


@test("async flat walks a hand-written async iterable at the top level")
async def test_aflat_bare_cursor_top_level():
    assert_that(await FluentAsyncIterable(_Source([1, 2])).to_list() == [1, 2], "plain traversal")
    result = await FluentAsyncIterable(_Source([1, [2, 3]])).flat().to_list()
    assert_that(result == [1, 2, 3], f"bare cursor source should flatten: {result}")


@test("async flat descends into nested hand-written async iterables")
async def test_aflat_bare_cursor_nested():
    source = _agen(0, _Source([1, _Source([2, [3]])]), 4)
    result = await from_async_iterable(source).flat().to_list()
    assert_that(result == [0, 1, 2, 3, 4], f"nested bare cursors should flatten: {result}")


@test("async flat is lazy")
async def test_aflat_lazy():
    pulled = []

    async def gen():
        for i in range(3):
            pulled.append(i)
            yield [i]

    iterator = aiter(FluentAsyncIterable(gen).flat())
    assert_that(await anext(iterator) == 0, "first leaf")
    assert_that(pulled == [0], f"only one outer element should be pulled: {pulled}")



if __name__ == "__main__":
    suite.run(title="fluentiter flatten test suite")
