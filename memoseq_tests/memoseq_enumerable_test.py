import numpy as np
import pandas as pd

import suite
from suite import assert_that, assert_equal, assert_raises
from memoseq import S, from_iterable, from_range, empty, fibonacci, Enumerable, Found, Searching

numbers = from_range(1, 10)  # 1 through 10
words = S(['pear', 'apple', 'fig', 'banana'])


@suite.test("where and select chain lazily")
def test_where_select():
    evens_squared = numbers.where(lambda x: x % 2 == 0).select(lambda x: x * x).to.list()
    assert_equal(evens_squared, [4, 16, 36, 64, 100])


@suite.test("views evaluate once, on first use")
def test_lazy_single_evaluation():
    calls = []

    def source():
        calls.append(1)
        return [3, 1, 2]

    view = Enumerable(source)
    projected = view.select(lambda x: x + 1)
    assert_equal(calls, [], "nothing runs before a terminal operation")
    assert_equal(projected.to.list(), [4, 2, 3])
    assert_equal(view.to.count(), 3)
    assert_equal(calls, [1])
    assert_equal(repr(view), "Enumerable(3 items)")


@suite.test("take, skip and the while variants")
def test_take_skip():
    assert_equal(numbers.take(3).to.list(), [1, 2, 3])
    assert_equal(numbers.skip(8).to.list(), [9, 10])
    assert_equal(numbers.take(-2).to.list(), [])
    assert_equal(numbers.take_while(lambda x: x < 4).to.list(), [1, 2, 3])
    assert_equal(numbers.skip_while(lambda x: x < 8).to.list(), [8, 9, 10])
    assert_equal(numbers.reverse().take(2).to.list(), [10, 9])


@suite.test("select_with_index pairs elements with positions")
def test_select_with_index():
    assert_equal(words.select_with_index(lambda w, i: f"{i}:{w}").to.list(),
                 ['0:pear', '1:apple', '2:fig', '3:banana'])


@suite.test("order_by sorts stably by key")
def test_order_by():
    assert_equal(words.order_by(len).to.list(), ['fig', 'pear', 'apple', 'banana'])
    assert_equal(words.order_by().to.list(), ['apple', 'banana', 'fig', 'pear'])
    assert_equal(numbers.order_by(descending=True).take(2).to.list(), [10, 9])


@suite.test("terminal conversions to numpy and pandas")
def test_numpy_pandas():
    arr = fibonacci().take(10).to.array()
    assert_that(isinstance(arr, np.ndarray), f"expected ndarray, got {type(arr)}")
    assert_equal(int(arr.sum()), 88)
    series = fibonacci().take(5).to.pandas(name='fib')
    assert_that(isinstance(series, pd.Series), f"expected Series, got {type(series)}")
    assert_equal(series.name, 'fib')
    assert_equal(series.tolist(), [0, 1, 1, 2, 3])
    assert_equal(from_iterable([1.5, 2.5]).to.array(dtype=float).dtype, np.dtype(float))


@suite.test("terminal queries")
def test_terminal_queries():
    assert_equal(numbers.to.first(), 1)
    assert_equal(numbers.to.first(lambda x: x > 4), 5)
    assert_equal(numbers.to.last(), 10)
    assert_equal(numbers.to.count(lambda x: x > 7), 3)
    assert_that(numbers.to.any(lambda x: x == 7), "7 is present")
    assert_that(numbers.to.all(lambda x: x > 0), "all positive")
    assert_that(not empty().to.any(), "empty has no elements")
    assert_equal(empty().to.first_or_default(default='none'), 'none')
    assert_equal(numbers.to.aggregate(lambda acc, x: acc + x), 55)
    assert_equal(empty().to.aggregate(lambda acc, x: acc + x, seed=0), 0)
    assert_equal(numbers.to.tuple()[:2], (1, 2))
    with assert_raises(ValueError):
        empty().to.first()
    with assert_raises(ValueError):
        empty().to.last()
    with assert_raises(ValueError):
        empty().to.aggregate(lambda acc, x: acc + x)


@suite.test("to.list returns a copy")
def test_to_list_copy():
    view = from_iterable([1, 2])
    result = view.to.list()
    result.append(3)
    assert_equal(view.to.list(), [1, 2])


@suite.test("search accessor finds elements in sorted views")
def test_search_accessor():
    ordered = words.order_by()
    assert_equal(ordered.search.index_of('fig'), 2)
    assert_that(ordered.search.contains('pear'), "pear is present")
    assert_that(not ordered.search.contains('kiwi'), "kiwi is absent")
    by_length = words.order_by(len)
    assert_equal(by_length.search.index_of(6, key=len), 3)
    trace = ordered.search.trace('banana')
    assert_equal(trace, [Searching(0, 4), Found(1)])


@suite.test("search accessor hands out independent iterators")
def test_search_iterator():
    view = from_range(0, 3)
    a = view.search.iterator()
    b = view.search.iterator()
    assert_equal([a.next(), a.next()], [0, 1])
    assert_equal(b.next(), 0)
    assert_equal([a.next(), a.next()], [2, None])


@suite.test("fibonacci prefix can be searched once materialized")
def test_search_generator_prefix():
    prefix = fibonacci().take(20)
    assert_equal(prefix.search.index_of(144), 12)
    assert_equal(prefix.search.index_of(100), None)
    assert_equal(len(prefix), 20)
    assert_equal(prefix[12], 144)


if __name__ == "__main__":
    suite.run(title="memoseq enumerable test suite")
