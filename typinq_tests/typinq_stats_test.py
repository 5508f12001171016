import numpy as np
import suite
from typinq import Q, empty, from_range, EmptyCollectionError, NonNumericError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

numbers = Q([1, 2, 3])
AGGREGATES = ('average', 'max', 'min', 'sum')


@test("aggregates of an empty collection raise")
def test_empty_aggregates():
    for operation in AGGREGATES:
        assert_raises(EmptyCollectionError, getattr(empty(), operation),
                      message=f"Cannot calculate {operation} of an empty collection")


@test("aggregates of non-numeric values raise")
def test_non_numeric_aggregates():
    words = Q(['foo', 'bar'])
    for operation in AGGREGATES:
        e = assert_raises(NonNumericError, getattr(words, operation),
                          message=f"Cannot calculate {operation} of non-numeric values")
        assert_that(isinstance(e, TypeError), "NonNumericError is a TypeError")


@test("booleans are not numeric")
def test_bool_not_numeric():
    assert_raises(NonNumericError, Q([True, False]).sum)


@test("emptiness is checked before the element type")
def test_empty_checked_first():
    assert_raises(EmptyCollectionError, empty().average)


@test("average always returns a float")
def test_average():
    result = numbers.average()
    assert_equal(result, 2.0, "average of 1..3")
    assert_that(type(result) is float, "float result")
    assert_equal(Q([1.5, 2.5]).average(), 2.0, "float average")


@test("sum keeps the numeric kind")
def test_sum():
    assert_equal(numbers.sum(), 6, "int sum")
    assert_that(type(numbers.sum()) is int, "int result")
    total = Q([0.5, 1.25]).sum()
    assert_equal(total, 1.75, "float sum")
    assert_that(type(total) is float, "float result")


@test("sum does not overflow on large ints")
def test_sum_big_ints():
    big = 2 ** 62
    assert_equal(Q([big, big, big]).sum(), 3 * big, "exact big int sum")


@test("max and min")
def test_max_min():
    assert_equal(numbers.max(), 3, "max")
    assert_equal(numbers.min(), 1, "min")
    assert_equal(Q([2.5, -1.5, 0.0]).min(), -1.5, "float min")
    assert_that(type(numbers.max()) is int, "int max")


@test("numpy scalars are numeric")
def test_numpy_scalars():
    values = Q([np.int64(2), np.int64(4)])
    assert_equal(values.sum(), 6, "numpy int sum")
    assert_equal(values.average(), 3.0, "numpy int average")
    assert_equal(Q([np.float64(1.5), np.float64(2.5)]).sum(), 4.0, "numpy float sum")


@test("aggregates over a projected sequence")
def test_aggregate_after_select():
    records = Q([{'price': 10}, {'price': 30}, {'price': 20}])
    prices = records.select(lambda r: r['price'])
    assert_equal(prices.average(), 20.0, "average price")
    assert_equal(prices.max(), 30, "max price")
    assert_equal(from_range(1, 100).sum(), 5050, "gauss")


if __name__ == "__main__":
    suite.run(title="typinq aggregation test")
