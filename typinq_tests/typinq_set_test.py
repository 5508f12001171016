import suite
from typinq import Q, empty, TypeInconsistencyError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

numbers = Q([1, 2, 3])
# [1, 2, 3, 1, 2, 3, 4, 5, 5]
with_duplicates = numbers.concat(Q([1, 2, 3, 4, 5, 5]))


# --- concat ---

@test("concat merges with another enumerable")
def test_concat():
    result = numbers.concat(Q([4, 5]))
    assert_equal(result.to_array(), [1, 2, 3, 4, 5], "concatenated")


@test("concat keeps duplicates and accepts plain lists")
def test_concat_duplicates():
    assert_equal(numbers.concat([3, 3]).to_array(), [1, 2, 3, 3, 3], "no de-duplication")


@test("concat validates the combined elements")
def test_concat_validates():
    assert_raises(TypeInconsistencyError, numbers.concat, ['a'])


# --- distinct ---

@test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    result = with_duplicates.distinct()
    assert_equal(result.count(), 5, "five distinct values")
    assert_equal(result.to_array(), [1, 2, 3, 4, 5], "first occurrence order")
    assert_that(result.contains(5) and not result.contains(6), "membership")


@test("distinct is idempotent")
def test_distinct_idempotent():
    once = with_duplicates.distinct()
    assert_that(once.distinct().equal(once), "distinct twice equals distinct once")


@test("distinct works on unhashable elements")
def test_distinct_unhashable():
    data = Q([{'id': 1}, {'id': 2}, {'id': 1}, {'id': 2}, {'id': 3}])
    assert_equal(data.distinct().to_array(), [{'id': 1}, {'id': 2}, {'id': 3}], "dicts compared by value")


@test("distinct handles empty sequences")
def test_distinct_empty():
    assert_equal(empty().distinct().to_array(), [], "empty distinct")


# --- distinct_by ---

@test("distinct_by keeps the first element for each key")
def test_distinct_by():
    result = with_duplicates.distinct_by(lambda x: x % 2)
    assert_equal(result.count(), 2, "two parity classes")
    assert_that(result.contains(1) and result.contains(2), "first odd and first even")
    assert_that(not result.contains(3) and not result.contains(4) and not result.contains(5), "later items dropped")


@test("distinct_by on records")
def test_distinct_by_records():
    data = Q([{'city': 'ny', 'n': 1}, {'city': 'la', 'n': 2}, {'city': 'ny', 'n': 3}])
    assert_equal(data.distinct_by(lambda r: r['city']).select(lambda r: r['n']).to_array(), [1, 2], "first per city")


# --- except_ ---

@test("except_ removes elements found in the other sequence")
def test_except():
    result = numbers.except_(Q([1, 2]))
    assert_equal(result.count(), 1, "one left")
    assert_that(result.contains(3), "3 remains")
    assert_that(not result.contains(1) and not result.contains(2), "1 and 2 removed")


@test("except_ accepts a plain list and keeps duplicates of the source")
def test_except_duplicates():
    assert_equal(with_duplicates.except_([1, 2]).to_array(), [3, 3, 4, 5, 5], "duplicates kept")


@test("except_ never introduces elements from the other sequence")
def test_except_no_new_elements():
    assert_equal(numbers.except_([3, 4, 5]).to_array(), [1, 2], "only source elements")


@test("except_ uses strict equality")
def test_except_strict():
    assert_equal(numbers.except_([1.0, True]).to_array(), [1, 2, 3], "1.0 and True do not match 1")


@test("strict equality applies inside nested containers")
def test_nested_strict():
    lists = Q([[1], [2]])
    assert_equal(lists.except_([[1.0]]).to_array(), [[1], [2]], "[1.0] does not match [1]")
    assert_equal(lists.except_([[1]]).to_array(), [[2]], "[1] matches [1]")
    assert_that(not Q([{'a': 1}]).contains({'a': True}), "{'a': True} does not match {'a': 1}")
    assert_that(Q([{'a': [1, 2]}]).contains({'a': [1, 2]}), "equal nested dict")
    assert_that(not Q([{1: 'x'}]).contains({True: 'x'}), "dict keys are compared strictly")


@test("strict equality on hashable containers")
def test_nested_strict_hashable():
    pairs = Q([(1, 2), (1.0, 2.0), (1, 2)])
    assert_equal(pairs.distinct().to_array(), [(1, 2), (1.0, 2.0)], "int and float tuples stay apart")
    assert_equal(pairs.intersect([(1.0, 2.0)]).to_array(), [(1.0, 2.0)], "only the float tuple")
    sets = Q([frozenset({1}), frozenset({True}), frozenset({1})])
    assert_equal(sets.distinct().count(), 2, "frozensets of 1 and True stay apart")
    assert_that(not Q([(1, [2])]).contains((1, [2.0])), "unhashable tuple members")


# --- intersect ---

@test("intersect keeps elements present in both, with source duplicates")
def test_intersect():
    result = with_duplicates.intersect(Q([1, 2]))
    assert_equal(result.count(), 4, "four matches")
    assert_equal(result.to_array(), [1, 2, 1, 2], "source order and duplicates")
    assert_that(not result.contains(3), "3 is not shared")


@test("intersect of disjoint sequences is empty")
def test_intersect_disjoint():
    assert_equal(numbers.intersect([7, 8]).to_array(), [], "disjoint")


@test("intersect on unhashable elements")
def test_intersect_unhashable():
    data = Q([[1], [2], [3]])
    assert_equal(data.intersect([[2], [4]]).to_array(), [[2]], "lists compared by value")


# --- union ---

@test("union combines and de-duplicates")
def test_union():
    result = numbers.union(Q([1, 2, 3, 4, 5]))
    assert_equal(result.count(), 5, "five values")
    assert_equal(result.to_array(), [1, 2, 3, 4, 5], "first occurrence order")


@test("union preserves order from first sequence")
def test_union_order():
    assert_equal(Q([3, 1, 2]).union([2, 4, 1]).to_array(), [3, 1, 2, 4], "order")


@test("union of different element types reports the index in the concatenation")
def test_union_type_mismatch():
    assert_raises(TypeInconsistencyError, numbers.union, Q(['a', 'b', 'c']),
                  message='Collection items must be of the same type. Expected "int", got "str" at index 3.')


@test("union with an empty side")
def test_union_empty():
    assert_equal(empty().union([1, 1, 2]).to_array(), [1, 2], "empty first")
    assert_equal(Q([2, 2]).union(empty()).to_array(), [2], "empty second")


if __name__ == "__main__":
    suite.run(title="typinq set operations test")
