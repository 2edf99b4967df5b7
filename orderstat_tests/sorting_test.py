import suite
from datagen import generate
from orderstat import merge_sort, sorted_copy
from orderstat.comparers import natural_order, reverse_order, by_key, case_insensitive

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

gen = generate(seed=7)


@test("merge_sort sorts in place and returns the same list")
def test_merge_sort_basic():
    data = [66, 67, 20, 86, 55, 74, 11, 91, 43, 47]
    result = merge_sort(data, natural_order)
    assert_that(result is data, "should return the sequence it was given")
    assert_that(data == [11, 20, 43, 47, 55, 66, 67, 74, 86, 91], f"unexpected order {data}")


@test("natural order is the default comparer")
def test_merge_sort_default():
    data = ['pear', 'apple', 'fig']
    merge_sort(data)
    assert_that(data == ['apple', 'fig', 'pear'], "should sort strings naturally")


@test("merge_sort agrees with sorted on random data")
def test_merge_sort_random():
    for size in (0, 1, 2, 3, 17, 64, 101):
        data = gen.integers(size, -50, 50)
        expected = sorted(data)
        merge_sort(data, natural_order)
        assert_that(data == expected, f"mismatch for size {size}")


@test("descending order via reverse_order")
def test_merge_sort_descending():
    data = gen.floats(40)
    merge_sort(data, reverse_order())
    assert_that(data == sorted(data, reverse=True), "should be descending")


@test("sort is stable for equal keys")
def test_merge_sort_stable():
    people = gen.people(60)
    by_age = by_key(lambda p: p['age'])
    result = sorted_copy(people, by_age)
    for a, b in zip(result, result[1:]):
        assert_that(a['age'] <= b['age'], "ages should ascend")
        if a['age'] == b['age']:
            assert_that(a['id'] < b['id'], "equal ages should keep input order")


@test("stability with a case-insensitive comparer")
def test_merge_sort_stable_strings():
    data = ['b', 'B', 'a', 'A', 'b']
    merge_sort(data, case_insensitive)
    assert_that(data == ['a', 'A', 'b', 'B', 'b'], f"unexpected order {data}")


@test("sorting a sorted sequence changes nothing")
def test_merge_sort_idempotent():
    data = sorted(gen.integers(50, 0, 10))
    snapshot = list(data)
    merge_sort(data, natural_order)
    assert_that(data == snapshot, "already sorted input should be unchanged")


@test("sub-range sort leaves the rest alone")
def test_merge_sort_sub_range():
    data = [9, 8, 7, 6, 5, 4, 3]
    merge_sort(data, natural_order, 2, 6)
    assert_that(data == [9, 8, 4, 5, 6, 7, 3], f"unexpected order {data}")


@test("bad bounds are rejected")
def test_merge_sort_bad_bounds():
    with assert_raises(IndexError):
        merge_sort([1, 2, 3], natural_order, 2, 1)
    with assert_raises(IndexError):
        merge_sort([1, 2, 3], natural_order, 0, 4)


@test("sorted_copy leaves its input untouched")
def test_sorted_copy():
    data = (3, 1, 2)
    result = sorted_copy(data, natural_order)
    assert_that(result == [1, 2, 3], "copy should be sorted")
    assert_that(data == (3, 1, 2), "input should be unchanged")

    source = [5, 4]
    copy = sorted_copy(source)
    assert_that(copy is not source and source == [5, 4], "list input should not be sorted in place")


@test("comparer errors propagate")
def test_comparer_errors():
    def broken(a, b):
        raise RuntimeError("no order")
    with assert_raises(RuntimeError):
        merge_sort([2, 1], broken)
    # nothing to compare, nothing raised
    assert_that(merge_sort([1], broken) == [1], "single element needs no comparison")


if __name__ == "__main__":
    suite.main(title="orderstat sorting test suite")
