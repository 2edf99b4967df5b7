import suite
from orderstat.comparers import (
    natural_order, reverse_order, by_key, chain, then_by,
    case_insensitive, value_equality, comparer_equality
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def sign(x):
    return (x > 0) - (x < 0)


@test("natural order returns the sign of the comparison")
def test_natural_order():
    assert_that(natural_order(1, 2) == -1, "1 < 2")
    assert_that(natural_order(2, 1) == 1, "2 > 1")
    assert_that(natural_order('a', 'a') == 0, "equal strings")


@test("reverse_order flips natural and custom comparers")
def test_reverse_order():
    assert_that(reverse_order()(1, 2) == 1, "reversed natural")
    by_len = by_key(len)
    assert_that(sign(reverse_order(by_len)('aaa', 'b')) == -1, "reversed by length")


@test("by_key compares projected keys")
def test_by_key():
    by_len = by_key(len)
    assert_that(by_len('aa', 'b') == 1, "longer sorts after")
    assert_that(by_len('ab', 'cd') == 0, "same length is equal")
    assert_that(by_key(len, descending=True)('aa', 'b') == -1, "descending flips")


@test("chain falls through to later comparers on ties")
def test_chain():
    people = [('bo', 30), ('al', 30), ('cy', 20)]
    age_then_name = then_by(by_key(lambda p: p[1]), by_key(lambda p: p[0]))
    assert_that(age_then_name(people[0], people[1]) == 1, "same age, 'bo' after 'al'")
    assert_that(age_then_name(people[2], people[0]) == -1, "younger first")
    three = chain(by_key(lambda p: p[1]), by_key(lambda p: p[0]), natural_order)
    assert_that(three(people[0], people[0]) == 0, "identical elements are equal")
    with assert_raises(ValueError):
        chain()


@test("case_insensitive ignores case only")
def test_case_insensitive():
    assert_that(case_insensitive('Apple', 'apple') == 0, "case variants are equal")
    assert_that(case_insensitive('apple', 'Banana') == -1, "alphabetical ignoring case")


@test("equality predicates")
def test_equalities():
    assert_that(value_equality(3, 3) and not value_equality('A', 'a'), "value equality is ==")
    same = comparer_equality(case_insensitive)
    assert_that(same('A', 'a') and not same('a', 'b'), "comparer equality follows the comparer")


if __name__ == "__main__":
    suite.main(title="orderstat comparers test suite")
