from __future__ import annotations
from .types import *


def natural_order(a: Any, b: Any) -> int:
    """compare by the elements' own < and > operators"""
    if a < b: return -1
    if a > b: return 1
    return 0


def reverse_order(comp: Optional[Comparer[T]] = None) -> Comparer[T]:
    """invert a comparer (natural order when none is given)"""
    base = comp if comp is not None else natural_order
    return lambda a, b: base(b, a)


def by_key(key_selector: KeySelector[T, K], descending: bool = False) -> Comparer[T]:
    """build a comparer from a key selector, the way order_by takes one"""
    def compare_items(a: T, b: T) -> int:
        result = natural_order(key_selector(a), key_selector(b))
        return -result if descending else result
    return compare_items


def chain(*comparers: Comparer[T]) -> Comparer[T]:
    """lexicographic composition: the first non-zero comparer result wins"""
    if not comparers:
        raise ValueError("chain requires at least one comparer")

    def compare_items(a: T, b: T) -> int:
        for comp in comparers:
            result = comp(a, b)
            if result != 0: return result
        return 0
    return compare_items


def then_by(primary: Comparer[T], secondary: Comparer[T]) -> Comparer[T]:
    """secondary ordering for elements the primary comparer calls equal"""
    return chain(primary, secondary)


def case_insensitive(a: str, b: str) -> int:
    """string comparer ignoring case"""
    return natural_order(a.casefold(), b.casefold())


def value_equality(a: Any, b: Any) -> bool:
    return a == b


def comparer_equality(comp: Comparer[T]) -> Equality[T]:
    """treat elements as equal when the comparer says so"""
    return lambda a, b: comp(a, b) == 0
