"""
Selection operations on collections.

Every function takes the collection and a comparer ``comp(a, b) -> int``
that defines the total order, validates them in a fixed order, and leaves
the collection untouched:

1. collection or comparer is None  -> InvalidArgumentError
2. collection is empty (or k < 1)  -> NoSuchElementError

``min``, ``max`` and ``range`` deliberately share names with builtins; import
the module (``from orderstat import selector``) rather than its names, or
use the ``select_*`` aliases.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sized

from .config import resolve_equality
from .errors import InvalidArgumentError, NoSuchElementError
from .sorting import sorted_copy
from .types import *

logger = logging.getLogger(__name__)


def _checked(operation: str, coll: Optional[Iterable[T]], comp: Optional[Comparer[T]]) -> Sequence[T] | Iterable[T]:
    """apply the shared argument checks; returns something safe to iterate"""
    if coll is None:
        raise InvalidArgumentError("coll")
    if comp is None:
        raise InvalidArgumentError("comp")
    # one-shot iterators get materialized so they are only consumed once
    if isinstance(coll, Iterator) or not isinstance(coll, Sized):
        coll = list(coll)
    if len(coll) == 0:
        logger.debug("%s: empty collection", operation)
        raise NoSuchElementError(operation, "collection is empty")
    return coll


def min(coll: Iterable[T], comp: Comparer[T]) -> T:
    """smallest element under comp; the first one wins ties"""
    data = _checked("min", coll, comp)
    itr = iter(data)
    smallest = next(itr)
    for element in itr:
        if comp(element, smallest) < 0:
            smallest = element
    return smallest


def max(coll: Iterable[T], comp: Comparer[T]) -> T:
    """largest element under comp; the first one wins ties"""
    data = _checked("max", coll, comp)
    itr = iter(data)
    largest = next(itr)
    for element in itr:
        if comp(element, largest) > 0:
            largest = element
    return largest


def _kth_distinct(operation: str, ordered: Iterator[T], k: int, same: Equality[T]) -> T:
    """walk an ordered stream, counting a new value whenever an element differs from its predecessor"""
    previous = next(ordered)
    if k == 1:
        return previous
    distinct = 1
    for element in ordered:
        if not same(element, previous):
            distinct += 1
            if distinct == k:
                return element
        previous = element
    logger.debug("%s: k=%d exceeds %d distinct values", operation, k, distinct)
    raise NoSuchElementError(operation, f"only {distinct} distinct values, k={k}")


def kmin(coll: Iterable[T], k: int, comp: Comparer[T],
         equality: Optional[Equality[T]] = None) -> T:
    """
    k-th smallest distinct value.

    duplicates are grouped with ``equality`` (a predicate ``(a, b) -> bool``);
    when omitted, the configured default from ``orderstat.config`` is used,
    which is plain ``==`` unless changed.
    """
    data = _checked("kmin", coll, comp)
    if k < 1:
        raise NoSuchElementError("kmin", f"k must be at least 1, got {k}")
    copy = sorted_copy(data, comp)
    logger.debug("kmin: k=%d over %d elements", k, len(copy))
    return _kth_distinct("kmin", iter(copy), k, resolve_equality(equality, comp))


def kmax(coll: Iterable[T], k: int, comp: Comparer[T],
         equality: Optional[Equality[T]] = None) -> T:
    """k-th largest distinct value; the mirror image of kmin"""
    data = _checked("kmax", coll, comp)
    if k < 1:
        raise NoSuchElementError("kmax", f"k must be at least 1, got {k}")
    copy = sorted_copy(data, comp)
    logger.debug("kmax: k=%d over %d elements", k, len(copy))
    # ascending copy read from the end
    return _kth_distinct("kmax", reversed(copy), k, resolve_equality(equality, comp))


def range(coll: Iterable[T], low: T, high: T, comp: Comparer[T]) -> List[T]:
    """
    every element e with low <= e <= high, in input order, duplicates kept.
    low and high need not be members of coll.
    """
    data = _checked("range", coll, comp)
    in_bounds = [e for e in data if comp(e, low) >= 0 and comp(e, high) <= 0]
    if not in_bounds:
        logger.debug("range: nothing between %r and %r", low, high)
        raise NoSuchElementError("range", "no element within bounds")
    return in_bounds


def ceiling(coll: Iterable[T], key: T, comp: Comparer[T]) -> T:
    """smallest element >= key"""
    data = _checked("ceiling", coll, comp)
    found = False
    candidate = None
    for element in data:
        if comp(element, key) < 0:
            continue
        if not found or comp(element, candidate) <= 0:
            candidate = element
            found = True
    if not found:
        logger.debug("ceiling: nothing >= %r", key)
        raise NoSuchElementError("ceiling", "no element >= key")
    return candidate


def floor(coll: Iterable[T], key: T, comp: Comparer[T]) -> T:
    """largest element <= key"""
    data = _checked("floor", coll, comp)
    found = False
    candidate = None
    for element in data:
        if comp(element, key) > 0:
            continue
        if not found or comp(element, candidate) >= 0:
            candidate = element
            found = True
    if not found:
        logger.debug("floor: nothing <= %r", key)
        raise NoSuchElementError("floor", "no element <= key")
    return candidate


def attempt(operation: Callable[..., U], *args: Any, **kwargs: Any) -> SelectionResult[U]:
    """
    run a selection and capture its failure instead of raising it.
    only selection errors are captured; anything the comparer raises propagates.
    """
    try:
        return SelectionResult(value=operation(*args, **kwargs))
    except (InvalidArgumentError, NoSuchElementError) as e:
        return SelectionResult(error=e)


# --- aliases that do not shadow builtins ---
select_min = min
select_max = max
select_range = range
