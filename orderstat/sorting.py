"""
Merge Sort
==========
Stable, comparer-driven top-down merge sort.

kmin/kmax in ``orderstat.selector`` sort a private copy of their input with
``sorted_copy``; ``merge_sort`` is the in-place primitive underneath and is
public for callers that want to sort their own mutable sequence.
"""

from __future__ import annotations

from typing import Iterable, List, MutableSequence, Optional, TypeVar

from .comparers import natural_order
from .types import Comparer

T = TypeVar("T")


def merge_sort(
    seq: MutableSequence[T],
    comp: Optional[Comparer[T]] = None,
    lo: int = 0,
    hi: Optional[int] = None,
) -> MutableSequence[T]:
    """
    Sort ``seq[lo:hi]`` in place, ascending under *comp*, and return *seq*.

    Parameters
    ----------
    seq : mutable sequence
        Items to sort. Only positions ``lo`` .. ``hi - 1`` are touched.
    comp : callable, optional
        ``comp(a, b) -> int``; negative when a sorts before b. Defaults to
        the elements' natural ordering.
    lo, hi : int, optional
        Half-open bounds of the range to sort; the whole sequence by default.

    Returns
    -------
    The same *seq* object.
    """
    if comp is None:
        comp = natural_order
    if hi is None:
        hi = len(seq)
    if not 0 <= lo <= hi <= len(seq):
        raise IndexError(f"sort bounds [{lo}, {hi}) out of range for length {len(seq)}")
    if hi - lo < 2:
        return seq

    # one buffer for every merge below this call
    aux: List[T] = list(seq[lo:hi])
    _sort(seq, aux, lo, hi - 1, lo, comp)
    return seq


def sorted_copy(items: Iterable[T], comp: Optional[Comparer[T]] = None) -> List[T]:
    """Return a new ascending list of *items*; the input is not modified."""
    copy: List[T] = list(items)
    merge_sort(copy, comp)
    return copy


def _sort(seq: MutableSequence[T], aux: List[T], left: int, right: int,
          offset: int, comp: Comparer[T]) -> None:
    # inclusive bounds; a single element is already sorted
    if right <= left:
        return
    mid = left + (right - left) // 2
    _sort(seq, aux, left, mid, offset, comp)
    _sort(seq, aux, mid + 1, right, offset, comp)
    _merge(seq, aux, left, mid, right, offset, comp)


def _merge(seq: MutableSequence[T], aux: List[T], left: int, mid: int, right: int,
           offset: int, comp: Comparer[T]) -> None:
    """Merge sorted ``seq[left..mid]`` and ``seq[mid+1..right]`` (stable)."""
    for k in range(left, right + 1):
        aux[k - offset] = seq[k]

    i = left
    j = mid + 1
    for k in range(left, right + 1):
        if i > mid:
            seq[k] = aux[j - offset]
            j += 1
        elif j > right:
            seq[k] = aux[i - offset]
            i += 1
        elif comp(aux[j - offset], aux[i - offset]) < 0:
            # right side wins only when strictly smaller
            seq[k] = aux[j - offset]
            j += 1
        else:
            seq[k] = aux[i - offset]
            i += 1
