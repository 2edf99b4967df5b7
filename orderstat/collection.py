from __future__ import annotations

import numpy as np
import pandas as pd

from . import selector
from .sorting import sorted_copy
from .types import *

# --- base collection implementation ---

class _BaseCollection(Generic[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- accessors ---

class SelectAccessor(Generic[T]):
    """order statistics over the wrapped collection; see orderstat.selector"""
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def min(self, comp: Comparer[T]) -> T:
        return selector.min(self._collection._get_data(), comp)

    def max(self, comp: Comparer[T]) -> T:
        return selector.max(self._collection._get_data(), comp)

    def kmin(self, k: int, comp: Comparer[T], equality: Optional[Equality[T]] = None) -> T:
        return selector.kmin(self._collection._get_data(), k, comp, equality)

    def kmax(self, k: int, comp: Comparer[T], equality: Optional[Equality[T]] = None) -> T:
        return selector.kmax(self._collection._get_data(), k, comp, equality)

    def range(self, low: T, high: T, comp: Comparer[T]) -> 'Collection[T]':
        """elements between low and high (inclusive); evaluated eagerly so errors surface here"""
        in_bounds = selector.range(self._collection._get_data(), low, high, comp)
        return Collection(lambda: list(in_bounds))

    def ceiling(self, key: T, comp: Comparer[T]) -> T:
        return selector.ceiling(self._collection._get_data(), key, comp)

    def floor(self, key: T, comp: Comparer[T]) -> T:
        return selector.floor(self._collection._get_data(), key, comp)


class TerminalAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """convert to list (a copy, so callers cannot disturb the cache)"""
        return list(self._collection._get_data())

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._collection._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._collection._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._collection._get_data())

    def count(self) -> int:
        return len(self._collection._get_data())

    def first(self) -> T:
        data = self._collection._get_data()
        if not data: raise ValueError("sequence contains no elements")
        return data[0]

# --- main collection class ---

class Collection(_BaseCollection[T]):
    """fluent, lazily evaluated wrapper around an iterable for selection queries."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        self.select = SelectAccessor(self)
        self.to = TerminalAccessor(self)

    def sort(self, comp: Optional[Comparer[T]] = None) -> 'Collection[T]':
        """stable merge sort into a new collection; natural order when comp is omitted"""
        return Collection(lambda: sorted_copy(self._get_data(), comp))

    def __repr__(self) -> str:
        return f"Collection({self._get_data()!r})"

# --- factories ---

def from_iterable(data: Iterable[T]) -> Collection[T]:
    """create collection from iterable"""
    return Collection(lambda: list(data))

def empty() -> Collection[Any]:
    """create empty collection"""
    return Collection(lambda: [])

# --- aliases ---
P = from_iterable
