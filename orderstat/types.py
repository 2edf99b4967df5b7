from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, MutableSequence, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Comparer = Callable[[T, T], int]
Equality = Callable[[T, T], bool]
KeySelector = Callable[[T], K]


class SelectionResult(Generic[T]):
    """encapsulates the outcome of a selection: a value or the error that stopped it"""

    def __init__(self, value: Optional[T] = None, error: Optional[Exception] = None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool: return self.error is None

    @property
    def is_not_found(self) -> bool:
        from .errors import NoSuchElementError
        return isinstance(self.error, NoSuchElementError)

    @property
    def is_invalid_argument(self) -> bool:
        from .errors import InvalidArgumentError
        return isinstance(self.error, InvalidArgumentError)

    def value_or(self, default: U) -> Union[T, U]:
        """the selected value, or default when the selection failed"""
        return self.value if self.ok else default

    def unwrap(self) -> T:
        """the selected value; re-raises the captured error otherwise"""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self) -> str:
        if self.ok:
            return f"SelectionResult(value={self.value!r})"
        return f"SelectionResult(error={type(self.error).__name__})"
