"""
Selection errors.

Both concrete errors also derive from a builtin (ValueError / LookupError) so
callers that only know the builtins can still catch them.
"""

from __future__ import annotations

from typing import Optional


class SelectionError(Exception):
    """base class for every error raised by orderstat."""


class InvalidArgumentError(SelectionError, ValueError):
    """
    Raised when a required argument (the collection or the comparer) is absent.
    """

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"'{argument}' must not be None")
        self.argument = argument


class NoSuchElementError(SelectionError, LookupError):
    """
    Raised when a selection has no answer: empty input, k < 1, or no
    element satisfies the query.
    """

    def __init__(self, operation: str, detail: Optional[str] = None) -> None:
        message = f"{operation}: no such element"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.operation = operation
        self.detail = detail
