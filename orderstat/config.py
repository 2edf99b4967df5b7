"""
Process-level defaults.

Only one knob exists: how kmin/kmax decide that two neighbouring elements of
the sorted copy are the same value.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .comparers import comparer_equality, value_equality
from .types import Comparer, Equality

logger = logging.getLogger(__name__)

EQUALITY_ENV_VAR = "ORDERSTAT_EQUALITY"
VALUE_MODE = "value"
COMPARER_MODE = "comparer"
DEFAULT_EQUALITY_MODE = VALUE_MODE
_MODES = (VALUE_MODE, COMPARER_MODE)

_override: Optional[str] = None


def set_default_equality(mode: Optional[str]) -> None:
    """
    Set the process-wide grouping mode ("value" or "comparer").
    Passing None removes the override so the environment applies again.
    """
    global _override
    if mode is not None and mode not in _MODES:
        raise ValueError(f"unknown equality mode '{mode}', expected one of {_MODES}")
    _override = mode


def resolve_equality_mode() -> str:
    """
    Resolve the grouping mode.

    Priority:
    1) set_default_equality(...)
    2) env ORDERSTAT_EQUALITY
    3) DEFAULT_EQUALITY_MODE
    """
    if _override is not None:
        return _override
    raw = os.getenv(EQUALITY_ENV_VAR)
    if raw is None:
        return DEFAULT_EQUALITY_MODE
    mode = raw.strip().lower()
    if mode in _MODES:
        return mode
    logger.warning("ignoring %s=%r, falling back to '%s'", EQUALITY_ENV_VAR, raw, DEFAULT_EQUALITY_MODE)
    return DEFAULT_EQUALITY_MODE


def resolve_equality(equality: Optional[Equality], comp: Comparer) -> Equality:
    """pick the predicate kmin/kmax group duplicates with"""
    if equality is not None:
        return equality
    if resolve_equality_mode() == COMPARER_MODE:
        return comparer_equality(comp)
    return value_equality
