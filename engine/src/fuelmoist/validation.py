"""Strict numeric validation shared by the model components.

Inputs must already be real numbers: strings are not coerced and bools
are rejected even though bool subclasses int.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from fuelmoist.errors import InvalidInputError, InvalidSeriesError, InvalidTimeLagError


def is_number(value: Any) -> bool:
    """True for int/float values that are not bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    return is_number(value) and math.isfinite(value)


def require_finite(name: str, value: Any) -> float:
    """Return value as float or raise InvalidInputError.

    Args:
        name: Argument name used in the error message
        value: Value to check

    Returns:
        The value converted to float

    Raises:
        InvalidInputError: If value is non-numeric, NaN or infinite
    """
    if not is_finite_number(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def require_time_lag(value: Any) -> float:
    """Validate a time-lag constant (hours)."""
    tau = require_finite("time_lag", value)
    if tau <= 0.0:
        raise InvalidTimeLagError(f"time_lag must be greater than zero, got {value!r}")
    return tau


def require_series(name: str, series: Any) -> Sequence[Any]:
    """Validate that series is a non-empty sequence of records."""
    if isinstance(series, (str, bytes)) or not isinstance(series, Sequence):
        raise InvalidSeriesError(f"{name} must be a sequence, got {type(series).__name__}")
    if len(series) == 0:
        raise InvalidSeriesError(f"{name} must not be empty")
    return series


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round1(value: float) -> float:
    """Round to one decimal place for presentation stability."""
    return round(value, 1)
