"""Exception hierarchy for fuelmoist.

Every error derives from ValueError so callers that only care about
"bad input" can catch one type. The subclasses let callers tell a bad
shape apart from a configuration mistake or an out-of-range value.
"""

from __future__ import annotations


class FuelMoistureError(ValueError):
    """Base class for all fuelmoist errors."""


class InvalidInputError(FuelMoistureError):
    """A required value is missing, non-numeric, or non-finite."""


class InvalidTimeLagError(InvalidInputError):
    """A time-lag constant is not strictly positive or not a known class."""


class InvalidSeriesError(InvalidInputError):
    """A weather series is empty, not a sequence, or has a malformed element."""


class OutOfRangeError(InvalidInputError):
    """A finite value falls outside its physical range."""
