"""Tests for shared input validation helpers."""

import math

import pytest

from fuelmoist.errors import (
    FuelMoistureError,
    InvalidInputError,
    InvalidSeriesError,
    InvalidTimeLagError,
    OutOfRangeError,
)
from fuelmoist.validation import require_finite, require_series, require_time_lag


class TestErrorHierarchy:
    """Callers can catch broadly or narrowly."""

    @pytest.mark.parametrize("error", [InvalidTimeLagError, InvalidSeriesError, OutOfRangeError])
    def test_subclasses_of_invalid_input(self, error):
        assert issubclass(error, InvalidInputError)

    def test_all_are_value_errors(self):
        assert issubclass(FuelMoistureError, ValueError)
        assert issubclass(InvalidInputError, FuelMoistureError)


class TestRequireFinite:
    def test_accepts_int_and_float(self):
        assert require_finite("x", 3) == 3.0
        assert isinstance(require_finite("x", 3), float)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, "3", None, False, [1.0]])
    def test_rejects(self, bad):
        with pytest.raises(InvalidInputError, match="x must be a finite number"):
            require_finite("x", bad)


class TestRequireTimeLag:
    @pytest.mark.parametrize("bad", [0, -1.0, -1000])
    def test_non_positive_rejected(self, bad):
        with pytest.raises(InvalidTimeLagError):
            require_time_lag(bad)

    def test_non_finite_is_input_error(self):
        with pytest.raises(InvalidInputError):
            require_time_lag(math.nan)


class TestRequireSeries:
    @pytest.mark.parametrize("bad", [[], (), None, "abc", 42, {"temp": 70}])
    def test_rejects_empty_and_non_sequences(self, bad):
        with pytest.raises(InvalidSeriesError):
            require_series("periods", bad)

    def test_returns_series(self):
        series = [{"temp": 70, "rh": 40}]
        assert require_series("periods", series) is series
