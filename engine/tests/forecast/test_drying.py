"""Tests for the constant-condition drying simulation."""

import math

import pytest

from fuelmoist.errors import InvalidInputError, OutOfRangeError
from fuelmoist.forecast.drying import default_initial, simulate_drying
from fuelmoist.moisture.constants import MAX_DRYING_POINTS
from fuelmoist.types import TimeLagClass

ONE = TimeLagClass.ONE_HOUR
TEN = TimeLagClass.TEN_HOUR
HUNDRED = TimeLagClass.HUNDRED_HOUR


@pytest.fixture
def initial():
    return default_initial(15.0, 18.0, 20.0)


class TestSimulateDrying:
    def test_default_initial_classes(self, initial):
        assert initial == {ONE: 15.0, TEN: 18.0, HUNDRED: 20.0}

    def test_result_shape(self, initial):
        result = simulate_drying(initial, 85.0, 30.0, 24.0, 6.0)
        assert result.emc > 0.0
        assert [p.hour for p in result.series] == [0.0, 6.0, 12.0, 18.0, 24.0]
        assert result.initial == initial
        assert set(result.final) == {ONE, TEN, HUNDRED}

    def test_hourly_series_inclusive(self):
        result = simulate_drying(default_initial(12.0, 14.0, 16.0), 80.0, 40.0, 12.0)
        assert len(result.series) == 13
        assert result.series[0].hour == 0.0
        assert result.series[12].hour == 12.0

    def test_first_point_is_initial(self, initial):
        result = simulate_drying(initial, 95.0, 15.0, 24.0, 4.0)
        assert result.series[0].moisture == initial

    def test_step_not_dividing_duration(self, initial):
        result = simulate_drying(initial, 95.0, 15.0, 10.0, 4.0)
        assert [p.hour for p in result.series] == [0.0, 4.0, 8.0]

    def test_progressive_drying(self, initial):
        result = simulate_drying(initial, 95.0, 15.0, 24.0)
        for cls, start in initial.items():
            assert result.final[cls] < start
        assert result.final[ONE] >= result.emc - 1.0
        assert result.final[ONE] < result.final[TEN] < result.final[HUNDRED]

    def test_week_long_drying_reaches_emc(self, initial):
        result = simulate_drying(initial, 95.0, 10.0, 168.0)
        assert abs(result.final[ONE] - result.emc) < 0.5

    def test_every_point_carries_emc(self, initial):
        result = simulate_drying(initial, 70.0, 60.0, 6.0, 2.0)
        assert all(p.emc == result.emc for p in result.series)


class TestSimulateDryingValidation:
    def test_non_finite(self):
        with pytest.raises(InvalidInputError):
            simulate_drying(default_initial(math.nan, 14.0, 16.0), 80.0, 40.0, 24.0)

    @pytest.mark.parametrize("duration, step", [(0.0, 1.0), (-5.0, 1.0), (24.0, 0.0), (24.0, -1.0)])
    def test_non_positive_duration_or_step(self, duration, step):
        with pytest.raises(OutOfRangeError):
            simulate_drying(default_initial(12.0, 14.0, 16.0), 80.0, 40.0, duration, step)

    def test_empty_initial(self):
        with pytest.raises(InvalidInputError):
            simulate_drying({}, 80.0, 40.0, 24.0)

    def test_point_limit(self):
        with pytest.raises(OutOfRangeError, match="limit"):
            simulate_drying(default_initial(12.0, 14.0, 16.0), 80.0, 40.0, 1e9, 1e-3)

    def test_ratio_overflow_hits_limit(self):
        with pytest.raises(OutOfRangeError):
            simulate_drying(default_initial(12.0, 14.0, 16.0), 80.0, 40.0, 1e308, 1e-300)

    def test_largest_allowed_series(self):
        result = simulate_drying(
            default_initial(12.0, 14.0, 16.0), 80.0, 40.0, MAX_DRYING_POINTS - 1.0
        )
        assert len(result.series) == MAX_DRYING_POINTS

    def test_result_mappings_read_only(self):
        result = simulate_drying(default_initial(12.0, 14.0, 16.0), 80.0, 40.0, 6.0)
        with pytest.raises(TypeError):
            result.final[ONE] = 0.0
        with pytest.raises(TypeError):
            result.series[0].moisture[TEN] = 0.0
