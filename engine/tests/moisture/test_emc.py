"""Tests for the EMC estimator.

Checks the NFDRS three-band regression against the ordering and range
properties expected of dead fuel equilibrium moisture.
"""

import math

import pytest

from fuelmoist.errors import InvalidInputError
from fuelmoist.moisture.constants import EMC_CEILING, EMC_FLOOR, EMC_HIGH, EMC_LOW, EMC_MID
from fuelmoist.moisture.emc import compute_emc, select_band


class TestBands:
    """Humidity band selection and typical values."""

    def test_band_boundaries(self):
        assert select_band(9.99) is EMC_LOW
        assert select_band(10.0) is EMC_MID
        assert select_band(50.0) is EMC_MID
        assert select_band(50.01) is EMC_HIGH

    def test_low_humidity_band(self):
        emc = compute_emc(90, 5)
        assert 0.0 < emc < 3.0

    def test_mid_humidity_band(self):
        emc = compute_emc(80, 30)
        assert 3.0 < emc < 10.0

    def test_high_humidity_band(self):
        assert compute_emc(70, 70) > 10.0

    def test_known_value(self):
        """2.22749 + 0.160107*50 - 0.01478*75 = 9.12"""
        assert compute_emc(75, 50) == 9.1


class TestConditionOrdering:
    """EMC should rank weather by fire danger severity."""

    def test_hot_dry_moderate_cool_humid(self):
        hot_dry = compute_emc(95, 15)
        moderate = compute_emc(75, 50)
        cool_humid = compute_emc(55, 80)
        assert hot_dry < 5.0
        assert cool_humid > 12.0
        assert hot_dry < moderate < cool_humid

    @pytest.mark.parametrize("rh", [0, 5, 9, 10, 30, 50, 51, 75, 100])
    def test_non_increasing_in_temperature(self, rh):
        values = [compute_emc(t, rh) for t in range(-40, 106, 5)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("temp", [-40, 0, 32, 60, 85, 100, 105])
    def test_non_decreasing_in_humidity(self, temp):
        values = [compute_emc(temp, rh) for rh in range(0, 101)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("temp", [110, 120, 130, 150])
    def test_no_drop_at_band_edge_in_extreme_heat(self, temp):
        below = compute_emc(temp, 9.99)
        at_edge = compute_emc(temp, 10.0)
        assert at_edge >= below
        values = [compute_emc(temp, rh / 10) for rh in range(0, 1001)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_edge_held_at_low_band_value(self):
        """Mid band at 130F and RH=10 is 1.9 unadjusted; the low band edge gives 2.1."""
        assert compute_emc(130, 10) == 2.1
        assert compute_emc(130, 9.99) == 2.1

    @pytest.mark.parametrize("rh", [5, 10, 30, 60])
    def test_non_increasing_in_temperature_extreme_heat(self, rh):
        values = [compute_emc(t, rh) for t in range(100, 201, 5)]
        assert all(a >= b for a, b in zip(values, values[1:]))


class TestClamping:
    """Humidity clamping and EMC bounds."""

    @pytest.mark.parametrize("temp", [-20.0, 40.0, 75.0, 110.0])
    def test_humidity_clamped_not_rejected(self, temp):
        assert compute_emc(temp, -50) == compute_emc(temp, 0)
        assert compute_emc(temp, -10) == compute_emc(temp, 0)
        assert compute_emc(temp, 150) == compute_emc(temp, 100)
        assert compute_emc(temp, 500) == compute_emc(temp, 100)

    @pytest.mark.parametrize("temp", [-100.0, -50.0, 0.0, 50.0, 95.0, 150.0, 300.0])
    @pytest.mark.parametrize("rh", [-20.0, 0.0, 1.0, 9.9, 10.0, 49.9, 50.0, 80.0, 100.0, 200.0])
    def test_always_within_bounds(self, temp, rh):
        emc = compute_emc(temp, rh)
        assert EMC_FLOOR <= emc <= EMC_CEILING

    def test_extreme_heat_hits_floor_not_zero(self):
        assert compute_emc(150, 0) == EMC_FLOOR
        assert compute_emc(600, 5) == EMC_FLOOR

    def test_cold_saturated_capped(self):
        assert compute_emc(-100, 100) == EMC_CEILING

    def test_one_decimal_place(self):
        emc = compute_emc(73.3, 47.7)
        assert emc == round(emc, 1)


class TestValidation:
    @pytest.mark.parametrize(
        "temp, rh",
        [(math.nan, 50), (75, math.inf), (-math.inf, 20), ("invalid", 50), (75, None), (75, True)],
    )
    def test_rejects_invalid(self, temp, rh):
        with pytest.raises(InvalidInputError):
            compute_emc(temp, rh)
