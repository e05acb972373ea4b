"""Shared test fixtures for fuelmoist engine tests."""

import pytest

from fuelmoist.types import TimeLagClass


@pytest.fixture
def drying_periods():
    """Three progressively hotter, drier half-day periods (mapping form)."""
    return [
        {"temp": 80.0, "rh": 40.0, "hours": 12.0},
        {"temp": 88.0, "rh": 30.0, "hours": 12.0},
        {"temp": 95.0, "rh": 20.0, "hours": 12.0},
    ]


@pytest.fixture
def fine_fuels():
    """Starting state for 1-hr and 10-hr fuels after a moist night."""
    return {TimeLagClass.ONE_HOUR: 10.0, TimeLagClass.TEN_HOUR: 12.0}


@pytest.fixture
def historical_weather():
    """Two cool, humid days leading into the forecast."""
    return [
        {"temp": 70.0, "rh": 60.0},
        {"temp": 75.0, "rh": 55.0},
    ]


@pytest.fixture
def heat_wave_forecast():
    """Ten days of steadily rising temperature and falling humidity."""
    return [{"temp": 90.0 + i * 2, "rh": max(15.0, 40.0 - i * 3)} for i in range(10)]
