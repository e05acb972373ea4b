"""Dead fuel moisture forecasting: EMC, time-lag response and drying trends."""

from fuelmoist.errors import (
    FuelMoistureError,
    InvalidInputError,
    InvalidSeriesError,
    InvalidTimeLagError,
    OutOfRangeError,
)
from fuelmoist.forecast import analyze_drying_pattern, run_model, simulate_drying
from fuelmoist.moisture import compute_emc, step_moisture
from fuelmoist.trend import TrendOptions, interpolate_series, predict_drying_trend
from fuelmoist.types import ForecastPeriod, Resolution, TimeLagClass, WeatherSample
from fuelmoist.units import celsius_to_fahrenheit, fahrenheit_to_celsius

__version__ = "1.0.0"

__all__ = [
    "FuelMoistureError",
    "ForecastPeriod",
    "InvalidInputError",
    "InvalidSeriesError",
    "InvalidTimeLagError",
    "OutOfRangeError",
    "Resolution",
    "TimeLagClass",
    "TrendOptions",
    "WeatherSample",
    "analyze_drying_pattern",
    "celsius_to_fahrenheit",
    "compute_emc",
    "fahrenheit_to_celsius",
    "interpolate_series",
    "predict_drying_trend",
    "run_model",
    "simulate_drying",
    "step_moisture",
]
