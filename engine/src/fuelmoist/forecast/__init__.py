"""Multi-period forecasts, drying simulation and drying pattern analysis."""

from fuelmoist.forecast.analysis import analyze_drying_pattern
from fuelmoist.forecast.driver import run_model
from fuelmoist.forecast.drying import default_initial, simulate_drying

__all__ = ["analyze_drying_pattern", "default_initial", "run_model", "simulate_drying"]
