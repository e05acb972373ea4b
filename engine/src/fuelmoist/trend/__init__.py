"""Drying trend prediction and weather gap interpolation."""

from fuelmoist.trend.interpolation import interpolate_series
from fuelmoist.trend.predictor import TrendOptions, predict_drying_trend

__all__ = ["TrendOptions", "interpolate_series", "predict_drying_trend"]
