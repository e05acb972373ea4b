"""Equilibrium moisture content and time-lag response."""

from fuelmoist.moisture.emc import compute_emc
from fuelmoist.moisture.timelag import step_moisture, wind_adjusted_time_lag

__all__ = ["compute_emc", "step_moisture", "wind_adjusted_time_lag"]
