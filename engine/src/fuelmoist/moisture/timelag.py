"""Exponential time-lag moisture response.

Dead fuel moisture relaxes toward EMC as

    M(t) = EMC + (M0 - EMC) * exp(-t / tau)

where tau is the fuel class time-lag constant (hours). A 1-hr fuel
covers ~63% of the gap to EMC in one hour, a 10-hr fuel in ten.
"""

from __future__ import annotations

import math

from fuelmoist.errors import InvalidInputError
from fuelmoist.moisture.constants import WIND_CAP_MPH, WIND_MAX_REDUCTION
from fuelmoist.validation import clamp, require_finite, require_time_lag, round1


def decay_factor(hours: float, time_lag: float) -> float:
    """Fraction of the initial departure from EMC remaining after hours."""
    return math.exp(-hours / time_lag)


def step_moisture(initial: float, emc: float, hours: float, time_lag: float) -> float:
    """Advance fuel moisture toward EMC over an elapsed duration.

    Args:
        initial: Starting moisture content (%)
        emc: Equilibrium moisture content target (%)
        hours: Elapsed time (hours, >= 0)
        time_lag: Fuel time-lag constant (hours, > 0)

    Returns:
        New moisture content (%), one decimal place. When nothing moves
        (hours == 0 or initial == emc) initial is returned as given.

    Raises:
        InvalidInputError: If any argument is non-finite or hours < 0
        InvalidTimeLagError: If time_lag <= 0
    """
    m0 = require_finite("initial", initial)
    target = require_finite("emc", emc)
    t = require_finite("hours", hours)
    tau = require_time_lag(time_lag)
    if t < 0.0:
        raise InvalidInputError(f"hours must not be negative, got {hours!r}")

    if t == 0.0 or m0 == target:
        return initial

    return round1(target + (m0 - target) * decay_factor(t, tau))


def wind_adjusted_time_lag(time_lag: float, wind: float | None) -> float:
    """Shorten a time-lag constant for wind-driven drying.

    The reduction grows linearly with wind speed and saturates at
    WIND_MAX_REDUCTION (20%) once wind reaches WIND_CAP_MPH (30 mph).
    Negative wind is treated as calm.

    Args:
        time_lag: Base time-lag constant (hours, > 0)
        wind: Wind speed (mph) or None for no adjustment

    Returns:
        Effective time-lag (hours), between 0.8 * time_lag and time_lag
    """
    tau = require_time_lag(time_lag)
    if wind is None:
        return tau
    speed = clamp(require_finite("wind", wind), 0.0, WIND_CAP_MPH)
    return tau * (1.0 - WIND_MAX_REDUCTION * speed / WIND_CAP_MPH)
