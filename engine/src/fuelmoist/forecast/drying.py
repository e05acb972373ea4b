"""Constant-condition drying simulation.

Holds temperature and humidity fixed and reports how each fuel class
approaches the resulting EMC over time.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping

from fuelmoist.errors import InvalidInputError, OutOfRangeError
from fuelmoist.moisture.constants import (
    DRYING_CLASSES,
    MAX_DRYING_POINTS,
    TIME_LAGS,
    get_time_lag_class,
)
from fuelmoist.moisture.emc import compute_emc
from fuelmoist.moisture.timelag import step_moisture
from fuelmoist.types import DryingPoint, DryingSimulation, TimeLagClass
from fuelmoist.validation import require_finite

logger = logging.getLogger(__name__)


def default_initial(m1: float, m10: float, m100: float) -> dict[TimeLagClass, float]:
    """Initial state for the standard 1/10/100-hr drying classes."""
    return dict(zip(DRYING_CLASSES, (m1, m10, m100)))


def _time_steps(count: int, step_hours: float) -> Iterator[float]:
    """Hours 0, step, 2*step, ... for count points."""
    for i in range(count):
        yield i * step_hours


def simulate_drying(
    initial_moisture: Mapping[TimeLagClass | int, float],
    temp_f: float,
    rh: float,
    duration_hours: float,
    step_hours: float = 1.0,
) -> DryingSimulation:
    """Simulate drying (or wetting) under constant weather.

    Each point is computed directly from the initial state at its
    elapsed hour, so rounding does not accumulate along the series.

    Args:
        initial_moisture: Starting moisture (%) per fuel class (see
            default_initial for the usual 1/10/100-hr set)
        temp_f: Air temperature (Fahrenheit)
        rh: Relative humidity (%)
        duration_hours: Total simulated time (hours, > 0)
        step_hours: Spacing of output points (hours, > 0)

    Returns:
        DryingSimulation with EMC, time series and initial/final values

    Raises:
        InvalidInputError: If any value is non-finite
        InvalidTimeLagError: If a class is unknown
        OutOfRangeError: If duration_hours or step_hours is not positive, or
            together they exceed MAX_DRYING_POINTS points
    """
    if not isinstance(initial_moisture, Mapping) or not initial_moisture:
        raise InvalidInputError("initial_moisture must map at least one fuel class to a moisture")
    initial: dict[TimeLagClass, float] = {}
    for key, value in initial_moisture.items():
        cls = get_time_lag_class(key)
        initial[cls] = require_finite(f"initial moisture ({cls.label})", value)

    duration = require_finite("duration_hours", duration_hours)
    step = require_finite("step_hours", step_hours)
    if duration <= 0.0 or step <= 0.0:
        raise OutOfRangeError(
            f"duration_hours and step_hours must be positive, got {duration} and {step}"
        )
    # Points at 0, step, ... up to and including duration.
    intervals = duration / step + 1e-9
    if intervals >= MAX_DRYING_POINTS:
        raise OutOfRangeError(
            f"duration_hours={duration} with step_hours={step} exceeds "
            f"the limit of {MAX_DRYING_POINTS} points"
        )
    count = math.floor(intervals) + 1

    emc = compute_emc(temp_f, rh)
    series = tuple(
        DryingPoint(
            hour=t,
            moisture={cls: step_moisture(m0, emc, t, TIME_LAGS[cls]) for cls, m0 in initial.items()},
            emc=emc,
        )
        for t in _time_steps(count, step)
    )

    logger.debug("Drying simulation: emc=%.1f, %d points over %.1fh", emc, len(series), duration)

    return DryingSimulation(
        emc=emc,
        series=series,
        initial=initial,
        final=dict(series[-1].moisture),
    )
