"""Multi-period fuel moisture forecast.

Folds the time-lag stepper over an ordered sequence of forecast periods
for one or more fuel classes. Each period's output moisture is the next
period's input; EMC is computed once per period and shared by all
classes.

Usage:
    result = run_model(
        {TimeLagClass.ONE_HOUR: 10.0, TimeLagClass.TEN_HOUR: 12.0},
        [ForecastPeriod(temperature=85.0, relative_humidity=30.0, hours=12.0)],
    )
    print(result.summary.first_critical[TimeLagClass.ONE_HOUR])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fuelmoist.errors import InvalidInputError, InvalidSeriesError
from fuelmoist.moisture.constants import (
    DEFAULT_CRITICAL_THRESHOLD,
    DEFAULT_LABEL_PREFIX,
    DEFAULT_PERIOD_HOURS,
    TIME_LAGS,
    get_time_lag_class,
)
from fuelmoist.moisture.emc import compute_emc
from fuelmoist.moisture.timelag import step_moisture
from fuelmoist.types import (
    ForecastPeriod,
    ForecastResult,
    ForecastSummary,
    PeriodResult,
    TimeLagClass,
)
from fuelmoist.validation import require_finite, require_series

logger = logging.getLogger(__name__)


def coerce_period(entry: ForecastPeriod | Mapping[str, Any], index: int) -> ForecastPeriod:
    """Normalize a forecast entry to a ForecastPeriod.

    Mappings use the keys temp, rh, hours, wind and label. A key that is
    absent (or None) counts as not supplied; any other value, including
    0, is kept.

    Raises:
        InvalidSeriesError: If the entry is not a period/mapping or lacks
            temp or rh
    """
    if isinstance(entry, ForecastPeriod):
        return entry
    if not isinstance(entry, Mapping):
        raise InvalidSeriesError(
            f"Forecast entry {index} must be a ForecastPeriod or mapping, "
            f"got {type(entry).__name__}"
        )
    missing = [key for key in ("temp", "rh") if entry.get(key) is None]
    if missing:
        raise InvalidSeriesError(
            f"Forecast entry {index} is missing required field(s): {', '.join(missing)}"
        )
    return ForecastPeriod(
        temperature=entry["temp"],
        relative_humidity=entry["rh"],
        hours=entry.get("hours"),
        wind=entry.get("wind"),
        label=entry.get("label"),
    )


def _validate_period(
    period: ForecastPeriod, index: int, default_hours: float
) -> tuple[float, float, float, float | None]:
    """Return (temp, rh, hours, wind) for a period, applying defaults."""
    try:
        temp = require_finite("temp", period.temperature)
        rh = require_finite("rh", period.relative_humidity)
        hours = default_hours if period.hours is None else require_finite("hours", period.hours)
        wind = None if period.wind is None else require_finite("wind", period.wind)
    except InvalidInputError as e:
        raise InvalidSeriesError(f"Forecast entry {index} has invalid values: {e}") from e
    if hours < 0.0:
        raise InvalidSeriesError(f"Forecast entry {index} has negative hours: {hours}")
    return temp, rh, hours, wind


def _validate_initial(
    initial_moisture: Mapping[TimeLagClass | int, float],
) -> dict[TimeLagClass, float]:
    if not isinstance(initial_moisture, Mapping) or not initial_moisture:
        raise InvalidInputError("initial_moisture must map at least one fuel class to a moisture")
    initial: dict[TimeLagClass, float] = {}
    for key, value in initial_moisture.items():
        cls = get_time_lag_class(key)
        initial[cls] = require_finite(f"initial moisture ({cls.label})", value)
    return initial


def run_model(
    initial_moisture: Mapping[TimeLagClass | int, float],
    periods: Sequence[ForecastPeriod | Mapping[str, Any]],
    *,
    default_hours: float = DEFAULT_PERIOD_HOURS,
    critical_threshold: float = DEFAULT_CRITICAL_THRESHOLD,
    label_prefix: str = DEFAULT_LABEL_PREFIX,
) -> ForecastResult:
    """Run a multi-period moisture forecast.

    All periods are evaluated even after a class crosses the critical
    threshold so that final moisture reflects the whole forecast.

    Args:
        initial_moisture: Starting moisture (%) per tracked fuel class
        periods: Ordered forecast periods (ForecastPeriod or mappings
            with temp, rh and optional hours, wind, label)
        default_hours: Duration used for periods that omit hours
        critical_threshold: Moisture (%) at or below which a class is
            flagged critical
        label_prefix: Prefix for positional labels ("Day 1", ...)

    Returns:
        ForecastResult with per-period records and summary

    Raises:
        InvalidInputError: Bad initial moisture or options
        InvalidTimeLagError: Unknown fuel class in initial_moisture
        InvalidSeriesError: Empty/non-sequence periods or malformed entry
    """
    initial = _validate_initial(initial_moisture)
    require_series("periods", periods)
    default_hours = require_finite("default_hours", default_hours)
    threshold = require_finite("critical_threshold", critical_threshold)

    current = dict(initial)
    first_critical: dict[TimeLagClass, str | None] = {cls: None for cls in initial}
    results: list[PeriodResult] = []

    for index, entry in enumerate(periods):
        period = coerce_period(entry, index)
        temp, rh, hours, wind = _validate_period(period, index, default_hours)
        label = period.label if period.label is not None else f"{label_prefix} {index + 1}"

        emc = compute_emc(temp, rh)
        for cls in current:
            current[cls] = step_moisture(current[cls], emc, hours, TIME_LAGS[cls])
            if first_critical[cls] is None and current[cls] <= threshold:
                first_critical[cls] = label

        results.append(
            PeriodResult(
                label=label,
                temperature=temp,
                relative_humidity=rh,
                hours=hours,
                emc=emc,
                moisture=dict(current),
                wind=wind,
            )
        )

    logger.debug(
        "Forecast complete: %d periods, final=%s, first_critical=%s",
        len(results),
        {cls.label: m for cls, m in current.items()},
        {cls.label: lbl for cls, lbl in first_critical.items()},
    )

    return ForecastResult(
        initial_moisture=initial,
        periods=tuple(results),
        summary=ForecastSummary(first_critical=first_critical, final_moisture=dict(current)),
        critical_threshold=threshold,
    )
