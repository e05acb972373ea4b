"""Drying pattern analysis over a moisture time series."""

from __future__ import annotations

from collections.abc import Sequence

from fuelmoist.errors import InvalidSeriesError
from fuelmoist.moisture.constants import DEFAULT_CRITICAL_THRESHOLD
from fuelmoist.types import CriticalPeriod, DryingAnalysis, DryingPoint, RateStats, TimeLagClass
from fuelmoist.validation import is_finite_number, require_finite, require_series


def _rate_stats(rates: list[float]) -> RateStats:
    if not rates:
        return RateStats()
    return RateStats(
        avg=round(sum(rates) / len(rates), 3),
        max=round(max(rates), 3),
        min=round(min(rates), 3),
    )


def _drying_rates(points: Sequence[DryingPoint], cls: TimeLagClass) -> list[float]:
    """Moisture change per hour between consecutive points with dt > 0."""
    rates = []
    for prev, cur in zip(points, points[1:]):
        dt = cur.hour - prev.hour
        if dt > 0:
            rates.append((cur.moisture[cls] - prev.moisture[cls]) / dt)
    return rates


def _critical_periods(
    points: Sequence[DryingPoint], cls: TimeLagClass, threshold: float
) -> list[CriticalPeriod]:
    periods = []
    start: float | None = None
    last_hour = points[0].hour
    for point in points:
        critical = point.moisture[cls] <= threshold
        if critical and start is None:
            start = point.hour
        elif not critical and start is not None:
            periods.append(CriticalPeriod(start=start, end=last_hour, duration=last_hour - start))
            start = None
        last_hour = point.hour
    if start is not None:
        periods.append(CriticalPeriod(start=start, end=last_hour, duration=last_hour - start))
    return periods


def analyze_drying_pattern(
    points: Sequence[DryingPoint],
    critical_threshold: float = DEFAULT_CRITICAL_THRESHOLD,
) -> DryingAnalysis:
    """Summarize drying rates, threshold crossings and critical periods.

    Classes are taken from the first point; every point must carry the
    same classes. Critical periods are reported for the fastest
    (smallest time-lag) class present.

    Args:
        points: Time-ordered moisture observations
        critical_threshold: Moisture (%) at or below which fuel is critical

    Returns:
        DryingAnalysis

    Raises:
        InvalidSeriesError: Empty/non-sequence input or malformed point
        InvalidInputError: Non-finite threshold
    """
    require_series("points", points)
    threshold = require_finite("critical_threshold", critical_threshold)

    first = points[0]
    if not isinstance(first, DryingPoint) or not first.moisture:
        raise InvalidSeriesError("points must be DryingPoint records with at least one fuel class")
    classes = sorted(first.moisture)
    for index, point in enumerate(points):
        if not isinstance(point, DryingPoint) or not is_finite_number(point.hour):
            raise InvalidSeriesError(f"Point {index} is malformed")
        for cls in classes:
            if not is_finite_number(point.moisture.get(cls)):
                raise InvalidSeriesError(f"Point {index} has no finite {cls.label} moisture")

    rates = {cls: _rate_stats(_drying_rates(points, cls)) for cls in classes}
    crossings: dict[TimeLagClass, float | None] = {
        cls: next((p.hour for p in points if p.moisture[cls] <= threshold), None)
        for cls in classes
    }

    return DryingAnalysis(
        critical_threshold=threshold,
        drying_rates=rates,
        threshold_crossings=crossings,
        critical_periods=tuple(_critical_periods(points, classes[0], threshold)),
    )
