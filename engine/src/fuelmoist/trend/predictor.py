"""Drying trend prediction from historical and forecast weather.

The historical window is folded first to bring the current moisture up
to date with recent weather; the forecast window then continues from
that state. Samples that carry wind use a shortened effective time-lag.

Usage:
    prediction = predict_drying_trend(
        15.0,
        [{"temp": 70, "rh": 60}, {"temp": 75, "rh": 55}],
        [{"temp": 85, "rh": 35}, {"temp": 92, "rh": 20}],
        time_lag=10,
    )
    print(prediction.summary.critical_time)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from fuelmoist.errors import InvalidInputError, InvalidSeriesError, OutOfRangeError
from fuelmoist.moisture.constants import DEFAULT_CRITICAL_THRESHOLD
from fuelmoist.moisture.emc import compute_emc
from fuelmoist.moisture.timelag import step_moisture, wind_adjusted_time_lag
from fuelmoist.trend.interpolation import as_sample, interpolate_series
from fuelmoist.types import (
    Resolution,
    TrendEntry,
    TrendKind,
    TrendMetadata,
    TrendPrediction,
    TrendSummary,
    WeatherSample,
)
from fuelmoist.validation import require_finite, require_series, require_time_lag, round1

logger = logging.getLogger(__name__)

MOISTURE_MIN = 0.0
MOISTURE_MAX = 100.0


@dataclass(frozen=True)
class TrendOptions:
    """Options for predict_drying_trend.

    Attributes:
        resolution: Sample spacing (hourly = 1 h, daily = 24 h)
        interpolate_missing: Fill gaps in both series before use
        critical_threshold: Moisture (%) at or below which fuel is critical
    """

    resolution: Resolution = Resolution.DAILY
    interpolate_missing: bool = True
    critical_threshold: float = DEFAULT_CRITICAL_THRESHOLD


def _unit_name(resolution: Resolution) -> str:
    return "Hour" if resolution is Resolution.HOURLY else "Day"


def _default_label(kind: TrendKind, index: int, count: int, resolution: Resolution) -> str:
    """Historical samples count back to -1, forecast samples count up from 1."""
    offset = index - count if kind is TrendKind.HISTORICAL else index + 1
    return f"{_unit_name(resolution)} {offset}"


def _prepare(
    name: str,
    series: Sequence[WeatherSample | Mapping[str, Any]],
    interpolate: bool,
) -> list[WeatherSample]:
    require_series(name, series)
    if interpolate:
        samples = interpolate_series(series)
    else:
        samples = [as_sample(item, i) for i, item in enumerate(series)]

    for index, sample in enumerate(samples):
        try:
            require_finite("temp", sample.temperature)
            require_finite("rh", sample.relative_humidity)
            if sample.wind is not None:
                require_finite("wind", sample.wind)
        except InvalidInputError as e:
            raise InvalidSeriesError(f"{name} sample {index} is malformed: {e}") from e
    return samples


def predict_drying_trend(
    current_moisture: float,
    historical: Sequence[WeatherSample | Mapping[str, Any]],
    forecast: Sequence[WeatherSample | Mapping[str, Any]],
    time_lag: float,
    options: TrendOptions | None = None,
) -> TrendPrediction:
    """Predict the drying trend of one fuel class.

    Args:
        current_moisture: Current fuel moisture (%), 0-100
        historical: Past weather, oldest first
        forecast: Future weather, nearest first
        time_lag: Fuel time-lag constant (hours, > 0)
        options: TrendOptions (defaults: daily, interpolate, 6%)

    Returns:
        TrendPrediction with metadata, concatenated trend and summary

    Raises:
        InvalidInputError: Non-finite current_moisture or threshold
        OutOfRangeError: current_moisture outside 0-100
        InvalidTimeLagError: time_lag <= 0
        InvalidSeriesError: Empty/non-sequence series or malformed sample
    """
    options = options or TrendOptions()
    moisture = require_finite("current_moisture", current_moisture)
    if not MOISTURE_MIN <= moisture <= MOISTURE_MAX:
        raise OutOfRangeError(
            f"current_moisture must be between {MOISTURE_MIN} and {MOISTURE_MAX}, got {moisture}"
        )
    tau = require_time_lag(time_lag)
    threshold = require_finite("critical_threshold", options.critical_threshold)
    try:
        resolution = Resolution(options.resolution)
    except ValueError:
        raise InvalidInputError(f"Unknown resolution: {options.resolution!r}") from None
    hours = resolution.hours

    windows = (
        (TrendKind.HISTORICAL, _prepare("historical", historical, options.interpolate_missing)),
        (TrendKind.FORECAST, _prepare("forecast", forecast, options.interpolate_missing)),
    )

    trend: list[TrendEntry] = []
    critical_time: str | None = None
    for kind, samples in windows:
        for index, sample in enumerate(samples):
            effective_tau = wind_adjusted_time_lag(tau, sample.wind)
            emc = compute_emc(sample.temperature, sample.relative_humidity)
            moisture = step_moisture(moisture, emc, hours, effective_tau)
            label = (
                sample.label
                if sample.label is not None
                else _default_label(kind, index, len(samples), resolution)
            )
            if critical_time is None and moisture <= threshold:
                critical_time = label
            trend.append(
                TrendEntry(
                    label=label,
                    kind=kind,
                    temperature=sample.temperature,
                    relative_humidity=sample.relative_humidity,
                    emc=emc,
                    moisture=moisture,
                    effective_time_lag=effective_tau,
                    wind=sample.wind,
                )
            )

    starting = float(current_moisture)
    ending = trend[-1].moisture
    values = [entry.moisture for entry in trend]
    summary = TrendSummary(
        starting_moisture=starting,
        ending_moisture=ending,
        moisture_change=round1(ending - starting),
        critical_time=critical_time,
        below_critical=critical_time is not None,
        min_moisture=min(values),
        max_moisture=max(values),
    )
    metadata = TrendMetadata(
        initial_moisture=starting,
        time_lag=tau,
        resolution=resolution,
        hours_per_sample=hours,
        critical_threshold=threshold,
        interpolate_missing=options.interpolate_missing,
        historical_count=len(windows[0][1]),
        forecast_count=len(windows[1][1]),
    )

    logger.debug(
        "Trend: tau=%.1fh, %d historical + %d forecast samples, %.1f -> %.1f, critical=%s",
        tau,
        metadata.historical_count,
        metadata.forecast_count,
        starting,
        ending,
        critical_time,
    )

    return TrendPrediction(metadata=metadata, trend=tuple(trend), summary=summary)
