"""Shared dataclasses and type definitions for fuelmoist."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any


def _freeze(record: Any, *names: str) -> None:
    """Replace mapping fields of a frozen record with read-only copies."""
    for name in names:
        object.__setattr__(record, name, MappingProxyType(dict(getattr(record, name))))


class TimeLagClass(IntEnum):
    """Dead fuel size class, valued by its time-lag constant in hours."""

    ONE_HOUR = 1
    TEN_HOUR = 10
    HUNDRED_HOUR = 100
    THOUSAND_HOUR = 1000

    @property
    def label(self) -> str:
        return f"{self.value}-hr"


class Resolution(str, Enum):
    """Spacing between consecutive samples of a weather series."""

    HOURLY = "hourly"
    DAILY = "daily"

    @property
    def hours(self) -> float:
        return 1.0 if self is Resolution.HOURLY else 24.0


class TrendKind(str, Enum):
    """Which window of a trend prediction an entry belongs to."""

    HISTORICAL = "historical"
    FORECAST = "forecast"


@dataclass(frozen=True)
class WeatherSample:
    """One weather observation or forecast value.

    None marks a missing value. Only gap interpolation and the trend
    predictor accept missing temperature or humidity.
    """

    temperature: float | None  # Fahrenheit
    relative_humidity: float | None  # percent (clamped to 0-100 on use)
    wind: float | None = None  # mph
    label: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> WeatherSample:
        """Build from a {temp, rh, wind, label} mapping.

        Absent keys become None. Values are passed through unchanged so
        validation downstream sees exactly what the caller supplied.
        """
        return cls(
            temperature=data.get("temp"),
            relative_humidity=data.get("rh"),
            wind=data.get("wind"),
            label=data.get("label"),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    """Weather for one forecast period plus its duration.

    hours=None means "not supplied" and is replaced by the driver's
    default. An explicit 0 is kept.
    """

    temperature: float  # Fahrenheit
    relative_humidity: float  # percent
    hours: float | None = None
    wind: float | None = None  # mph
    label: str | None = None


@dataclass(frozen=True)
class PeriodResult:
    """Model output for one forecast period."""

    label: str
    temperature: float  # Fahrenheit
    relative_humidity: float  # percent, as supplied
    hours: float
    emc: float  # percent
    moisture: Mapping[TimeLagClass, float]  # percent, per tracked class
    wind: float | None = None  # mph

    def __post_init__(self) -> None:
        _freeze(self, "moisture")


@dataclass(frozen=True)
class ForecastSummary:
    """Aggregate outcome of a forecast run."""

    first_critical: Mapping[TimeLagClass, str | None]
    final_moisture: Mapping[TimeLagClass, float]

    def __post_init__(self) -> None:
        _freeze(self, "first_critical", "final_moisture")


@dataclass(frozen=True)
class ForecastResult:
    """Complete output from a multi-period forecast."""

    initial_moisture: Mapping[TimeLagClass, float]
    periods: tuple[PeriodResult, ...]
    summary: ForecastSummary
    critical_threshold: float

    def __post_init__(self) -> None:
        _freeze(self, "initial_moisture")


@dataclass(frozen=True)
class TrendEntry:
    """A single step of a drying trend."""

    label: str
    kind: TrendKind
    temperature: float  # Fahrenheit, after interpolation
    relative_humidity: float  # percent, after interpolation
    emc: float
    moisture: float
    effective_time_lag: float  # hours, after wind adjustment
    wind: float | None = None


@dataclass(frozen=True)
class TrendMetadata:
    """Echo of the inputs and options a trend was computed with."""

    initial_moisture: float
    time_lag: float
    resolution: Resolution
    hours_per_sample: float
    critical_threshold: float
    interpolate_missing: bool
    historical_count: int
    forecast_count: int


@dataclass(frozen=True)
class TrendSummary:
    """Summary statistics over an entire trend."""

    starting_moisture: float
    ending_moisture: float
    moisture_change: float
    critical_time: str | None
    below_critical: bool
    min_moisture: float
    max_moisture: float


@dataclass(frozen=True)
class TrendPrediction:
    """Historical + forecast drying trend for one fuel class."""

    metadata: TrendMetadata
    trend: tuple[TrendEntry, ...]
    summary: TrendSummary


@dataclass(frozen=True)
class DryingPoint:
    """Moisture per class at a given elapsed hour."""

    hour: float
    moisture: Mapping[TimeLagClass, float]
    emc: float | None = None

    def __post_init__(self) -> None:
        _freeze(self, "moisture")


@dataclass(frozen=True)
class DryingSimulation:
    """Constant-condition drying time series."""

    emc: float
    series: tuple[DryingPoint, ...]
    initial: Mapping[TimeLagClass, float]
    final: Mapping[TimeLagClass, float]

    def __post_init__(self) -> None:
        _freeze(self, "initial", "final")


@dataclass(frozen=True)
class RateStats:
    """Drying rate statistics in percent per hour (negative = drying)."""

    avg: float = 0.0
    max: float = 0.0
    min: float = 0.0


@dataclass(frozen=True)
class CriticalPeriod:
    """A run of consecutive points at or below the critical threshold."""

    start: float  # hour
    end: float  # hour
    duration: float  # hours


@dataclass(frozen=True)
class DryingAnalysis:
    """Drying rates, threshold crossings and critical periods."""

    critical_threshold: float
    drying_rates: Mapping[TimeLagClass, RateStats]
    threshold_crossings: Mapping[TimeLagClass, float | None]
    critical_periods: tuple[CriticalPeriod, ...]

    def __post_init__(self) -> None:
        _freeze(self, "drying_rates", "threshold_crossings")
