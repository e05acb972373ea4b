"""Pydantic models for forecast and drying simulation endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fuelmoist_api.schemas.common import MoistureByClass, Number


class ForecastPeriodIn(BaseModel):
    """One row of a forecast table."""

    temp: Number = Field(..., description="Temperature (Fahrenheit)")
    rh: Number = Field(..., description="Relative humidity (%)")
    hours: Number | None = Field(default=None, description="Period length; default applies if omitted")
    wind: Number | None = Field(default=None, description="Wind speed (mph)")
    label: str | None = None


class ForecastRequest(BaseModel):
    """Request body for a multi-period forecast."""

    initial_moisture: MoistureByClass = Field(
        ..., description="Starting moisture (%) keyed by time-lag class hours"
    )
    periods: list[ForecastPeriodIn]
    default_hours: Number = Field(default=12.0, description="Hours for periods without hours")
    critical_threshold: Number = Field(default=6.0, description="Critical moisture (%)")
    label_prefix: str = "Day"


class PeriodOut(BaseModel):
    label: str
    temp: float
    rh: float
    hours: float
    emc: float
    moisture: dict[int, float]
    wind: float | None = None


class ForecastSummaryOut(BaseModel):
    first_critical: dict[int, str | None]
    final_moisture: dict[int, float]


class ForecastResponse(BaseModel):
    initial_moisture: dict[int, float]
    critical_threshold: float
    periods: list[PeriodOut]
    summary: ForecastSummaryOut


class DryingRequest(BaseModel):
    """Constant-weather drying simulation."""

    initial_moisture: MoistureByClass = Field(
        default_factory=lambda: {1: 15.0, 10: 18.0, 100: 20.0},
        description="Starting moisture (%) keyed by time-lag class hours",
    )
    temp: Number
    rh: Number
    duration_hours: Number = Field(..., gt=0, le=8760, description="Simulated time (hours)")
    step_hours: Number = Field(default=1.0, gt=0, le=168, description="Output spacing (hours)")


class DryingPointIO(BaseModel):
    hour: Number
    moisture: MoistureByClass
    emc: Number | None = None


class DryingResponse(BaseModel):
    emc: float
    series: list[DryingPointIO]
    initial: dict[int, float]
    final: dict[int, float]


class AnalysisRequest(BaseModel):
    points: list[DryingPointIO]
    critical_threshold: Number = 6.0


class RateStatsOut(BaseModel):
    avg: float
    max: float
    min: float


class CriticalPeriodOut(BaseModel):
    start: float
    end: float
    duration: float


class AnalysisResponse(BaseModel):
    critical_threshold: float
    drying_rates: dict[int, RateStatsOut]
    threshold_crossings: dict[int, float | None]
    critical_periods: list[CriticalPeriodOut]
