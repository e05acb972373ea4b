"""Pydantic models for the drying trend endpoint."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from fuelmoist_api.schemas.common import Number


class WeatherSampleIn(BaseModel):
    """A weather sample; null temp/rh are filled when interpolation is on."""

    temp: Number | None = None
    rh: Number | None = None
    wind: Number | None = None
    label: str | None = None


class TrendRequest(BaseModel):
    """Request body for a drying trend prediction."""

    current_moisture: Number = Field(..., description="Current fuel moisture (%)")
    historical: list[WeatherSampleIn]
    forecast: list[WeatherSampleIn]
    time_lag: Number = Field(..., description="Fuel time-lag constant (hours)")
    resolution: Literal["hourly", "daily"] = "daily"
    interpolate_missing: bool = True
    critical_threshold: Number = 6.0


class TrendEntryOut(BaseModel):
    label: str
    type: Literal["historical", "forecast"]
    temp: float
    rh: float
    emc: float
    moisture: float
    effective_time_lag: float
    wind: float | None = None


class TrendMetadataOut(BaseModel):
    initial_moisture: float
    time_lag: float
    resolution: str
    hours_per_sample: float
    critical_threshold: float
    interpolate_missing: bool
    historical_count: int
    forecast_count: int


class TrendSummaryOut(BaseModel):
    starting_moisture: float
    ending_moisture: float
    moisture_change: float
    critical_time: str | None
    below_critical: bool
    min_moisture: float
    max_moisture: float


class TrendResponse(BaseModel):
    metadata: TrendMetadataOut
    trend: list[TrendEntryOut]
    summary: TrendSummaryOut
