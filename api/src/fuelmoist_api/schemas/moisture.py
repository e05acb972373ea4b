"""Pydantic models for single-value moisture endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from fuelmoist_api.schemas.common import Number


class EMCRequest(BaseModel):
    """Weather for an EMC estimate."""

    temp: Number = Field(..., description="Air temperature (Fahrenheit)")
    rh: Number = Field(..., description="Relative humidity (%), clamped to 0-100")


class EMCResponse(BaseModel):
    temp: float
    rh: float
    emc: float
    band: str


class StepRequest(BaseModel):
    """Inputs for one time-lag step toward EMC."""

    initial: Number = Field(..., description="Starting moisture (%)")
    emc: Number = Field(..., description="Equilibrium moisture target (%)")
    hours: Number = Field(..., description="Elapsed time (hours)")
    time_lag: Number = Field(..., description="Fuel time-lag constant (hours)")


class StepResponse(BaseModel):
    moisture: float


class ConvertRequest(BaseModel):
    """Temperature to convert."""

    value: Number
    unit: Literal["C", "F"] = Field(..., description="Unit of value")


class ConvertResponse(BaseModel):
    celsius: float
    fahrenheit: float
