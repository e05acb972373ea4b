"""Single-value moisture endpoints: EMC, one time-lag step, unit conversion."""

from __future__ import annotations

from fastapi import APIRouter

from fuelmoist import celsius_to_fahrenheit, compute_emc, fahrenheit_to_celsius, step_moisture
from fuelmoist.moisture.constants import RH_MAX, RH_MIN
from fuelmoist.moisture.emc import select_band
from fuelmoist.validation import clamp

from fuelmoist_api.schemas.moisture import (
    ConvertRequest,
    ConvertResponse,
    EMCRequest,
    EMCResponse,
    StepRequest,
    StepResponse,
)

router = APIRouter(prefix="/api/v1/moisture", tags=["moisture"])


@router.post("/emc", response_model=EMCResponse)
async def emc(params: EMCRequest) -> EMCResponse:
    """Equilibrium moisture content for one temperature/humidity pair."""
    value = compute_emc(params.temp, params.rh)
    band = select_band(clamp(params.rh, RH_MIN, RH_MAX))
    return EMCResponse(temp=params.temp, rh=params.rh, emc=value, band=band.name)


@router.post("/step", response_model=StepResponse)
async def step(params: StepRequest) -> StepResponse:
    """Advance moisture toward EMC over one interval."""
    moisture = step_moisture(params.initial, params.emc, params.hours, params.time_lag)
    return StepResponse(moisture=moisture)


@router.post("/convert", response_model=ConvertResponse)
async def convert(params: ConvertRequest) -> ConvertResponse:
    """Convert a temperature between Celsius and Fahrenheit."""
    if params.unit == "C":
        return ConvertResponse(celsius=params.value, fahrenheit=celsius_to_fahrenheit(params.value))
    return ConvertResponse(celsius=fahrenheit_to_celsius(params.value), fahrenheit=params.value)
