"""Forecast and trend endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from fuelmoist_api.schemas.forecast import ForecastRequest, ForecastResponse
from fuelmoist_api.schemas.trend import TrendRequest, TrendResponse
from fuelmoist_api.services import modeling

router = APIRouter(prefix="/api/v1", tags=["forecasts"])


@router.post("/forecasts", response_model=ForecastResponse)
async def create_forecast(params: ForecastRequest) -> ForecastResponse:
    """Run a multi-period moisture forecast for one or more fuel classes."""
    return modeling.run_forecast(params)


@router.post("/trends", response_model=TrendResponse)
async def create_trend(params: TrendRequest) -> TrendResponse:
    """Predict the drying trend of one fuel class from past and forecast weather."""
    return modeling.predict_trend(params)
