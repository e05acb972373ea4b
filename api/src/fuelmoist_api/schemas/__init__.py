"""Pydantic schemas for the API."""

from fuelmoist_api.schemas.forecast import (
    AnalysisRequest,
    AnalysisResponse,
    DryingRequest,
    DryingResponse,
    ForecastRequest,
    ForecastResponse,
)
from fuelmoist_api.schemas.moisture import (
    ConvertRequest,
    ConvertResponse,
    EMCRequest,
    EMCResponse,
    StepRequest,
    StepResponse,
)
from fuelmoist_api.schemas.trend import TrendRequest, TrendResponse

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "ConvertRequest",
    "ConvertResponse",
    "DryingRequest",
    "DryingResponse",
    "EMCRequest",
    "EMCResponse",
    "ForecastRequest",
    "ForecastResponse",
    "StepRequest",
    "StepResponse",
    "TrendRequest",
    "TrendResponse",
]
