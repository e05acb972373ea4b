"""Constant-weather drying simulation and drying pattern analysis."""

from __future__ import annotations

from fastapi import APIRouter

from fuelmoist_api.schemas.forecast import (
    AnalysisRequest,
    AnalysisResponse,
    DryingRequest,
    DryingResponse,
)
from fuelmoist_api.services import modeling

router = APIRouter(prefix="/api/v1/drying", tags=["drying"])


@router.post("/simulate", response_model=DryingResponse)
async def simulate(params: DryingRequest) -> DryingResponse:
    return modeling.simulate(params)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(params: AnalysisRequest) -> AnalysisResponse:
    return modeling.analyze(params)
