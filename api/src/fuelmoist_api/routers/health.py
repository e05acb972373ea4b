"""Health check endpoint."""

from __future__ import annotations

import time

from fastapi import APIRouter
from pydantic import BaseModel

from fuelmoist import TimeLagClass, __version__

router = APIRouter(tags=["health"])

_start_time = time.time()


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    engine: str
    fuel_classes: list[int]


@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness, engine version, and the time-lag classes the engine accepts."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 1),
        engine="fuelmoist",
        fuel_classes=[int(cls) for cls in TimeLagClass],
    )
