"""FastAPI application factory.

Creates the FastAPI app with all routers, middleware, and the engine
error handler.

Usage:
    uvicorn fuelmoist_api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fuelmoist import FuelMoistureError, __version__
from fuelmoist_api.routers import drying, forecasts, health, moisture

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    logger.info("FuelMoist API started")
    yield


async def engine_error_handler(request: Request, exc: FuelMoistureError) -> JSONResponse:
    """Reject requests the engine refuses with 422 and the error class name."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="FuelMoist API",
        description="Dead fuel moisture forecasting API",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS, allow frontend dev server
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(FuelMoistureError, engine_error_handler)

    # Register routers
    application.include_router(health.router)
    application.include_router(moisture.router)
    application.include_router(forecasts.router)
    application.include_router(drying.router)

    return application


app = create_app()
