"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import get_settings
from shared.exceptions import ServerError

from ..dependencies import get_user_repository

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(users=Depends(get_user_repository)):
    """
    Readiness check endpoint.

    Returns 503 when the store is not configured or cannot be queried.
    """
    if users is None:
        return _unavailable()
    try:
        users.ping()
    except ServerError:
        return _unavailable()
    return ReadinessResponse(status="ready", database="connected")


def _unavailable() -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="unavailable", database="unreachable").model_dump(),
    )
