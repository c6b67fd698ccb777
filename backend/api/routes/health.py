"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from shared.config import get_settings
from modules.users.interfaces import IUserStore

from ..dependencies import get_user_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    """Welcome message."""
    return "Welcome to my kraftFlix app!"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    store: IUserStore = Depends(get_user_store),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Pings the user store; an unreachable store becomes a 503 through the
    application's StoreUnavailableError handler.
    """
    await store.ping()
    return ReadinessResponse(status="ready", database="connected")
