"""Common API endpoints router."""

import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.auth import get_settings
from core.config import Settings

router = APIRouter(tags=["common"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.api_version,
        timestamp=datetime.datetime.now().isoformat(),
    )
