"""API routes for health checks and application status."""
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, Field

from droneweather import __version__ as app_version
from droneweather.core.config import settings

router = APIRouter(tags=["Application Status"])

class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = "Healthy"
    timestamp_utc: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = app_version
    environment: str = settings.ENVIRONMENT.value
    live_data: bool = Field(default_factory=lambda: settings.has_api_key)

@router.get("/health", response_model=HealthResponse, summary="Application Health Check")
async def health_check_endpoint() -> HealthResponse:
    """Check application health and whether live weather data is configured."""
    return HealthResponse()
