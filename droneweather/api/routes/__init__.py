"""API routes registration and main router."""
import logging
from fastapi import APIRouter

from droneweather.api.routes import health_routes, weather_routes

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix="/api")

api_router.include_router(weather_routes.router)
api_router.include_router(health_routes.router)

__all__ = ["api_router"]
