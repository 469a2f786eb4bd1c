"""API module for the Drone Weather Advisor."""
import logging
from droneweather.api.main import app
from droneweather.api.routes import api_router
from droneweather.api.dependencies import (
    get_drone_limits_dependency,
    get_data_orchestrator_dependency,
    get_flight_service,
)

logger = logging.getLogger(__name__)

__all__ = [
    "app",
    "api_router",
    "get_drone_limits_dependency",
    "get_data_orchestrator_dependency",
    "get_flight_service",
]
