"""FastAPI dependencies for the Drone Weather Advisor API."""
from functools import lru_cache
import logging

from fastapi import Depends

from droneweather.core.config import settings
from droneweather.data.data_loader import WeatherDataOrchestrator
from droneweather.drone.models import DroneLimits
from droneweather.services.flight_service import FlightAdvisorService

logger = logging.getLogger(__name__)

@lru_cache()
def get_drone_limits_dependency() -> DroneLimits:
    """Get the drone profile configured for this process."""
    limits = DroneLimits.from_settings(settings)
    logger.debug(f"Using drone profile {limits.model_name}")
    return limits

@lru_cache()
def get_data_orchestrator_dependency() -> WeatherDataOrchestrator:
    """Get or create data orchestrator instance."""
    logger.debug("Creating WeatherDataOrchestrator instance")
    return WeatherDataOrchestrator()

def get_flight_service(
    data_orchestrator: WeatherDataOrchestrator = Depends(get_data_orchestrator_dependency),
    limits: DroneLimits = Depends(get_drone_limits_dependency),
) -> FlightAdvisorService:
    """Get flight advisor service with dependencies."""
    return FlightAdvisorService(data_orchestrator, limits)
