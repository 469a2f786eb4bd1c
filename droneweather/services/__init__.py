"""Services for the Drone Weather Advisor."""
from droneweather.services.flight_service import FlightAdvisorService

__all__ = ["FlightAdvisorService"]
