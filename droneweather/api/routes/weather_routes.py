"""API routes for weather and flight-condition analysis."""
import logging
from typing import Optional
from typing_extensions import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, ConfigDict, Field

from droneweather.api.dependencies import get_drone_limits_dependency, get_flight_service
from droneweather.core.models_shared import WeatherBundle
from droneweather.data.openweathermap_client import WeatherSourceError
from droneweather.drone.models import DroneLimits, FlightOutlook, FlightReport, NarrativeReport
from droneweather.services.flight_service import FlightAdvisorService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Flight Conditions"])

class AnalyzeWeatherRequest(BaseModel):
    """Request body for narrative analysis, as posted by the web and mobile clients."""
    model_config = ConfigDict(populate_by_name=True)

    weather_data: WeatherBundle = Field(..., alias="weatherData")
    location_name: Optional[str] = Field(None, alias="locationName")

Latitude = Annotated[float, Path(ge=-90, le=90, description="Latitude in degrees")]
Longitude = Annotated[float, Path(ge=-180, le=180, description="Longitude in degrees")]

@router.get("/weather/{lat}/{lon}", response_model=FlightReport,
            summary="Get weather and flight status for a location")
async def get_weather_endpoint(
    lat: Latitude,
    lon: Longitude,
    name: Optional[str] = None,
    service: FlightAdvisorService = Depends(get_flight_service),
) -> FlightReport:
    """Current reading, hourly and daily forecast, and the flight verdict."""
    try:
        return await service.get_flight_report(lat, lon, location_name=name)
    except WeatherSourceError as e:
        logger.error(f"Weather API error: {str(e)}")
        raise HTTPException(status_code=502, detail="Failed to fetch weather data")

@router.get("/forecast/{lat}/{lon}", response_model=FlightOutlook,
            summary="Get flight verdicts for every forecast point")
async def get_forecast_endpoint(
    lat: Latitude,
    lon: Longitude,
    name: Optional[str] = None,
    service: FlightAdvisorService = Depends(get_flight_service),
) -> FlightOutlook:
    try:
        return await service.get_flight_outlook(lat, lon, location_name=name)
    except WeatherSourceError as e:
        logger.error(f"Forecast API error: {str(e)}")
        raise HTTPException(status_code=502, detail="Failed to fetch weather data")

@router.post("/analyze-weather", response_model=NarrativeReport,
             summary="Summarise flight conditions in plain language")
async def analyze_weather_endpoint(
    request: AnalyzeWeatherRequest,
    service: FlightAdvisorService = Depends(get_flight_service),
) -> NarrativeReport:
    return service.analyze(request.weather_data, location_name=request.location_name)

@router.get("/drone-specs", response_model=DroneLimits, summary="Get the configured drone profile")
async def drone_specs_endpoint(
    limits: DroneLimits = Depends(get_drone_limits_dependency),
) -> DroneLimits:
    return limits
