"""Core module for the Drone Weather Advisor."""
from logging import getLogger
from droneweather.core.config import settings, Settings
from droneweather.core.utils import (
    parse_location_string,
    format_number,
    setup_logging,
    configure_locale,
)
from droneweather.core.models_shared import (
    Coordinate,
    LocationInfo,
    WeatherSnapshot,
    DailyForecast,
    WeatherBundle,
    KNOWN_WEATHER_MAIN,
)

logger = getLogger(__name__)

__all__ = [
    "settings",
    "Settings",
    "parse_location_string",
    "format_number",
    "setup_logging",
    "configure_locale",
    "Coordinate",
    "LocationInfo",
    "WeatherSnapshot",
    "DailyForecast",
    "WeatherBundle",
    "KNOWN_WEATHER_MAIN",
]
