"""Weather data sources for the Drone Weather Advisor."""
from droneweather.data.data_loader import WeatherDataOrchestrator
from droneweather.data.demo_data import get_demo_weather_bundle, demo_current_snapshot
from droneweather.data.openweathermap_client import (
    OpenWeatherMapClient,
    WeatherSourceError,
    WeatherAuthError,
    WeatherPayloadError,
)

__all__ = [
    "WeatherDataOrchestrator",
    "get_demo_weather_bundle",
    "demo_current_snapshot",
    "OpenWeatherMapClient",
    "WeatherSourceError",
    "WeatherAuthError",
    "WeatherPayloadError",
]
