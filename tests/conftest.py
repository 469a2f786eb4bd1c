"""Pytest configuration with shared fixtures for the Drone Weather Advisor."""
import logging
from typing import Any, Callable, Dict

import httpx
import pytest
from hypothesis import settings as hypothesis_settings

from droneweather.core.config import Settings
from droneweather.core.models_shared import WeatherSnapshot
from droneweather.data.data_loader import WeatherDataOrchestrator
from droneweather.data.openweathermap_client import OpenWeatherMapClient
from droneweather.drone.models import DroneLimits
from droneweather.services.flight_service import FlightAdvisorService

logger = logging.getLogger(__name__)

@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any local .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="testing",
        LOG_LEVEL="DEBUG",
        OPENWEATHER_API_KEY=None,
        DEMO_FALLBACK=True,
    )

@pytest.fixture
def default_limits() -> DroneLimits:
    return DroneLimits()

@pytest.fixture
def make_snapshot() -> Callable[..., WeatherSnapshot]:
    """Factory for snapshots with sensible defaults."""
    def _make(**overrides: Any) -> WeatherSnapshot:
        fields: Dict[str, Any] = {
            "temperature_c": 20.0,
            "wind_speed_ms": 2.0,
            "humidity_pct": 50.0,
            "pressure_hpa": 1013.0,
            "weather_main": "Clear",
            "weather_description": "clear sky",
        }
        fields.update(overrides)
        return WeatherSnapshot(**fields)
    return _make

@pytest.fixture
def demo_orchestrator(test_settings) -> WeatherDataOrchestrator:
    """Orchestrator without an API key, always serving demo data."""
    return WeatherDataOrchestrator(app_settings=test_settings)

@pytest.fixture
def flight_service(demo_orchestrator, default_limits) -> FlightAdvisorService:
    return FlightAdvisorService(demo_orchestrator, default_limits)

@pytest.fixture
def mock_client_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], OpenWeatherMapClient]:
    """Build an OpenWeatherMap client whose HTTP traffic goes to ``handler``."""
    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> OpenWeatherMapClient:
        return OpenWeatherMapClient(
            api_key="test-key",
            base_url="https://api.test/data",
            transport=httpx.MockTransport(handler),
        )
    return _factory

@pytest.fixture
def one_call_response() -> Dict[str, Any]:
    """One Call 3.0 response trimmed to the fields the client reads."""
    return {
        "lat": 36.5417,
        "lon": -4.625,
        "current": {
            "dt": 1760886000,
            "temp": 22.4,
            "feels_like": 22.1,
            "pressure": 1017,
            "humidity": 58,
            "visibility": 10000,
            "wind_speed": 6.2,
            "wind_gust": 9.1,
            "weather": [{"main": "Clear", "description": "clear sky", "icon": "01d"}],
        },
        "hourly": [
            {
                "dt": 1760886000 + i * 3600,
                "temp": 22.0 - i * 0.5,
                "wind_speed": 4.0 + i,
                "weather": [{"main": "Rain" if i == 2 else "Clouds", "description": "test"}],
            }
            for i in range(4)
        ],
        "daily": [
            {
                "dt": 1760868000 + i * 86400,
                "temp": {"min": 14.0 + i, "max": 24.0 + i, "day": 20.0},
                "wind_speed": 5.5,
                "humidity": 60,
                "weather": [{"main": "Clear", "description": "sky is clear"}],
            }
            for i in range(8)
        ],
    }

@pytest.fixture
def v25_current_response() -> Dict[str, Any]:
    return {
        "dt": 1760886000,
        "main": {"temp": 19.5, "feels_like": 19.0, "pressure": 1012, "humidity": 85},
        "visibility": 4000,
        "wind": {"speed": 9.0, "gust": 12.5},
        "weather": [{"main": "Mist", "description": "mist"}],
    }

@pytest.fixture
def v25_forecast_response() -> Dict[str, Any]:
    # 2025-10-19 15:00 UTC onwards, three-hour steps across three days
    start = 1760886000
    return {
        "list": [
            {
                "dt": start + i * 10800,
                "main": {"temp": 15.0 + (i % 4), "pressure": 1012, "humidity": 70},
                "wind": {"speed": 3.0 + i * 0.1},
                "weather": [{"main": "Clouds", "description": "broken clouds"}],
            }
            for i in range(16)
        ]
    }

# Hypothesis settings for property-based testing
hypothesis_settings.register_profile("default", max_examples=100, deadline=5000)
hypothesis_settings.load_profile("default")
