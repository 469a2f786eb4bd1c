"""Weather data orchestration with demo fallback."""
import logging
from typing import Optional

from droneweather.core.config import Settings, settings as default_settings
from droneweather.core.models_shared import Coordinate, LocationInfo, WeatherBundle
from droneweather.data.demo_data import get_demo_weather_bundle
from droneweather.data.openweathermap_client import OpenWeatherMapClient, WeatherSourceError

logger = logging.getLogger(__name__)

class WeatherDataOrchestrator:
    """Fetches weather from OpenWeatherMap and degrades to demo data when it cannot."""

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        client: Optional[OpenWeatherMapClient] = None,
    ):
        self.settings = app_settings or default_settings
        self.client = client
        if self.client is None and self.settings.has_api_key:
            self.client = OpenWeatherMapClient(
                api_key=self.settings.OPENWEATHER_API_KEY.get_secret_value(),
                base_url=self.settings.OPENWEATHER_BASE_URL,
                timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
            )

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()

    async def get_weather(
        self,
        latitude: float,
        longitude: float,
        location_name: Optional[str] = None,
    ) -> WeatherBundle:
        """
        Get current and forecast weather for a location.

        Raises:
            WeatherSourceError: upstream failed and demo fallback is disabled
        """
        if self.client is None:
            logger.warning("No OpenWeatherMap API key configured, using demo data")
            bundle = get_demo_weather_bundle()
        else:
            try:
                bundle = await self.client.get_weather(latitude, longitude)
            except WeatherSourceError as e:
                if not self.settings.DEMO_FALLBACK:
                    logger.error(f"Weather source failed: {str(e)}")
                    raise
                logger.warning(f"Weather source failed, using demo data: {str(e)}")
                bundle = get_demo_weather_bundle()

        location = LocationInfo(
            name=location_name or f"{latitude:.4f}, {longitude:.4f}",
            coordinates=Coordinate(latitude=latitude, longitude=longitude),
        )
        return bundle.model_copy(update={"location": location})
