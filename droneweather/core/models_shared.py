"""Shared weather data models for the Drone Weather Advisor."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Coordinate and location models
class Coordinate(BaseModel):
    """Geographic coordinate."""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class LocationInfo(BaseModel):
    """Location information."""
    name: str
    coordinates: Coordinate

# Condition groups reported by OpenWeatherMap in ``weather[0].main``
KNOWN_WEATHER_MAIN = (
    "Clear",
    "Clouds",
    "Rain",
    "Snow",
    "Thunderstorm",
    "Drizzle",
    "Mist",
    "Fog",
)

class WeatherSnapshot(BaseModel):
    """One weather reading for a single point in time (current or forecast)."""
    model_config = ConfigDict(frozen=True)

    temperature_c: float = Field(..., description="Air temperature in Celsius")
    wind_speed_ms: float = Field(..., ge=0, description="Sustained wind speed in m/s")
    wind_gust_ms: Optional[float] = Field(None, ge=0, description="Gust speed in m/s, defaults to wind speed")
    humidity_pct: Optional[float] = Field(None, ge=0, le=100, description="Relative humidity percentage")
    pressure_hpa: Optional[float] = Field(None, description="Atmospheric pressure in hPa")
    visibility_m: float = Field(10000.0, ge=0, description="Visibility in meters")
    weather_main: str = Field(..., description="Condition group, e.g. Clear, Clouds, Rain")
    weather_description: Optional[str] = Field(None, description="Free-text condition, e.g. scattered clouds")
    feels_like_c: Optional[float] = None
    observed_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def default_gust_to_wind_speed(cls, data):
        if isinstance(data, dict) and data.get("wind_gust_ms") is None and "wind_speed_ms" in data:
            data = {**data, "wind_gust_ms": data["wind_speed_ms"]}
        return data

    @property
    def description(self) -> str:
        return self.weather_description or self.weather_main.lower()

class DailyForecast(BaseModel):
    """Daily forecast point with a temperature range."""
    model_config = ConfigDict(frozen=True)

    observed_at: datetime
    temp_min_c: float
    temp_max_c: float
    wind_speed_ms: float = Field(..., ge=0)
    wind_gust_ms: Optional[float] = Field(None, ge=0)
    humidity_pct: Optional[float] = Field(None, ge=0, le=100)
    pressure_hpa: Optional[float] = None
    weather_main: str
    weather_description: Optional[str] = None

    def to_snapshot(self) -> WeatherSnapshot:
        """Collapse the day into a snapshot using the daily maximum temperature."""
        return WeatherSnapshot(
            temperature_c=self.temp_max_c,
            wind_speed_ms=self.wind_speed_ms,
            wind_gust_ms=self.wind_gust_ms,
            humidity_pct=self.humidity_pct,
            pressure_hpa=self.pressure_hpa,
            weather_main=self.weather_main,
            weather_description=self.weather_description,
            observed_at=self.observed_at,
        )

class WeatherBundle(BaseModel):
    """Current reading plus hourly and daily forecasts for one location."""
    current: WeatherSnapshot
    hourly: List[WeatherSnapshot] = Field(default_factory=list)
    daily: List[DailyForecast] = Field(default_factory=list)
    is_demo: bool = False
    api_version: str = "3.0"
    location: Optional[LocationInfo] = None

    def trimmed(self, hours: int, days: int) -> "WeatherBundle":
        """Return a copy limited to the first ``hours`` and ``days`` points."""
        return self.model_copy(update={"hourly": self.hourly[:hours], "daily": self.daily[:days]})
