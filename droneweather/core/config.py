"""Configuration module for the Drone Weather Advisor."""
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """Application settings."""
    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        env_prefix="DRONEWEATHER_",
        extra="ignore",
    )

    # Core settings
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # Upstream weather provider
    OPENWEATHER_API_KEY: Optional[SecretStr] = None
    OPENWEATHER_BASE_URL: str = "https://api.openweathermap.org/data"
    REQUEST_TIMEOUT_SECONDS: float = Field(10.0, gt=0)
    DEMO_FALLBACK: bool = True

    # Forecast window handed to the presentation layer
    HOURLY_FORECAST_HOURS: int = Field(24, ge=1, le=48)
    DAILY_FORECAST_DAYS: int = Field(5, ge=1, le=8)

    # API server configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_CORS_ORIGINS: List[str] = ["*"]

    # Default location (Fuengirola, Málaga, Spain)
    DEFAULT_LATITUDE: float = Field(36.54167, ge=-90, le=90)
    DEFAULT_LONGITUDE: float = Field(-4.625, ge=-180, le=180)
    DEFAULT_LOCATION_NAME: str = "Fuengirola, Málaga, Spain"

    # Drone profile
    DRONE_MODEL: str = "DJI Neo 2"
    DRONE_MAX_WIND_SPEED_MS: float = Field(10.0, gt=0)
    DRONE_MIN_OPERATING_TEMP_C: float = -10.0
    DRONE_MAX_OPERATING_TEMP_C: float = 40.0
    DRONE_MAX_ALTITUDE_M: float = Field(4000.0, gt=0)
    DRONE_IP_RATING: str = "none"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @property
    def has_api_key(self) -> bool:
        """Whether a usable upstream API key is configured."""
        return bool(self.OPENWEATHER_API_KEY and self.OPENWEATHER_API_KEY.get_secret_value().strip())

# Create global settings instance
settings = Settings()
