"""Utility functions for the Drone Weather Advisor."""
import locale
import logging
from typing import Optional, Tuple

from rich.text import Text

from droneweather.core.config import settings

logger = logging.getLogger(__name__)

# Predefined city coordinates
CITY_COORDINATES = {
    "fuengirola": (36.54167, -4.62500, "Fuengirola, Málaga, Spain"),
    "malaga": (36.72016, -4.42034, "Málaga, Spain"),
    "london": (51.5074, -0.1278, "London"),
    "new york": (40.7128, -74.0060, "New York"),
    "tokyo": (35.6895, 139.6917, "Tokyo"),
    "paris": (48.8566, 2.3522, "Paris"),
    "berlin": (52.5200, 13.4050, "Berlin"),
    "san francisco": (37.7749, -122.4194, "San Francisco"),
    "sydney": (-33.8688, 151.2093, "Sydney"),
}

def parse_location_string(location_str: Optional[str]) -> Tuple[float, float, str]:
    """Parse location string into latitude, longitude, and location name.

    Accepts "lat,lon" pairs or one of the known city names. Anything else
    resolves to the configured default location.
    """
    location_str = (location_str or "").strip()

    try:
        lat, lon = map(float, location_str.split(","))
        if -90 <= lat <= 90 and -180 <= lon <= 180:
            return lat, lon, f"{lat:.4f}, {lon:.4f}"
        logger.warning(f"Coordinates '{location_str}' out of range, using default location")
    except ValueError:
        pass

    location_str_lower = location_str.lower()
    if location_str_lower in CITY_COORDINATES:
        return CITY_COORDINATES[location_str_lower]

    if location_str:
        logger.warning(f"Location '{location_str}' not found, defaulting to {settings.DEFAULT_LOCATION_NAME}")
    return settings.DEFAULT_LATITUDE, settings.DEFAULT_LONGITUDE, settings.DEFAULT_LOCATION_NAME

def format_number(value: Optional[float]) -> str:
    """Render a reading without a trailing ".0" (18.0 -> "18", 3.5 -> "3.5")."""
    if value is None:
        return "-"
    return f"{value:g}"

def _format_temperature_rich(temp: Optional[float]) -> Text:
    """Format temperature with color based on value."""
    if temp is None:
        return Text("-", style="dim")

    text = Text(f"{temp:.1f}" if isinstance(temp, float) else f"{temp}")

    if temp < 0:
        text.stylize("bold bright_blue")
    elif temp < 10:
        text.stylize("blue")
    elif temp < 20:
        text.stylize("green")
    elif temp < 30:
        text.stylize("yellow")
    else:
        text.stylize("bold red")

    return text

def setup_logging(log_level_str: str) -> None:
    """Configure application logging with specified log level."""
    level = getattr(logging, log_level_str.upper(), logging.INFO)

    # Remove any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Set higher log level for noisy libraries unless in DEBUG
    if level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("uvicorn").setLevel(logging.WARNING)

    logger.info("Logging configured with level: %s", log_level_str)

def configure_locale() -> None:
    """Use the user's locale for date and time formatting, keeping C if it is unavailable."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("Could not apply the system locale, timestamps use the C locale: %s", e)
