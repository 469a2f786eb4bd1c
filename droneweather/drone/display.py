"""Presentation mappings for flight verdicts and weather conditions."""

from typing import Optional

from .evaluator import assess_wind
from .models import DroneLimits, FactorType, Severity

STATUS_COLORS = {
    Severity.EXCELLENT: "#28a745",
    Severity.GOOD: "#17a2b8",
    Severity.CAUTION: "#ffc107",
    Severity.DANGER: "#dc3545",
}
UNKNOWN_STATUS_COLOR = "#6c757d"

STATUS_COLOR_NAMES = {
    Severity.EXCELLENT: "green",
    Severity.GOOD: "blue",
    Severity.CAUTION: "yellow",
    Severity.DANGER: "red",
}

STATUS_TEXTS = {
    Severity.EXCELLENT: "Perfect Flying",
    Severity.GOOD: "Good Conditions",
    Severity.CAUTION: "Fly with Caution",
    Severity.DANGER: "Do Not Fly",
}

WEATHER_ICONS = {
    "Clear": "sunny",
    "Clouds": "cloudy",
    "Rain": "rainy",
    "Snow": "snow",
    "Thunderstorm": "thunderstorm",
    "Drizzle": "rainy",
    "Mist": "cloudy",
    "Fog": "cloudy",
}
DEFAULT_WEATHER_ICON = "cloudy"


def status_color(severity: Optional[Severity]) -> str:
    return STATUS_COLORS.get(severity, UNKNOWN_STATUS_COLOR)


def status_color_name(severity: Optional[Severity]) -> str:
    return STATUS_COLOR_NAMES.get(severity, "grey")


def status_text(severity: Optional[Severity]) -> str:
    return STATUS_TEXTS.get(severity, "Unknown")


def weather_icon(weather_main: str) -> str:
    return WEATHER_ICONS.get(weather_main, DEFAULT_WEATHER_ICON)


def factor_icon(factor_type: FactorType, severity: Severity) -> str:
    """Icon for a factor row; the precipitation/visibility row shows rain only when it is dangerous."""
    if factor_type == FactorType.WIND:
        return "leaf"
    if factor_type == FactorType.TEMPERATURE:
        return "thermometer"
    if factor_type == FactorType.PRECIPITATION_VISIBILITY:
        return "rainy" if severity == Severity.DANGER else "eye"
    return "information-circle"


def wind_status_color(wind_speed_ms: float, limits: DroneLimits) -> str:
    """Colour for a forecast wind reading, using the same breakpoints as the evaluator."""
    return STATUS_COLORS[assess_wind(wind_speed_ms, limits).severity]
