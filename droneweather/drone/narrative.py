"""
Template-driven narrative for a flight analysis.

Produces the summary, recommendation and confidence strings shown next to
the flight status. Deterministic apart from the timestamp.
"""

import logging
from datetime import datetime
from typing import Optional

from droneweather.core.models_shared import WeatherSnapshot
from droneweather.core.utils import format_number
from .models import DroneLimits, FlightAnalysis, NarrativeReport, Severity

logger = logging.getLogger(__name__)

RECOMMENDATIONS = {
    Severity.EXCELLENT: "🟢 Perfect conditions for drone flight. Enjoy your flight!",
    Severity.GOOD: "🔵 Good conditions for flying. Monitor weather changes.",
    Severity.CAUTION: "🟡 Fly with caution. Check all safety protocols.",
    Severity.DANGER: "🔴 Do not fly. Wait for better conditions.",
}
DEFAULT_RECOMMENDATION = "Check weather conditions carefully before flying."

DETAILED_ADVICE = {
    Severity.EXCELLENT: (
        "All parameters are within optimal ranges. Great time for aerial photography, "
        "mapping, or recreational flying. Consider taking advantage of these ideal "
        "conditions for complex maneuvers or extended flight sessions."
    ),
    Severity.GOOD: (
        "Conditions are favorable but keep an eye on weather updates. Perfect for most "
        "drone operations with standard precautions. Check forecasts for any incoming "
        "weather changes."
    ),
    Severity.CAUTION: (
        "Some conditions require extra attention. Ensure you have experience with current "
        "weather conditions, double-check all equipment, and consider shorter flight times. "
        "Stay close to takeoff point."
    ),
    Severity.DANGER: (
        "Current conditions pose significant risks to safe drone operation. Wait for "
        "weather to improve before attempting flight. Monitor forecasts for better conditions."
    ),
}
DEFAULT_ADVICE = "Analyze all weather parameters before making flight decisions."

DEMO_CONFIDENCE = "Demo Mode - Simulated Analysis"
LIVE_CONFIDENCE = "Real-time Analysis"

COMFORT_TEMP_MIN_C = 0.0
COMFORT_TEMP_MAX_C = 30.0
HIGH_HUMIDITY_PCT = 80.0
REDUCED_VISIBILITY_M = 5000.0
CALM_WIND_MS = 5.0


def recommendation_for(severity: Severity) -> str:
    return RECOMMENDATIONS.get(severity, DEFAULT_RECOMMENDATION)


def detailed_advice_for(severity: Severity) -> str:
    return DETAILED_ADVICE.get(severity, DEFAULT_ADVICE)


def _wind_clause(wind_speed_ms: float, limits: DroneLimits) -> str:
    if wind_speed_ms > limits.max_wind_speed_ms:
        return f"Wind speed exceeds {limits.model_name} limits - flight not recommended."
    if wind_speed_ms <= CALM_WIND_MS:
        return "Excellent wind conditions for stable drone flight."
    return "Wind conditions are within acceptable range for experienced pilots."


def _temperature_word(temperature_c: float) -> str:
    if COMFORT_TEMP_MIN_C <= temperature_c <= COMFORT_TEMP_MAX_C:
        return "optimal"
    if temperature_c < COMFORT_TEMP_MIN_C:
        return "cold but manageable"
    return "warm"


def _humidity_clause(humidity_pct: Optional[float]) -> str:
    if humidity_pct is not None and humidity_pct > HIGH_HUMIDITY_PCT:
        return "High humidity may affect battery performance."
    return "Humidity levels are acceptable."


def _visibility_clause(visibility_m: float) -> str:
    if visibility_m < REDUCED_VISIBILITY_M:
        return "Reduced visibility - maintain close visual contact with drone."
    return "Good visibility for drone operations."


def build_summary(
    snapshot: WeatherSnapshot,
    analysis: FlightAnalysis,
    limits: DroneLimits,
    location_name: Optional[str] = None,
) -> str:
    """Assemble the summary paragraph, closing with the advice for the verdict."""
    place = location_name or "your location"
    sentences = [
        f"Current conditions in {place} show {snapshot.description} with "
        f"{format_number(snapshot.temperature_c)}°C temperature and "
        f"{format_number(snapshot.wind_speed_ms)} m/s wind speed.",
        _wind_clause(snapshot.wind_speed_ms, limits),
        f"Temperature is {_temperature_word(snapshot.temperature_c)} for drone operations.",
        _humidity_clause(snapshot.humidity_pct),
        _visibility_clause(snapshot.visibility_m),
        detailed_advice_for(analysis.overall_severity),
    ]
    return " ".join(sentences)


def format_narrative(
    snapshot: WeatherSnapshot,
    analysis: FlightAnalysis,
    limits: DroneLimits,
    is_demo: bool = False,
    location_name: Optional[str] = None,
    now: Optional[datetime] = None,
) -> NarrativeReport:
    """
    Render the analysis as text for the presentation layer.

    Args:
        snapshot: Reading the analysis was computed from
        analysis: Result of ``evaluate`` for the same snapshot
        limits: Drone profile used for the analysis
        is_demo: Whether the reading is simulated
        location_name: Place name for the summary, "your location" if omitted
        now: Clock override, local time is used if omitted

    Returns:
        Summary, recommendation, confidence and timestamp strings
    """
    moment = now or datetime.now()
    return NarrativeReport(
        summary=build_summary(snapshot, analysis, limits, location_name),
        recommendation=recommendation_for(analysis.overall_severity),
        confidence=DEMO_CONFIDENCE if is_demo else LIVE_CONFIDENCE,
        timestamp=moment.strftime("%x, %X"),
    )
