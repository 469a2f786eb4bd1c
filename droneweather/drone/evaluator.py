"""
Flight-condition evaluator.

Maps a single weather snapshot onto wind, temperature and
precipitation/visibility classifications and an overall verdict for a
given drone profile. Pure and deterministic: no I/O, no shared state.
"""

import logging
from typing import Dict, Iterable, Tuple

from droneweather.core.models_shared import WeatherSnapshot
from .models import (
    ConditionFactor,
    DroneLimits,
    FactorType,
    FlightAnalysis,
    Severity,
)

logger = logging.getLogger(__name__)

CALM_WIND_MAX_MS = 5.0
LIGHT_WIND_MAX_MS = 8.0

PRECIPITATION_WEATHER = frozenset({"Rain", "Snow", "Thunderstorm"})
CLOUDY_WEATHER = "Clouds"

FACTOR_MESSAGES: Dict[Tuple[FactorType, Severity], str] = {
    (FactorType.WIND, Severity.EXCELLENT): "Calm winds - perfect for flying",
    (FactorType.WIND, Severity.GOOD): "Light winds - good flying conditions",
    (FactorType.WIND, Severity.CAUTION): "Moderate winds - fly with caution",
    (FactorType.WIND, Severity.DANGER): "High winds - do not fly",
    (FactorType.TEMPERATURE, Severity.GOOD): "Temperature within operating range",
    (FactorType.TEMPERATURE, Severity.DANGER): "Temperature outside operating range",
    (FactorType.PRECIPITATION_VISIBILITY, Severity.DANGER): "Precipitation detected - do not fly",
    (FactorType.PRECIPITATION_VISIBILITY, Severity.CAUTION): "Cloudy conditions - maintain visual contact",
    (FactorType.PRECIPITATION_VISIBILITY, Severity.GOOD): "Clear conditions for flying",
}


def _factor(factor_type: FactorType, severity: Severity) -> ConditionFactor:
    return ConditionFactor(
        factor_type=factor_type,
        severity=severity,
        message=FACTOR_MESSAGES[(factor_type, severity)],
    )


def assess_wind(wind_speed_ms: float, limits: DroneLimits) -> ConditionFactor:
    """Classify sustained wind; only the danger breakpoint follows the drone profile."""
    if wind_speed_ms <= CALM_WIND_MAX_MS:
        severity = Severity.EXCELLENT
    elif wind_speed_ms <= LIGHT_WIND_MAX_MS:
        severity = Severity.GOOD
    elif wind_speed_ms <= limits.max_wind_speed_ms:
        severity = Severity.CAUTION
    else:
        severity = Severity.DANGER
    return _factor(FactorType.WIND, severity)


def assess_temperature(temperature_c: float, limits: DroneLimits) -> ConditionFactor:
    """Classify air temperature against the operating range (good or danger only)."""
    if limits.min_operating_temp_c <= temperature_c <= limits.max_operating_temp_c:
        severity = Severity.GOOD
    else:
        severity = Severity.DANGER
    return _factor(FactorType.TEMPERATURE, severity)


def assess_precipitation(weather_main: str) -> ConditionFactor:
    """Classify the condition group; unknown groups count as clear."""
    if weather_main in PRECIPITATION_WEATHER:
        severity = Severity.DANGER
    elif weather_main == CLOUDY_WEATHER:
        severity = Severity.CAUTION
    else:
        severity = Severity.GOOD
    return _factor(FactorType.PRECIPITATION_VISIBILITY, severity)


def aggregate_severity(conditions: Iterable[ConditionFactor]) -> Severity:
    """
    Combine factor severities into the overall verdict.

    Danger wins over caution; with neither present the verdict is excellent,
    even when some factors are only good. "Good" is never returned.
    """
    severities = {c.severity for c in conditions}
    if Severity.DANGER in severities:
        return Severity.DANGER
    if Severity.CAUTION in severities:
        return Severity.CAUTION
    return Severity.EXCELLENT


def evaluate(snapshot: WeatherSnapshot, limits: DroneLimits) -> FlightAnalysis:
    """
    Evaluate flight conditions for one snapshot.

    Args:
        snapshot: Current reading or a single forecast point
        limits: Operating envelope of the aircraft

    Returns:
        Wind, temperature and precipitation/visibility factors, in that
        order, plus the aggregated verdict
    """
    conditions = [
        assess_wind(snapshot.wind_speed_ms, limits),
        assess_temperature(snapshot.temperature_c, limits),
        assess_precipitation(snapshot.weather_main),
    ]
    overall = aggregate_severity(conditions)

    logger.debug(
        "Evaluated %s: wind=%s temperature=%s precipitation=%s overall=%s",
        limits.model_name,
        *(c.severity.value for c in conditions),
        overall.value,
    )

    wind_gust = snapshot.wind_gust_ms if snapshot.wind_gust_ms is not None else snapshot.wind_speed_ms
    return FlightAnalysis(
        conditions=conditions,
        overall_severity=overall,
        wind_speed_ms=snapshot.wind_speed_ms,
        wind_gust_ms=wind_gust,
        temperature_c=snapshot.temperature_c,
        weather_main=snapshot.weather_main,
    )
