"""Tests for the flight-condition evaluator."""
import pytest
from hypothesis import given, strategies as st

from droneweather.core.models_shared import WeatherSnapshot
from droneweather.drone.evaluator import (
    aggregate_severity,
    assess_precipitation,
    assess_temperature,
    assess_wind,
    evaluate,
)
from droneweather.drone.models import ConditionFactor, DroneLimits, FactorType, Severity

DEFAULT_LIMITS = DroneLimits()

def _snapshot(temp: float, wind: float, weather: str) -> WeatherSnapshot:
    return WeatherSnapshot(temperature_c=temp, wind_speed_ms=wind, weather_main=weather)

def _factor(severity: Severity) -> ConditionFactor:
    return ConditionFactor(factor_type=FactorType.WIND, severity=severity, message="test")


class TestWindFactor:
    """Wind breakpoints."""

    @pytest.mark.parametrize("wind, expected, message", [
        (0.0, Severity.EXCELLENT, "Calm winds - perfect for flying"),
        (5.0, Severity.EXCELLENT, "Calm winds - perfect for flying"),
        (5.01, Severity.GOOD, "Light winds - good flying conditions"),
        (8.0, Severity.GOOD, "Light winds - good flying conditions"),
        (8.5, Severity.CAUTION, "Moderate winds - fly with caution"),
        (10.0, Severity.CAUTION, "Moderate winds - fly with caution"),
        (10.01, Severity.DANGER, "High winds - do not fly"),
        (25.0, Severity.DANGER, "High winds - do not fly"),
    ])
    def test_boundaries(self, wind, expected, message):
        factor = assess_wind(wind, DEFAULT_LIMITS)
        assert factor.factor_type == FactorType.WIND
        assert factor.severity == expected
        assert factor.message == message

    @given(st.floats(min_value=0, max_value=5, allow_nan=False))
    def test_calm_is_excellent(self, wind):
        assert assess_wind(wind, DEFAULT_LIMITS).severity == Severity.EXCELLENT

    @given(st.floats(min_value=5, max_value=8, exclude_min=True, allow_nan=False))
    def test_light_is_good(self, wind):
        assert assess_wind(wind, DEFAULT_LIMITS).severity == Severity.GOOD

    @given(st.floats(min_value=8, max_value=10, exclude_min=True, allow_nan=False))
    def test_moderate_is_caution(self, wind):
        assert assess_wind(wind, DEFAULT_LIMITS).severity == Severity.CAUTION

    @given(st.floats(min_value=10, max_value=100, exclude_min=True, allow_nan=False))
    def test_above_limit_is_danger(self, wind):
        assert assess_wind(wind, DEFAULT_LIMITS).severity == Severity.DANGER

    def test_top_breakpoint_follows_drone_profile(self):
        sturdy = DroneLimits(model_name="Heavy Lifter", max_wind_speed_ms=12.0)
        assert assess_wind(11.5, sturdy).severity == Severity.CAUTION
        assert assess_wind(11.5, DEFAULT_LIMITS).severity == Severity.DANGER
        # Lower breakpoints are fixed
        assert assess_wind(6.0, sturdy).severity == Severity.GOOD


class TestTemperatureFactor:
    """Temperature has two tiers only."""

    @pytest.mark.parametrize("temp", [-10.0, 0.0, 20.0, 40.0])
    def test_inside_range_is_good(self, temp):
        factor = assess_temperature(temp, DEFAULT_LIMITS)
        assert factor.severity == Severity.GOOD
        assert factor.message == "Temperature within operating range"

    @pytest.mark.parametrize("temp", [-10.5, -30.0, 40.1, 50.0])
    def test_outside_range_is_danger(self, temp):
        factor = assess_temperature(temp, DEFAULT_LIMITS)
        assert factor.severity == Severity.DANGER
        assert factor.message == "Temperature outside operating range"

    @given(st.floats(min_value=-80, max_value=80, allow_nan=False))
    def test_never_excellent_or_caution(self, temp):
        severity = assess_temperature(temp, DEFAULT_LIMITS).severity
        assert severity in (Severity.GOOD, Severity.DANGER)
        inside = DEFAULT_LIMITS.min_operating_temp_c <= temp <= DEFAULT_LIMITS.max_operating_temp_c
        assert (severity == Severity.GOOD) == inside


class TestPrecipitationFactor:
    """Precipitation/visibility keyed on the condition group."""

    @pytest.mark.parametrize("weather", ["Rain", "Snow", "Thunderstorm"])
    def test_precipitation_is_danger(self, weather):
        factor = assess_precipitation(weather)
        assert factor.factor_type == FactorType.PRECIPITATION_VISIBILITY
        assert factor.severity == Severity.DANGER
        assert factor.message == "Precipitation detected - do not fly"

    def test_clouds_is_caution(self):
        factor = assess_precipitation("Clouds")
        assert factor.severity == Severity.CAUTION
        assert factor.message == "Cloudy conditions - maintain visual contact"

    @pytest.mark.parametrize("weather", ["Clear", "Mist", "Fog", "Drizzle", "Haze", "", "rain"])
    def test_everything_else_is_good(self, weather):
        factor = assess_precipitation(weather)
        assert factor.severity == Severity.GOOD
        assert factor.message == "Clear conditions for flying"


class TestAggregation:
    """Overall verdict."""

    def test_danger_wins(self):
        factors = [_factor(Severity.EXCELLENT), _factor(Severity.CAUTION), _factor(Severity.DANGER)]
        assert aggregate_severity(factors) == Severity.DANGER

    def test_caution_without_danger(self):
        factors = [_factor(Severity.GOOD), _factor(Severity.CAUTION), _factor(Severity.EXCELLENT)]
        assert aggregate_severity(factors) == Severity.CAUTION

    def test_good_collapses_to_excellent(self):
        # No danger and no caution always yields excellent, even with "good" factors present
        factors = [_factor(Severity.EXCELLENT), _factor(Severity.GOOD), _factor(Severity.EXCELLENT)]
        assert aggregate_severity(factors) == Severity.EXCELLENT
        assert aggregate_severity([_factor(Severity.GOOD)] * 3) == Severity.EXCELLENT

    @given(
        st.floats(min_value=-60, max_value=60, allow_nan=False),
        st.floats(min_value=0, max_value=40, allow_nan=False),
        st.sampled_from(["Clear", "Clouds", "Rain", "Snow", "Thunderstorm", "Drizzle", "Mist", "Fog", "Haze"]),
    )
    def test_danger_iff_any_factor_danger(self, temp, wind, weather):
        analysis = evaluate(_snapshot(temp, wind, weather), DEFAULT_LIMITS)
        any_danger = any(c.severity == Severity.DANGER for c in analysis.conditions)
        assert (analysis.overall_severity == Severity.DANGER) == any_danger
        assert analysis.overall_severity != Severity.GOOD


class TestEvaluate:
    """Whole-snapshot evaluation."""

    def test_demo_snapshot_is_caution(self):
        analysis = evaluate(_snapshot(18, 3.5, "Clouds"), DEFAULT_LIMITS)
        assert [c.severity for c in analysis.conditions] == [
            Severity.EXCELLENT, Severity.GOOD, Severity.CAUTION
        ]
        assert analysis.overall_severity == Severity.CAUTION

    def test_storm_is_danger_everywhere(self):
        analysis = evaluate(_snapshot(50, 15, "Thunderstorm"), DEFAULT_LIMITS)
        assert all(c.severity == Severity.DANGER for c in analysis.conditions)
        assert analysis.overall_severity == Severity.DANGER
        assert not analysis.is_flyable

    def test_clear_calm_day_is_excellent(self):
        analysis = evaluate(_snapshot(20, 2, "Clear"), DEFAULT_LIMITS)
        assert analysis.factor(FactorType.WIND).severity == Severity.EXCELLENT
        assert analysis.overall_severity == Severity.EXCELLENT
        assert analysis.is_flyable

    def test_rain_is_danger_regardless_of_other_fields(self, make_snapshot):
        analysis = evaluate(make_snapshot(weather_main="Rain", wind_speed_ms=0.0, temperature_c=21.0), DEFAULT_LIMITS)
        assert analysis.factor(FactorType.PRECIPITATION_VISIBILITY).severity == Severity.DANGER
        assert analysis.overall_severity == Severity.DANGER

    def test_conditions_order_and_uniqueness(self, make_snapshot):
        analysis = evaluate(make_snapshot(), DEFAULT_LIMITS)
        assert [c.factor_type for c in analysis.conditions] == [
            FactorType.WIND, FactorType.TEMPERATURE, FactorType.PRECIPITATION_VISIBILITY
        ]

    def test_echoes_input_fields(self, make_snapshot):
        snapshot = make_snapshot(temperature_c=12.5, wind_speed_ms=6.0, wind_gust_ms=9.5, weather_main="Fog")
        analysis = evaluate(snapshot, DEFAULT_LIMITS)
        assert analysis.temperature_c == 12.5
        assert analysis.wind_speed_ms == 6.0
        assert analysis.wind_gust_ms == 9.5
        assert analysis.weather_main == "Fog"

    def test_gust_defaults_to_wind_speed(self):
        analysis = evaluate(_snapshot(15, 7.0, "Clear"), DEFAULT_LIMITS)
        assert analysis.wind_gust_ms == 7.0

    def test_idempotent(self, make_snapshot):
        snapshot = make_snapshot(wind_speed_ms=9.0, weather_main="Clouds")
        first = evaluate(snapshot, DEFAULT_LIMITS)
        second = evaluate(snapshot, DEFAULT_LIMITS)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_profiles_do_not_interfere(self, make_snapshot):
        snapshot = make_snapshot(wind_speed_ms=11.0, temperature_c=-15.0)
        cold_tolerant = DroneLimits(model_name="Arctic", max_wind_speed_ms=12.0, min_operating_temp_c=-20.0)
        assert evaluate(snapshot, cold_tolerant).overall_severity == Severity.CAUTION
        assert evaluate(snapshot, DEFAULT_LIMITS).overall_severity == Severity.DANGER
