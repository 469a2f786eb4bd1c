"""Flight advisor service tying weather data to flight verdicts."""
import logging
from typing import List, Optional

from droneweather.core.config import settings
from droneweather.core.models_shared import WeatherBundle, WeatherSnapshot
from droneweather.data.data_loader import WeatherDataOrchestrator
from droneweather.drone.display import status_color
from droneweather.drone.evaluator import evaluate
from droneweather.drone.models import (
    DroneLimits,
    FlightOutlook,
    FlightReport,
    ForecastVerdict,
    NarrativeReport,
    Severity,
)
from droneweather.drone.narrative import format_narrative

logger = logging.getLogger(__name__)

class FlightAdvisorService:
    """Service for flight reports, forecast outlooks and narrative analysis."""

    def __init__(
        self,
        data_orchestrator: WeatherDataOrchestrator,
        limits: DroneLimits,
        hourly_hours: int = settings.HOURLY_FORECAST_HOURS,
        daily_days: int = settings.DAILY_FORECAST_DAYS,
    ):
        """Initialize the service for one drone profile."""
        self.data_orchestrator = data_orchestrator
        self.limits = limits
        self.hourly_hours = hourly_hours
        self.daily_days = daily_days
        logger.info(f"FlightAdvisorService initialized for {limits.model_name}")

    async def get_flight_report(
        self,
        latitude: float,
        longitude: float,
        location_name: Optional[str] = None,
    ) -> FlightReport:
        """Fetch weather for a location and evaluate the current reading."""
        bundle = await self.data_orchestrator.get_weather(latitude, longitude, location_name)
        bundle = bundle.trimmed(self.hourly_hours, self.daily_days)
        analysis = evaluate(bundle.current, self.limits)

        logger.info(
            f"Flight analysis for {bundle.location.name if bundle.location else 'unknown location'}: "
            f"{analysis.overall_severity.value}{' (demo)' if bundle.is_demo else ''}"
        )
        return FlightReport(
            weather=bundle,
            flight_analysis=analysis,
            drone_specs=self.limits,
            status_color=status_color(analysis.overall_severity),
            demo_mode=bundle.is_demo,
        )

    def analyze(self, bundle: WeatherBundle, location_name: Optional[str] = None) -> NarrativeReport:
        """Produce the narrative for the bundle's current reading."""
        analysis = evaluate(bundle.current, self.limits)
        if location_name is None and bundle.location is not None:
            location_name = bundle.location.name
        return format_narrative(
            bundle.current,
            analysis,
            self.limits,
            is_demo=bundle.is_demo,
            location_name=location_name,
        )

    def _verdicts(self, snapshots: List[WeatherSnapshot]) -> List[ForecastVerdict]:
        return [
            ForecastVerdict(observed_at=s.observed_at, analysis=evaluate(s, self.limits))
            for s in snapshots
        ]

    def forecast_outlook(self, bundle: WeatherBundle) -> FlightOutlook:
        """Evaluate every hourly and daily forecast point of the bundle."""
        hourly = self._verdicts(bundle.hourly[:self.hourly_hours])
        daily = self._verdicts([d.to_snapshot() for d in bundle.daily[:self.daily_days]])
        next_flyable = next(
            (v.observed_at for v in hourly if v.analysis.overall_severity != Severity.DANGER),
            None,
        )
        return FlightOutlook(
            hourly=hourly,
            daily=daily,
            next_flyable_hour=next_flyable,
            demo_mode=bundle.is_demo,
        )

    async def get_flight_outlook(
        self,
        latitude: float,
        longitude: float,
        location_name: Optional[str] = None,
    ) -> FlightOutlook:
        """Fetch weather for a location and evaluate its forecast."""
        bundle = await self.data_orchestrator.get_weather(latitude, longitude, location_name)
        return self.forecast_outlook(bundle)
