"""
Drone flight-condition data models.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from droneweather.core.models_shared import WeatherBundle


class Severity(str, Enum):
    """Risk level of a factor or of the whole verdict, excellent < good < caution < danger."""
    EXCELLENT = "excellent"
    GOOD = "good"
    CAUTION = "caution"
    DANGER = "danger"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other):
        if isinstance(other, Severity):
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Severity):
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Severity):
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Severity):
            return self.rank >= other.rank
        return NotImplemented


_SEVERITY_RANK = {
    Severity.EXCELLENT: 0,
    Severity.GOOD: 1,
    Severity.CAUTION: 2,
    Severity.DANGER: 3,
}


class FactorType(str, Enum):
    """Evaluated dimensions of flight safety, in display order."""
    WIND = "wind"
    TEMPERATURE = "temperature"
    PRECIPITATION_VISIBILITY = "precipitation_visibility"


class DroneLimits(BaseModel):
    """Operating envelope of one aircraft."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = Field("DJI Neo 2", description="Aircraft model")
    max_wind_speed_ms: float = Field(10.0, gt=0, description="Maximum wind resistance in m/s")
    min_operating_temp_c: float = Field(-10.0, description="Minimum operating temperature in Celsius")
    max_operating_temp_c: float = Field(40.0, description="Maximum operating temperature in Celsius")
    max_altitude_m: float = Field(4000.0, gt=0, description="Maximum takeoff altitude in meters")
    ip_rating: str = Field("none", description="Ingress protection rating")

    @field_validator("max_operating_temp_c")
    @classmethod
    def validate_temperature_range(cls, v, info):
        low = info.data.get("min_operating_temp_c")
        if low is not None and v < low:
            raise ValueError("max_operating_temp_c must not be below min_operating_temp_c")
        return v

    @classmethod
    def from_settings(cls, settings) -> "DroneLimits":
        """Build the drone profile configured for this process."""
        return cls(
            model_name=settings.DRONE_MODEL,
            max_wind_speed_ms=settings.DRONE_MAX_WIND_SPEED_MS,
            min_operating_temp_c=settings.DRONE_MIN_OPERATING_TEMP_C,
            max_operating_temp_c=settings.DRONE_MAX_OPERATING_TEMP_C,
            max_altitude_m=settings.DRONE_MAX_ALTITUDE_M,
            ip_rating=settings.DRONE_IP_RATING,
        )


class ConditionFactor(BaseModel):
    """Classification of a single factor."""
    model_config = ConfigDict(frozen=True)

    factor_type: FactorType
    severity: Severity
    message: str


class FlightAnalysis(BaseModel):
    """Per-factor classifications and the aggregated verdict for one snapshot."""
    model_config = ConfigDict(frozen=True)

    conditions: List[ConditionFactor] = Field(..., min_length=3, max_length=3)
    overall_severity: Severity
    wind_speed_ms: float
    wind_gust_ms: float
    temperature_c: float
    weather_main: str

    def factor(self, factor_type: FactorType) -> ConditionFactor:
        return next(c for c in self.conditions if c.factor_type == factor_type)

    @property
    def is_flyable(self) -> bool:
        return self.overall_severity != Severity.DANGER


class NarrativeReport(BaseModel):
    """Human-readable summary of a flight analysis."""

    summary: str
    recommendation: str
    confidence: str
    timestamp: str
    powered_by: str = "Enhanced Weather Analysis Engine"


class FlightReport(BaseModel):
    """Weather for a location together with the verdict on the current reading."""

    weather: WeatherBundle
    flight_analysis: FlightAnalysis
    drone_specs: DroneLimits
    status_color: str
    demo_mode: bool


class ForecastVerdict(BaseModel):
    """Verdict for a single forecast point."""

    observed_at: Optional[datetime] = None
    analysis: FlightAnalysis


class FlightOutlook(BaseModel):
    """Verdicts for every hourly and daily forecast point."""

    hourly: List[ForecastVerdict] = Field(default_factory=list)
    daily: List[ForecastVerdict] = Field(default_factory=list)
    next_flyable_hour: Optional[datetime] = Field(None, description="First hourly point not rated danger")
    demo_mode: bool = False
