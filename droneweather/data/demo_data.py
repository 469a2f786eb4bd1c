"""Synthetic weather used when no upstream data is available."""
import logging
import math
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from droneweather.core.models_shared import DailyForecast, WeatherBundle, WeatherSnapshot

logger = logging.getLogger(__name__)

DEMO_HOURS = 24
DEMO_DAYS = 5

def demo_current_snapshot(now: Optional[datetime] = None) -> WeatherSnapshot:
    """The fixed reading served in demo mode: 18°C, 3.5 m/s, scattered clouds."""
    return WeatherSnapshot(
        temperature_c=18.0,
        feels_like_c=16.0,
        pressure_hpa=1013.0,
        humidity_pct=65.0,
        visibility_m=10000.0,
        wind_speed_ms=3.5,
        wind_gust_ms=5.2,
        weather_main="Clouds",
        weather_description="scattered clouds",
        observed_at=now or datetime.now(timezone.utc),
    )

def generate_demo_hourly(now: datetime, rng: random.Random, hours: int = DEMO_HOURS) -> List[WeatherSnapshot]:
    """Hourly points following a sine temperature curve; cloudy for the first half day, then clear."""
    return [
        WeatherSnapshot(
            temperature_c=round(18 + math.sin(i * 0.3) * 5, 1),
            wind_speed_ms=round(rng.uniform(3, 7), 1),
            wind_gust_ms=round(rng.uniform(4, 10), 1),
            weather_main="Clouds" if i < 12 else "Clear",
            weather_description="demo weather",
            observed_at=now + timedelta(hours=i),
        )
        for i in range(hours)
    ]

def generate_demo_daily(now: datetime, rng: random.Random, days: int = DEMO_DAYS) -> List[DailyForecast]:
    """Daily points warming by one degree per day under clear skies."""
    return [
        DailyForecast(
            observed_at=now + timedelta(days=i),
            temp_min_c=12.0 + i,
            temp_max_c=22.0 + i,
            wind_speed_ms=round(rng.uniform(2, 8), 1),
            weather_main="Clear",
            weather_description="demo weather",
        )
        for i in range(days)
    ]

def get_demo_weather_bundle(seed: Optional[int] = None, now: Optional[datetime] = None) -> WeatherBundle:
    """
    Build a complete demo bundle.

    The current reading is always the same; forecast winds are random
    unless ``seed`` is given.
    """
    moment = now or datetime.now(timezone.utc)
    rng = random.Random(seed)
    logger.debug("Generating demo weather bundle (seed=%s)", seed)
    return WeatherBundle(
        current=demo_current_snapshot(moment),
        hourly=generate_demo_hourly(moment, rng),
        daily=generate_demo_daily(moment, rng),
        is_demo=True,
        api_version="demo",
    )
