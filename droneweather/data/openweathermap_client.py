"""Client for the OpenWeatherMap One Call 3.0 and 2.5 APIs."""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from droneweather.core.models_shared import DailyForecast, WeatherBundle, WeatherSnapshot

logger = logging.getLogger(__name__)

# The 2.5 forecast endpoint reports in three-hour steps
FALLBACK_HOURLY_POINTS = 8
FALLBACK_DAILY_POINTS = 5

class WeatherSourceError(Exception):
    """Weather source specific errors."""
    pass

class WeatherAuthError(WeatherSourceError):
    """Upstream rejected the API key (HTTP 401/403)."""
    pass

class WeatherPayloadError(WeatherSourceError):
    """Upstream answered with a payload that cannot be parsed."""
    pass

def _timestamp(value: Optional[float]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)

def _weather_entry(item: Dict[str, Any]) -> Dict[str, Any]:
    weather = item.get("weather") or [{}]
    return weather[0]

def _parse_snapshot(item: Dict[str, Any]) -> WeatherSnapshot:
    """Parse a One Call 3.0 ``current`` or ``hourly`` item."""
    weather = _weather_entry(item)
    return WeatherSnapshot(
        temperature_c=item["temp"],
        feels_like_c=item.get("feels_like"),
        wind_speed_ms=item.get("wind_speed", 0.0),
        wind_gust_ms=item.get("wind_gust"),
        humidity_pct=item.get("humidity"),
        pressure_hpa=item.get("pressure"),
        visibility_m=item.get("visibility", 10000),
        weather_main=weather.get("main", "Unknown"),
        weather_description=weather.get("description"),
        observed_at=_timestamp(item.get("dt")),
    )

def _parse_daily(item: Dict[str, Any]) -> DailyForecast:
    """Parse a One Call 3.0 ``daily`` item."""
    weather = _weather_entry(item)
    temp = item["temp"]
    return DailyForecast(
        observed_at=_timestamp(item["dt"]),
        temp_min_c=temp["min"],
        temp_max_c=temp["max"],
        wind_speed_ms=item.get("wind_speed", 0.0),
        wind_gust_ms=item.get("wind_gust"),
        humidity_pct=item.get("humidity"),
        pressure_hpa=item.get("pressure"),
        weather_main=weather.get("main", "Unknown"),
        weather_description=weather.get("description"),
    )

def parse_one_call(payload: Dict[str, Any]) -> WeatherBundle:
    """Parse a One Call 3.0 response into a bundle."""
    try:
        return WeatherBundle(
            current=_parse_snapshot(payload["current"]),
            hourly=[_parse_snapshot(h) for h in payload.get("hourly", [])],
            daily=[_parse_daily(d) for d in payload.get("daily", [])],
            api_version="3.0",
        )
    except (KeyError, TypeError, ValueError) as e:
        raise WeatherPayloadError(f"Malformed One Call payload: {e}") from e

def _flatten_v25_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """Reshape a 2.5 ``weather``/``forecast`` item into the One Call layout."""
    main = item["main"]
    wind = item.get("wind", {})
    return {
        "dt": item.get("dt"),
        "temp": main["temp"],
        "feels_like": main.get("feels_like"),
        "pressure": main.get("pressure"),
        "humidity": main.get("humidity"),
        "visibility": item.get("visibility", 10000),
        "wind_speed": wind.get("speed", 0.0),
        "wind_gust": wind.get("gust"),
        "weather": item.get("weather", []),
    }

def convert_v25_payloads(current_data: Dict[str, Any], forecast_data: Dict[str, Any]) -> WeatherBundle:
    """
    Convert the 2.5 current + 5-day/3-hour forecast responses into a bundle.

    Hourly points are the first three-hourly forecast steps. Daily points
    group steps by UTC date, keeping the min/max temperature and the first
    step's wind and weather.
    """
    try:
        current = _parse_snapshot(_flatten_v25_item(current_data))
        steps = [_flatten_v25_item(i) for i in forecast_data.get("list", [])]
        hourly = [_parse_snapshot(s) for s in steps[:FALLBACK_HOURLY_POINTS]]

        days: Dict[str, Dict[str, Any]] = {}
        for step in steps:
            day_key = _timestamp(step["dt"]).date().isoformat()
            if day_key not in days:
                days[day_key] = {
                    "dt": step["dt"],
                    "temp": {"min": step["temp"], "max": step["temp"]},
                    "wind_speed": step["wind_speed"],
                    "wind_gust": step["wind_gust"],
                    "humidity": step["humidity"],
                    "pressure": step["pressure"],
                    "weather": step["weather"],
                }
            else:
                day = days[day_key]
                day["temp"]["min"] = min(day["temp"]["min"], step["temp"])
                day["temp"]["max"] = max(day["temp"]["max"], step["temp"])
        daily = [_parse_daily(d) for d in list(days.values())[:FALLBACK_DAILY_POINTS]]
    except (KeyError, TypeError, ValueError) as e:
        raise WeatherPayloadError(f"Malformed 2.5 payload: {e}") from e

    return WeatherBundle(current=current, hourly=hourly, daily=daily, api_version="2.5")

class OpenWeatherMapClient:
    """Async client for OpenWeatherMap, preferring One Call 3.0 over the free 2.5 API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org/data",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        await self.client.aclose()

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        query = {**params, "appid": self.api_key, "units": "metric"}
        try:
            response = await self.client.get(f"{self.base_url}/{path}", params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in (401, 403):
                raise WeatherAuthError(f"OpenWeatherMap rejected the API key ({status}) for {path}") from e
            raise WeatherSourceError(f"OpenWeatherMap error {status} for {path}") from e
        except httpx.HTTPError as e:
            raise WeatherSourceError(f"OpenWeatherMap request failed for {path}: {e}") from e
        except ValueError as e:
            raise WeatherPayloadError(f"OpenWeatherMap returned invalid JSON for {path}") from e

    async def get_one_call(self, latitude: float, longitude: float) -> WeatherBundle:
        payload = await self._get_json(
            "3.0/onecall",
            {"lat": latitude, "lon": longitude, "exclude": "minutely,alerts"},
        )
        return parse_one_call(payload)

    async def get_v25(self, latitude: float, longitude: float) -> WeatherBundle:
        params = {"lat": latitude, "lon": longitude}
        current_data, forecast_data = await asyncio.gather(
            self._get_json("2.5/weather", params),
            self._get_json("2.5/forecast", params),
        )
        return convert_v25_payloads(current_data, forecast_data)

    async def get_weather(self, latitude: float, longitude: float) -> WeatherBundle:
        """
        Fetch current, hourly and daily weather.

        One Call 3.0 is tried first; when the key is not (yet) authorised
        for it the free 2.5 endpoints are used instead.
        """
        try:
            bundle = await self.get_one_call(latitude, longitude)
            logger.info("Using One Call API 3.0")
            return bundle
        except WeatherAuthError:
            logger.info("One Call API 3.0 not ready, trying 2.5 API...")

        bundle = await self.get_v25(latitude, longitude)
        logger.info("Using OpenWeather API 2.5 as fallback")
        return bundle
