"""Weather provider abstractions and implementations."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from models.enums import WeatherCondition
from models.suggestions import Location, WeatherSnapshot
from tools.cache import TTLCache
from tools.errors import ProviderTimeoutError, ProviderUnavailableError
from tools.observability import instrument_call


LOGGER = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
# OpenWeatherMap current conditions carry no probability, only presence.
PRESENT_PRECIPITATION_PROBABILITY = 80
PROBE_LOCATION = Location(latitude=48.8566, longitude=2.3522, city="Paris", country="FR")


class _Condition(BaseModel):
    id: int
    main: str = ""
    description: str = ""


class _Main(BaseModel):
    temp: float
    feels_like: Optional[float] = None
    humidity: int = 0


class _Wind(BaseModel):
    speed: float = 0.0


class _Precipitation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    one_hour: float = Field(0.0, alias="1h")
    three_hours: float = Field(0.0, alias="3h")

    @property
    def amount(self) -> float:
        return self.one_hour or self.three_hours


class _Coord(BaseModel):
    lat: float
    lon: float


class _Sys(BaseModel):
    country: Optional[str] = None


class _CurrentResponse(BaseModel):
    dt: int
    coord: _Coord
    weather: List[_Condition] = []
    main: _Main
    wind: _Wind = Field(default_factory=_Wind)
    rain: Optional[_Precipitation] = None
    snow: Optional[_Precipitation] = None
    name: str = ""
    sys: _Sys = Field(default_factory=_Sys)


class _ForecastEntry(BaseModel):
    dt: int
    main: _Main
    weather: List[_Condition] = []
    wind: _Wind = Field(default_factory=_Wind)
    pop: float = 0.0
    rain: Optional[_Precipitation] = None
    snow: Optional[_Precipitation] = None


class _City(BaseModel):
    name: str = ""
    country: Optional[str] = None
    coord: Optional[_Coord] = None


class _ForecastResponse(BaseModel):
    list: List[_ForecastEntry] = []
    city: _City = Field(default_factory=_City)


def map_condition(code: int) -> WeatherCondition:
    """Map an OpenWeatherMap condition code onto the closed condition set."""

    if 200 <= code < 300:
        return WeatherCondition.THUNDERSTORM
    if 300 <= code < 400:
        return WeatherCondition.DRIZZLE
    if 500 <= code < 600:
        return WeatherCondition.HEAVY_RAIN if code >= 502 else WeatherCondition.RAIN
    if 600 <= code < 700:
        if code in (611, 612, 613, 615, 616):
            return WeatherCondition.SLEET
        return WeatherCondition.SNOW
    if 700 <= code < 800:
        return WeatherCondition.FOG
    if code > 800:
        return WeatherCondition.CLOUDY
    return WeatherCondition.CLEAR


def _kmh(speed_ms: float) -> int:
    return round(speed_ms * 3.6)


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    name = "weather"

    @abstractmethod
    async def get_current_weather(self, location: Location) -> WeatherSnapshot:
        """Return current conditions for ``location``."""

    @abstractmethod
    async def get_forecast(self, location: Location, hours: int) -> List[WeatherSnapshot]:
        """Return forecast points within the next ``hours``."""

    async def is_available(self) -> bool:
        try:
            await self.get_current_weather(PROBE_LOCATION)
        except Exception as exc:  # noqa: BLE001 - availability probe reports a boolean
            LOGGER.warning("Weather provider unavailable", extra={"error": type(exc).__name__})
            return False
        return True

    async def will_rain(self, location: Location, hours: int) -> bool:
        forecast = await self.get_forecast(location, hours)
        return any(point.will_rain or point.rain_probability > 50 for point in forecast)

    async def will_snow(self, location: Location, hours: int) -> bool:
        forecast = await self.get_forecast(location, hours)
        return any(point.will_snow or point.snow_probability > 50 for point in forecast)

    async def will_freeze(self, location: Location, hours: int) -> bool:
        forecast = await self.get_forecast(location, hours)
        return any(
            point.temperature <= 0 and (point.will_rain or point.humidity > 80) for point in forecast
        )

    async def will_be_cold(self, location: Location, threshold: float, hours: int) -> bool:
        forecast = await self.get_forecast(location, hours)
        return any(point.temperature < threshold for point in forecast)


class OpenWeatherProvider(WeatherProvider):
    """OpenWeatherMap provider with schema validation and response caching."""

    name = "openweathermap"

    def __init__(
        self,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        units: str = "metric",
        language: str = "en",
        cache: TTLCache | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.units = units
        self.language = language
        self.base_url = base_url.rstrip("/")
        self._cache: TTLCache = cache or TTLCache(3600)
        self._now = now or (lambda: datetime.now(timezone.utc))

    def _fetch(self, endpoint: str, location: Location) -> Dict[str, Any]:
        params = {
            "lat": location.latitude,
            "lon": location.longitude,
            "units": self.units,
            "lang": self.language,
            "appid": self.api_key,
        }
        url = f"{self.base_url}/{endpoint}"
        try:
            response = requests.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            return response.json()
        except requests.Timeout as exc:
            raise ProviderTimeoutError(self.name, f"{endpoint} request timed out") from exc
        except requests.RequestException as exc:
            raise ProviderUnavailableError(self.name, f"{endpoint} request failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderUnavailableError(self.name, f"{endpoint} returned invalid JSON") from exc

    async def _payload(self, endpoint: str, location: Location) -> Dict[str, Any]:
        if not self.api_key:
            raise ProviderUnavailableError(self.name, "missing api key")

        cache_key = (endpoint, location.latitude, location.longitude)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        LOGGER.info("Fetching weather", extra={"endpoint": endpoint})
        payload = await asyncio.to_thread(self._fetch, endpoint, location)
        self._cache.set(cache_key, payload)
        return payload

    @instrument_call("weather.get_current_weather")
    async def get_current_weather(self, location: Location) -> WeatherSnapshot:
        payload = await self._payload("weather", location)
        try:
            parsed = _CurrentResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            raise ProviderUnavailableError(self.name, "current weather payload failed validation") from exc

        condition = parsed.weather[0] if parsed.weather else _Condition(id=800)
        rain_mm = parsed.rain.amount if parsed.rain else 0.0
        snow_mm = parsed.snow.amount if parsed.snow else 0.0
        return WeatherSnapshot(
            location=Location(
                latitude=parsed.coord.lat,
                longitude=parsed.coord.lon,
                city=parsed.name or location.city,
                country=parsed.sys.country or location.country,
            ),
            timestamp=datetime.fromtimestamp(parsed.dt, tz=timezone.utc),
            temperature=round(parsed.main.temp),
            feels_like=round(parsed.main.feels_like) if parsed.main.feels_like is not None else None,
            condition=map_condition(condition.id),
            description=condition.description,
            will_rain=parsed.rain is not None,
            will_snow=parsed.snow is not None,
            rain_probability=PRESENT_PRECIPITATION_PROBABILITY if parsed.rain is not None else 0,
            snow_probability=PRESENT_PRECIPITATION_PROBABILITY if parsed.snow is not None else 0,
            humidity=parsed.main.humidity,
            wind_speed=_kmh(parsed.wind.speed),
            precipitation_mm=rain_mm + snow_mm,
        )

    @instrument_call("weather.get_forecast")
    async def get_forecast(self, location: Location, hours: int) -> List[WeatherSnapshot]:
        payload = await self._payload("forecast", location)
        try:
            parsed = _ForecastResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("Forecast payload schema validation failed", exc_info=exc)
            raise ProviderUnavailableError(self.name, "forecast payload failed validation") from exc

        city = parsed.city
        point_location = Location(
            latitude=city.coord.lat if city.coord else location.latitude,
            longitude=city.coord.lon if city.coord else location.longitude,
            city=city.name or location.city,
            country=city.country or location.country,
        )
        start = self._now()
        end = start + timedelta(hours=hours)
        points: List[WeatherSnapshot] = []
        for entry in parsed.list:
            timestamp = datetime.fromtimestamp(entry.dt, tz=timezone.utc)
            if not start <= timestamp <= end:
                continue
            condition = entry.weather[0] if entry.weather else _Condition(id=800)
            probability = round(entry.pop * 100)
            points.append(
                WeatherSnapshot(
                    location=point_location,
                    timestamp=timestamp,
                    temperature=round(entry.main.temp),
                    feels_like=round(entry.main.feels_like) if entry.main.feels_like is not None else None,
                    condition=map_condition(condition.id),
                    description=condition.description,
                    will_rain=entry.rain is not None,
                    will_snow=entry.snow is not None,
                    rain_probability=probability,
                    snow_probability=probability if entry.snow is not None else 0,
                    humidity=entry.main.humidity,
                    wind_speed=_kmh(entry.wind.speed),
                    precipitation_mm=(entry.rain.three_hours if entry.rain else 0.0)
                    + (entry.snow.three_hours if entry.snow else 0.0),
                )
            )
        return points


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests and local runs."""

    name = "mock-weather"

    def __init__(
        self,
        current: WeatherSnapshot | None = None,
        forecast: Sequence[WeatherSnapshot] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.current = current or WeatherSnapshot(
            location=PROBE_LOCATION,
            timestamp=datetime(2025, 1, 15, 7, 0, tzinfo=timezone.utc),
            temperature=12,
            condition=WeatherCondition.CLOUDY,
            description="overcast clouds",
            humidity=70,
            wind_speed=12,
        )
        self.forecast = list(forecast or [])
        self.error = error
        self.calls: List[str] = []

    async def get_current_weather(self, location: Location) -> WeatherSnapshot:
        self.calls.append("current")
        if self.error is not None:
            raise self.error
        return self.current

    async def get_forecast(self, location: Location, hours: int) -> List[WeatherSnapshot]:
        self.calls.append("forecast")
        if self.error is not None:
            raise self.error
        return list(self.forecast)


__all__ = [
    "MockWeatherProvider",
    "OpenWeatherProvider",
    "WeatherProvider",
    "map_condition",
]
