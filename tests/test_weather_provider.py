"""OpenWeatherMap parsing, caching and failure mapping."""

import asyncio
from datetime import datetime, timezone

import pytest
import requests

from models.enums import WeatherCondition
from models.suggestions import Location, WeatherSnapshot
from tools.cache import TTLCache
from tools.errors import ProviderTimeoutError, ProviderUnavailableError
from tools.weather_provider import MockWeatherProvider, OpenWeatherProvider, map_condition

NOW = datetime(2025, 1, 15, 6, 0, tzinfo=timezone.utc)
PARIS = Location(latitude=48.8566, longitude=2.3522, city="Paris", country="France")

CURRENT_PAYLOAD = {
    "dt": int(NOW.timestamp()),
    "coord": {"lat": 48.85, "lon": 2.35},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain"}],
    "main": {"temp": 7.6, "feels_like": 5.2, "humidity": 87},
    "wind": {"speed": 5.0},
    "rain": {"1h": 0.4},
    "name": "Paris",
    "sys": {"country": "FR"},
}


class _FakeResponse:
    def __init__(self, payload: dict) -> None:
        self._payload = payload

    def raise_for_status(self) -> None:
        return None

    def json(self) -> dict:
        return self._payload


def _forecast_payload() -> dict:
    start = int(NOW.timestamp())
    return {
        "city": {"name": "Paris", "country": "FR", "coord": {"lat": 48.85, "lon": 2.35}},
        "list": [
            {
                "dt": start + 3 * 3600,
                "main": {"temp": 4.4, "humidity": 90},
                "weather": [{"id": 501, "description": "moderate rain"}],
                "pop": 0.6,
                "rain": {"3h": 1.2},
            },
            {
                "dt": start + 15 * 3600,
                "main": {"temp": -2.0, "humidity": 95},
                "weather": [{"id": 601, "description": "snow"}],
                "pop": 0.9,
                "snow": {"3h": 2.0},
            },
        ],
    }


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (211, WeatherCondition.THUNDERSTORM),
        (301, WeatherCondition.DRIZZLE),
        (501, WeatherCondition.RAIN),
        (502, WeatherCondition.HEAVY_RAIN),
        (601, WeatherCondition.SNOW),
        (611, WeatherCondition.SLEET),
        (741, WeatherCondition.FOG),
        (800, WeatherCondition.CLEAR),
        (803, WeatherCondition.CLOUDY),
    ],
)
def test_map_condition(code: int, expected: WeatherCondition) -> None:
    assert map_condition(code) == expected


def test_current_weather_is_parsed_and_cached(monkeypatch) -> None:
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params))
        return _FakeResponse(CURRENT_PAYLOAD)

    monkeypatch.setattr(requests, "get", fake_get)
    provider = OpenWeatherProvider(api_key="key", cache=TTLCache(3600))

    snapshot = asyncio.run(provider.get_current_weather(PARIS))
    again = asyncio.run(provider.get_current_weather(PARIS))

    assert snapshot == again
    assert len(calls) == 1
    assert calls[0][0].endswith("/weather")
    assert calls[0][1]["units"] == "metric"
    assert snapshot.temperature == 8
    assert snapshot.feels_like == 5
    assert snapshot.condition == WeatherCondition.RAIN
    assert snapshot.description == "light rain"
    assert snapshot.will_rain is True
    assert snapshot.will_snow is False
    assert snapshot.rain_probability == 80
    assert snapshot.wind_speed == 18
    assert snapshot.location.country == "FR"


def test_forecast_keeps_points_inside_the_window(monkeypatch) -> None:
    monkeypatch.setattr(requests, "get", lambda url, params=None, timeout=None: _FakeResponse(_forecast_payload()))
    provider = OpenWeatherProvider(api_key="key", now=lambda: NOW)

    points = asyncio.run(provider.get_forecast(PARIS, 12))

    assert len(points) == 1
    assert points[0].condition == WeatherCondition.RAIN
    assert points[0].rain_probability == 60
    assert points[0].precipitation_mm == 1.2
    assert asyncio.run(provider.will_rain(PARIS, 12)) is True
    assert asyncio.run(provider.will_snow(PARIS, 12)) is False
    assert asyncio.run(provider.will_be_cold(PARIS, 5, 12)) is True
    assert asyncio.run(provider.will_snow(PARIS, 24)) is True
    assert asyncio.run(provider.will_freeze(PARIS, 24)) is True


def test_missing_api_key_is_reported_as_unavailable() -> None:
    provider = OpenWeatherProvider(api_key=None)

    with pytest.raises(ProviderUnavailableError):
        asyncio.run(provider.get_current_weather(PARIS))
    assert asyncio.run(provider.is_available()) is False


def test_request_timeout_maps_to_provider_timeout(monkeypatch) -> None:
    def fake_get(url, params=None, timeout=None):
        raise requests.Timeout("slow")

    monkeypatch.setattr(requests, "get", fake_get)
    provider = OpenWeatherProvider(api_key="key")

    with pytest.raises(ProviderTimeoutError):
        asyncio.run(provider.get_current_weather(PARIS))


def test_invalid_payload_is_rejected(monkeypatch) -> None:
    monkeypatch.setattr(requests, "get", lambda url, params=None, timeout=None: _FakeResponse({"dt": "soon"}))
    provider = OpenWeatherProvider(api_key="key")

    with pytest.raises(ProviderUnavailableError):
        asyncio.run(provider.get_current_weather(PARIS))


def test_mock_provider_records_calls() -> None:
    snapshot = WeatherSnapshot(location=PARIS, timestamp=NOW, temperature=3, condition=WeatherCondition.SNOW)
    provider = MockWeatherProvider(current=snapshot, forecast=[snapshot])

    assert asyncio.run(provider.get_current_weather(PARIS)) is snapshot
    assert asyncio.run(provider.get_forecast(PARIS, 12)) == [snapshot]
    assert provider.calls == ["current", "forecast"]
