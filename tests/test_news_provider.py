"""NewsAPI querying, fallback and ranking."""

import asyncio
from datetime import datetime, timezone

import pytest
import requests

from models.enums import NewsCategory
from models.suggestions import Location
from tools.errors import ProviderUnavailableError
from tools.news_provider import MockNewsProvider, NewsAPIProvider, country_code, language_code

NOW = datetime(2025, 1, 15, 7, 0, tzinfo=timezone.utc)
PARIS = Location(latitude=48.8566, longitude=2.3522, city="Paris", country="France")


def _article(title: str, source: str = "Le Monde") -> dict:
    return {
        "source": {"id": None, "name": source},
        "title": title,
        "description": None,
        "url": "https://example.com/article",
        "publishedAt": "2025-01-15T06:00:00Z",
    }


class _FakeResponse:
    def __init__(self, payload: dict) -> None:
        self._payload = payload

    def raise_for_status(self) -> None:
        return None

    def json(self) -> dict:
        return self._payload


def test_country_and_language_resolution() -> None:
    assert country_code(PARIS) == "fr"
    assert country_code(Location(latitude=0, longitude=0, country="United Kingdom")) == "gb"
    assert country_code(Location(latitude=51.5, longitude=-0.12)) == "gb"
    assert country_code(Location(latitude=40.7, longitude=-74.0)) == "us"
    assert country_code(Location(latitude=-33.9, longitude=151.2)) == "fr"
    assert language_code("gb") == "en"
    assert language_code("xx") == "en"


def test_headlines_are_scored_and_sorted(monkeypatch) -> None:
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append((url, params, headers))
        return _FakeResponse(
            {
                "status": "ok",
                "totalResults": 3,
                "articles": [
                    _article("Film festival opens"),
                    _article("Grève des transports demain", source="Le Parisien"),
                    _article(""),
                ],
            }
        )

    monkeypatch.setattr(requests, "get", fake_get)
    provider = NewsAPIProvider(api_key="key", now=lambda: NOW)

    headlines = asyncio.run(provider.get_important_news(PARIS))

    assert len(calls) == 1
    assert calls[0][0].endswith("/top-headlines")
    assert calls[0][1]["country"] == "fr"
    assert calls[0][2] == {"X-Api-Key": "key"}
    assert [headline.title for headline in headlines] == ["Grève des transports demain", "Film festival opens"]
    assert headlines[0].category == NewsCategory.STRIKE
    assert headlines[0].relevance == 1.0
    assert headlines[1].category == NewsCategory.OTHER


def test_falls_back_to_everything_endpoint(monkeypatch) -> None:
    endpoints = []

    def fake_get(url, params=None, headers=None, timeout=None):
        endpoints.append(url.rsplit("/", 1)[-1])
        if url.endswith("top-headlines"):
            return _FakeResponse({"status": "ok", "totalResults": 0, "articles": []})
        assert params["language"] == "fr"
        assert params["from"] == "2025-01-14"
        return _FakeResponse({"status": "ok", "totalResults": 1, "articles": [_article("Alerte météo")]})

    monkeypatch.setattr(requests, "get", fake_get)
    provider = NewsAPIProvider(api_key="key", now=lambda: NOW)

    headlines = asyncio.run(provider.get_important_news(PARIS))

    assert endpoints == ["top-headlines", "everything"]
    assert headlines[0].category == NewsCategory.ALERT


def test_missing_api_key_raises() -> None:
    provider = NewsAPIProvider(api_key=None)

    with pytest.raises(ProviderUnavailableError):
        asyncio.run(provider.get_important_news(PARIS))
    assert asyncio.run(provider.is_available()) is False


def test_http_errors_become_provider_errors(monkeypatch) -> None:
    def fake_get(url, params=None, headers=None, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(ProviderUnavailableError):
        asyncio.run(NewsAPIProvider(api_key="key").get_important_news(PARIS))


def test_mock_provider_defaults_and_quiet_morning() -> None:
    assert asyncio.run(MockNewsProvider().get_important_news(PARIS))
    assert asyncio.run(MockNewsProvider(headlines=[]).get_important_news(PARIS)) == []
