"""News provider abstractions and the NewsAPI implementation."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

import requests
from pydantic import BaseModel, Field, ValidationError

from logic.news_ranking import categorize, score_relevance
from models.suggestions import Location, NewsHeadline
from tools.cache import TTLCache
from tools.errors import ProviderTimeoutError, ProviderUnavailableError
from tools.observability import instrument_call


LOGGER = logging.getLogger(__name__)

NEWSAPI_BASE_URL = "https://newsapi.org/v2"
MORNING_QUERY = "grève OR alerte OR perturbation OR transport OR météo OR sécurité"
PAGE_SIZE = 20

_COUNTRY_ALIASES: Dict[str, str] = {
    "france": "fr",
    "fr": "fr",
    "united kingdom": "gb",
    "gb": "gb",
    "uk": "gb",
    "united states": "us",
    "us": "us",
    "usa": "us",
    "germany": "de",
    "de": "de",
    "spain": "es",
    "es": "es",
    "italy": "it",
    "it": "it",
}

_LANGUAGES: Dict[str, str] = {
    "fr": "fr",
    "gb": "en",
    "us": "en",
    "de": "de",
    "es": "es",
    "it": "it",
}


class _Source(BaseModel):
    name: str = "unknown"


class _Article(BaseModel):
    source: _Source = Field(default_factory=_Source)
    title: str = ""
    description: Optional[str] = None
    url: str = ""
    publishedAt: datetime


class _NewsResponse(BaseModel):
    status: str = "ok"
    totalResults: int = 0
    articles: List[_Article] = []


def country_code(location: Location) -> str:
    """Resolve a NewsAPI country code from the location name or coordinates."""

    if location.country:
        key = location.country.strip().lower()
        return _COUNTRY_ALIASES.get(key, key)

    lat, lon = location.latitude, location.longitude
    if 41 <= lat <= 51 and -5 <= lon <= 10:
        return "fr"
    if 50 <= lat <= 59 and -8 <= lon <= 2:
        return "gb"
    if 25 <= lat <= 49 and -125 <= lon <= -65:
        return "us"
    return "fr"


def language_code(country: str) -> str:
    return _LANGUAGES.get(country, "en")


class NewsProvider(ABC):
    """Abstract news provider interface."""

    name = "news"

    @abstractmethod
    async def get_important_news(self, location: Location) -> List[NewsHeadline]:
        """Return ranked headlines relevant to ``location``."""

    async def is_available(self) -> bool:
        return True


class NewsAPIProvider(NewsProvider):
    """NewsAPI provider that ranks articles for morning relevance."""

    name = "newsapi"

    def __init__(
        self,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        cache: TTLCache | None = None,
        base_url: str = NEWSAPI_BASE_URL,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.base_url = base_url.rstrip("/")
        self._cache: TTLCache = cache or TTLCache(21600)
        self._now = now or (lambda: datetime.now(timezone.utc))

    def _fetch(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        try:
            response = requests.get(
                url,
                params=params,
                headers={"X-Api-Key": self.api_key or ""},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            return response.json()
        except requests.Timeout as exc:
            raise ProviderTimeoutError(self.name, f"{endpoint} request timed out") from exc
        except requests.RequestException as exc:
            raise ProviderUnavailableError(self.name, f"{endpoint} request failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderUnavailableError(self.name, f"{endpoint} returned invalid JSON") from exc

    async def _query(self, endpoint: str, params: Dict[str, Any]) -> _NewsResponse:
        if not self.api_key:
            raise ProviderUnavailableError(self.name, "missing api key")

        cache_key = (endpoint, tuple(sorted(params.items())))
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        payload = await asyncio.to_thread(self._fetch, endpoint, params)
        try:
            parsed = _NewsResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("News payload schema validation failed", exc_info=exc)
            raise ProviderUnavailableError(self.name, f"{endpoint} payload failed validation") from exc
        self._cache.set(cache_key, parsed)
        return parsed

    async def _morning_articles(self, country: str, language: str) -> List[_Article]:
        headlines = await self._query(
            "top-headlines", {"country": country, "q": MORNING_QUERY, "pageSize": PAGE_SIZE}
        )
        if headlines.totalResults > 0:
            return headlines.articles

        today = self._now()
        everything = await self._query(
            "everything",
            {
                "q": MORNING_QUERY,
                "language": language,
                "from": (today - timedelta(days=1)).date().isoformat(),
                "to": today.date().isoformat(),
                "sortBy": "publishedAt",
                "pageSize": PAGE_SIZE,
            },
        )
        return everything.articles

    @instrument_call("news.get_important_news")
    async def get_important_news(self, location: Location) -> List[NewsHeadline]:
        country = country_code(location)
        articles = await self._morning_articles(country, language_code(country))
        headlines = [
            NewsHeadline(
                title=article.title,
                source=article.source.name,
                url=article.url,
                published_at=article.publishedAt,
                relevance=score_relevance(article.title, article.description),
                category=categorize(article.title, article.description),
            )
            for article in articles
            if article.title
        ]
        headlines.sort(key=lambda headline: headline.relevance, reverse=True)
        return headlines

    async def is_available(self) -> bool:
        try:
            await self._query("top-headlines", {"country": "fr", "pageSize": 1})
        except Exception as exc:  # noqa: BLE001 - availability probe reports a boolean
            LOGGER.warning("News provider unavailable", extra={"error": type(exc).__name__})
            return False
        return True


def _sample_headlines() -> List[NewsHeadline]:
    published = datetime(2025, 1, 15, 6, 30, tzinfo=timezone.utc)
    samples = (
        ("Transport strike expected on several metro lines", "Le Parisien"),
        ("Weather alert: black ice likely on roads this morning", "France Info"),
        ("New exhibition opens at the city museum", "Le Monde"),
    )
    return [
        NewsHeadline(
            title=title,
            source=source,
            url="https://example.com/news",
            published_at=published,
            relevance=score_relevance(title),
            category=categorize(title),
        )
        for title, source in samples
    ]


class MockNewsProvider(NewsProvider):
    """Offline news provider returning fixed headlines.

    Without ``headlines`` a small sample digest is served; pass an empty list
    for a quiet morning.
    """

    name = "mock-news"

    def __init__(self, headlines: Sequence[NewsHeadline] | None = None, error: Exception | None = None) -> None:
        self.headlines = list(headlines) if headlines is not None else _sample_headlines()
        self.error = error

    async def get_important_news(self, location: Location) -> List[NewsHeadline]:
        if self.error is not None:
            raise self.error
        return list(self.headlines)


__all__ = [
    "MockNewsProvider",
    "NewsAPIProvider",
    "NewsProvider",
    "country_code",
    "language_code",
]
