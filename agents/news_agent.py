"""News suggestion pipeline: headlines, templated digest, optional AI summary."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Sequence

from agents.pipeline import should_enhance, with_timeout
from logic.news_ranking import filter_morning_relevant
from models.enums import NewsCategory
from models.suggestions import Location, NewsHeadline, NewsSummary, SuggestionContext
from morning_app.config import AppConfig
from morning_app.logging_config import get_logger, log_event
from tools.ai_enhancer import AIEnhancer
from tools.news_provider import NewsProvider


LOGGER = get_logger(__name__)

NO_NEWS_SUMMARY = "No important news this morning."
IMPORTANT_RELEVANCE = 0.7
CRITICAL_RELEVANCE = 0.8
CRITICAL_CATEGORIES = frozenset({NewsCategory.STRIKE, NewsCategory.ALERT, NewsCategory.SECURITY})

_SUMMARY_PHRASES = (
    (NewsCategory.STRIKE, "{count} strike(s) or disruption(s) reported"),
    (NewsCategory.TRANSPORT, "{count} transport update(s)"),
    (NewsCategory.ALERT, "{count} alert(s)"),
    (NewsCategory.WEATHER, "{count} weather update(s)"),
)


def templated_summary(headlines: Sequence[NewsHeadline]) -> str:
    """Describe the digest by counting the categories a commuter cares about."""

    if not headlines:
        return NO_NEWS_SUMMARY
    counts = Counter(headline.category for headline in headlines)
    parts = [phrase.format(count=counts[category]) for category, phrase in _SUMMARY_PHRASES if counts[category]]
    if parts:
        return ", ".join(parts) + "."
    return f"{len(headlines)} headline(s) this morning."


class NewsSuggestionAgent:
    """Builds the morning news digest."""

    def __init__(
        self,
        config: AppConfig,
        provider: NewsProvider,
        enhancer: AIEnhancer | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self.provider = provider
        self.enhancer = enhancer
        self._now = now or (lambda: datetime.now(timezone.utc))

    async def fetch_headlines(self, location: Location) -> List[NewsHeadline]:
        return await with_timeout(
            self.provider.get_important_news(location),
            self.config.provider_timeout_seconds,
            self.provider.name,
        )

    def build_summary(self, headlines: Sequence[NewsHeadline], max_headlines: int | None = None) -> NewsSummary:
        limit = self.config.max_news_headlines if max_headlines is None else max_headlines
        kept = tuple(headlines[:limit])
        return NewsSummary(
            headlines=kept,
            summary=templated_summary(kept),
            ai_generated=False,
            sources=tuple(dict.fromkeys(headline.source for headline in kept)),
            generated_at=self._now(),
        )

    async def enhance(self, summary: NewsSummary) -> NewsSummary:
        """Replace the templated digest with an AI summary of the relevant headlines."""

        if self.enhancer is None or not summary.headlines:
            return summary
        relevant = filter_morning_relevant(summary.headlines)
        try:
            text = await with_timeout(
                self.enhancer.summarize_news(relevant[: self.config.max_news_headlines]),
                self.config.ai_timeout_seconds,
                self.enhancer.name,
            )
        except Exception as exc:  # noqa: BLE001 - enhancement is best effort
            log_event(LOGGER, logging.WARNING, "enhancement_failed", pipeline="news", error=type(exc).__name__)
            return summary
        return replace(summary, headlines=tuple(relevant), summary=text, ai_generated=True)

    async def suggest(self, context: SuggestionContext, use_ai: bool = True) -> NewsSummary:
        headlines = await self.fetch_headlines(context.location)
        summary = self.build_summary(headlines)
        if should_enhance(context, use_ai, self.enhancer):
            summary = await self.enhance(summary)
        log_event(
            LOGGER,
            logging.INFO,
            "pipeline_completed",
            pipeline="news",
            headline_count=len(summary.headlines),
            ai_generated=summary.ai_generated,
        )
        return summary

    async def has_important_news(self, location: Location) -> bool:
        headlines = await self.fetch_headlines(location)
        return any(headline.relevance > IMPORTANT_RELEVANCE for headline in headlines)

    async def critical_news(self, location: Location) -> List[NewsHeadline]:
        """Strikes, alerts and security headlines with very high relevance."""

        headlines = await self.fetch_headlines(location)
        return [
            headline
            for headline in headlines
            if headline.category in CRITICAL_CATEGORIES and headline.relevance > CRITICAL_RELEVANCE
        ]


__all__ = ["NewsSuggestionAgent", "templated_summary"]
