"""News digest construction and the important/critical helpers."""

import asyncio
from datetime import datetime, timezone

from agents.news_agent import NewsSuggestionAgent, templated_summary
from models.enums import NewsCategory
from models.suggestions import NEWS_DISCLAIMER, Location, NewsHeadline
from morning_app.config import AppConfig
from tools.news_provider import MockNewsProvider

NOW = datetime(2025, 1, 15, 7, 0, tzinfo=timezone.utc)
PARIS = Location(latitude=48.8566, longitude=2.3522, city="Paris", country="France")


def _headline(title: str, relevance: float, category: NewsCategory, source: str = "Le Monde") -> NewsHeadline:
    return NewsHeadline(title, source, "https://example.com", NOW, relevance, category)


def _agent(headlines, max_headlines: int = 10) -> NewsSuggestionAgent:
    return NewsSuggestionAgent(
        config=AppConfig(ai_provider="none", max_news_headlines=max_headlines),
        provider=MockNewsProvider(headlines=headlines),
        now=lambda: NOW,
    )


def test_templated_summary_counts_commuter_categories() -> None:
    headlines = [
        _headline("Strike", 0.9, NewsCategory.STRIKE),
        _headline("Metro", 0.7, NewsCategory.TRANSPORT),
        _headline("Other", 0.5, NewsCategory.OTHER),
    ]

    assert templated_summary(headlines) == "1 strike(s) or disruption(s) reported, 1 transport update(s)."
    assert templated_summary([_headline("Other", 0.5, NewsCategory.OTHER)]) == "1 headline(s) this morning."
    assert templated_summary([]) == "No important news this morning."


def test_build_summary_limits_headlines_and_dedupes_sources() -> None:
    headlines = [_headline(f"Story {idx}", 0.6, NewsCategory.OTHER, source="AFP") for idx in range(12)]
    agent = _agent(headlines, max_headlines=5)

    summary = agent.build_summary(headlines)

    assert len(summary.headlines) == 5
    assert summary.sources == ("AFP",)
    assert summary.generated_at == NOW
    assert summary.disclaimer == NEWS_DISCLAIMER
    assert len(agent.build_summary(headlines, max_headlines=2).headlines) == 2


def test_important_and_critical_news() -> None:
    strike = _headline("Strike", 0.9, NewsCategory.STRIKE)
    alert = _headline("Alert", 0.75, NewsCategory.ALERT)
    transport = _headline("Metro", 0.95, NewsCategory.TRANSPORT)
    agent = _agent([strike, alert, transport])

    assert asyncio.run(agent.has_important_news(PARIS)) is True
    assert asyncio.run(agent.critical_news(PARIS)) == [strike]


def test_quiet_morning_has_no_important_news() -> None:
    agent = _agent([_headline("Plain", 0.5, NewsCategory.OTHER)])

    assert asyncio.run(agent.has_important_news(PARIS)) is False
    assert asyncio.run(agent.critical_news(PARIS)) == []
