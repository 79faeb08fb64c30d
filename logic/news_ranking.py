"""Keyword-based morning relevance scoring and categorisation for headlines."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from models.enums import NewsCategory
from models.suggestions import NewsHeadline

BASE_SCORE = 0.5
HIGH_PRIORITY_BONUS = 0.3
MEDIUM_PRIORITY_BONUS = 0.2
MAX_SCORE = 1.0
MORNING_RELEVANCE_FLOOR = 0.5

# French and English terms, matched as lower-case substrings.
HIGH_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "grève",
    "strike",
    "alerte",
    "alert",
    "perturbation",
    "disruption",
    "fermeture",
    "closure",
    "annulation",
    "cancelled",
)

MEDIUM_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "transport",
    "métro",
    "metro",
    "bus",
    "train",
    "route",
    "road",
    "météo",
    "weather",
    "trafic",
    "traffic",
)

# Checked in order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: Tuple[Tuple[NewsCategory, Tuple[str, ...]], ...] = (
    (NewsCategory.STRIKE, ("grève", "strike")),
    (NewsCategory.ALERT, ("alerte", "alert", "warning", "avertissement")),
    (NewsCategory.WEATHER, ("météo", "weather")),
    (NewsCategory.SECURITY, ("sécurité", "security", "attentat", "attack")),
    (NewsCategory.TRANSPORT, ("transport", "métro", "metro", "bus", "train")),
)

PRIORITY_CATEGORIES = frozenset(
    {NewsCategory.STRIKE, NewsCategory.ALERT, NewsCategory.TRANSPORT, NewsCategory.WEATHER}
)


def _text(title: str, description: Optional[str]) -> str:
    return f"{title or ''} {description or ''}".lower()


def score_relevance(title: str, description: Optional[str] = None) -> float:
    """Score how useful a headline is for someone getting ready in the morning."""

    text = _text(title, description)
    score = BASE_SCORE
    score += HIGH_PRIORITY_BONUS * sum(1 for keyword in HIGH_PRIORITY_KEYWORDS if keyword in text)
    score += MEDIUM_PRIORITY_BONUS * sum(1 for keyword in MEDIUM_PRIORITY_KEYWORDS if keyword in text)
    return min(round(score, 4), MAX_SCORE)


def categorize(title: str, description: Optional[str] = None) -> NewsCategory:
    text = _text(title, description)
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return NewsCategory.OTHER


def filter_morning_relevant(headlines: Iterable[NewsHeadline]) -> List[NewsHeadline]:
    """Keep headlines above the relevance floor, priority categories first.

    Within each group headlines are ordered by relevance, highest first.
    """

    relevant = [headline for headline in headlines if headline.relevance > MORNING_RELEVANCE_FLOOR]
    return sorted(
        relevant,
        key=lambda headline: (headline.category in PRIORITY_CATEGORIES, headline.relevance),
        reverse=True,
    )


__all__ = [
    "PRIORITY_CATEGORIES",
    "categorize",
    "filter_morning_relevant",
    "score_relevance",
]
