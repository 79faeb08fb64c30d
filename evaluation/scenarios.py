"""End-to-end scenarios covering the main weather and news situations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List

from models.enums import NewsCategory, WeatherCondition
from models.suggestions import Location, NewsHeadline, UserPreferences, WeatherSnapshot

PARIS = Location(latitude=48.8566, longitude=2.3522, city="Paris", country="France")
MORNING = datetime(2025, 1, 15, 7, 0, tzinfo=timezone.utc)


@dataclass
class EvaluationScenario:
    name: str
    description: str
    weather: WeatherSnapshot
    settings: UserPreferences = field(default_factory=UserPreferences)
    headlines: List[NewsHeadline] = field(default_factory=list)
    expectations: Dict[str, object] = field(default_factory=dict)


def _weather(
    temperature: int,
    condition: WeatherCondition,
    will_rain: bool = False,
    will_snow: bool = False,
) -> WeatherSnapshot:
    return WeatherSnapshot(
        location=PARIS,
        timestamp=MORNING,
        temperature=temperature,
        condition=condition,
        will_rain=will_rain,
        will_snow=will_snow,
        rain_probability=80 if will_rain else 0,
        snow_probability=80 if will_snow else 0,
    )


def _headline(title: str, relevance: float, category: NewsCategory, source: str = "Le Monde") -> NewsHeadline:
    return NewsHeadline(
        title=title,
        source=source,
        url="https://example.com/news",
        published_at=MORNING,
        relevance=relevance,
        category=category,
    )


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="snowy_cold_morning",
        description="5°C with snow under a 10°C threshold.",
        weather=_weather(5, WeatherCondition.SNOW, will_snow=True),
        expectations={
            "primary_clothing": "heavy_coat",
            "essential_accessories": ["anti_slip_shoes", "winter_boots", "hat", "gloves"],
        },
    ),
    EvaluationScenario(
        name="hot_clear_morning",
        description="28°C clear sky, no precipitation.",
        weather=_weather(28, WeatherCondition.CLEAR),
        expectations={
            "primary_clothing": "light_clothing",
            "optional_accessories": ["sunglasses", "cap", "sunscreen"],
        },
    ),
    EvaluationScenario(
        name="mild_rainy_morning",
        description="15°C with rain above the threshold.",
        weather=_weather(15, WeatherCondition.RAIN, will_rain=True),
        expectations={
            "primary_clothing": "raincoat",
            "essential_accessories": ["umbrella"],
        },
    ),
    EvaluationScenario(
        name="strike_headline",
        description="A transport strike leads the news digest.",
        weather=_weather(12, WeatherCondition.CLOUDY),
        settings=UserPreferences(ai_suggestions_enabled=False),
        headlines=[
            _headline("Grève des transports demain", 1.0, NewsCategory.STRIKE),
            _headline("Nouvelle exposition au Louvre", 0.5, NewsCategory.OTHER, source="France Info"),
        ],
        expectations={
            "primary_clothing": "light_jacket",
            "first_headline_category": "strike",
        },
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
