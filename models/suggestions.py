"""Domain records exchanged between providers, rule engines and the orchestrator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Tuple

from models.enums import AccessoryType, ClothingType, NewsCategory, TransportMode, WeatherCondition

RULE_CONFIDENCE = 0.9
AI_CONFIDENCE = 0.95
FALLBACK_CONFIDENCE = 0.0

DEFAULT_TEMPERATURE_THRESHOLD = 10

NEWS_DISCLAIMER = (
    "Headlines come from third-party sources (NewsAPI) and may be summarised by AI. "
    "Morning Helper does not verify them; check official sources and established media "
    "for reliable information."
)


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    city: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None


@dataclass(frozen=True)
class WeatherSnapshot:
    """Weather observation for one point in time, temperatures rounded to whole °C."""

    location: Location
    timestamp: datetime
    temperature: int
    condition: WeatherCondition
    description: str = ""
    will_rain: bool = False
    will_snow: bool = False
    rain_probability: int = 0
    snow_probability: int = 0
    humidity: int = 0
    wind_speed: int = 0
    feels_like: Optional[int] = None
    precipitation_mm: float = 0.0


@dataclass(frozen=True)
class UserPreferences:
    """Read-only snapshot of the settings the suggestion core consumes."""

    temperature_threshold: float = DEFAULT_TEMPERATURE_THRESHOLD
    ai_suggestions_enabled: bool = True
    news_enabled: bool = True


@dataclass(frozen=True)
class SuggestionContext:
    location: Location
    timestamp: datetime
    settings: UserPreferences


@dataclass(frozen=True)
class ClothingSuggestion:
    recommended_types: Tuple[ClothingType, ...]
    primary_type: ClothingType
    reason: str
    temperature: Optional[int]
    weather_condition: str
    confidence: float = RULE_CONFIDENCE
    ai_enhanced: bool = False
    ai_enhanced_tip: Optional[str] = None


@dataclass(frozen=True)
class AccessorySuggestion:
    essential_items: Tuple[AccessoryType, ...]
    optional_items: Tuple[AccessoryType, ...]
    reason: str
    weather_condition: str
    confidence: float = RULE_CONFIDENCE
    ai_enhanced: bool = False
    ai_enhanced_tip: Optional[str] = None
    recommended_items: Tuple[AccessoryType, ...] = field(init=False)

    def __post_init__(self) -> None:
        # Union of essential and optional items, each listed once.
        union = tuple(dict.fromkeys(self.essential_items + self.optional_items))
        object.__setattr__(self, "recommended_items", union)


@dataclass(frozen=True)
class NewsHeadline:
    title: str
    source: str
    url: str
    published_at: datetime
    relevance: float
    category: NewsCategory


@dataclass(frozen=True)
class NewsSummary:
    headlines: Tuple[NewsHeadline, ...]
    summary: str
    ai_generated: bool
    sources: Tuple[str, ...]
    generated_at: datetime
    disclaimer: str = NEWS_DISCLAIMER


@dataclass(frozen=True)
class TransportSuggestion:
    """Transport advice. Only the disabled placeholder is produced for now."""

    recommended: Tuple[TransportMode, ...] = ()
    discouraged: Tuple[TransportMode, ...] = ()
    primary: Optional[TransportMode] = None
    reason: str = "Transport suggestions are under development."
    confidence: float = FALLBACK_CONFIDENCE
    available: bool = False


@dataclass(frozen=True)
class LocationLabel:
    city: str
    country: str


@dataclass(frozen=True)
class MorningSuggestions:
    clothing: ClothingSuggestion
    accessories: AccessorySuggestion
    transport: TransportSuggestion
    generated_at: datetime
    location: LocationLabel
    news: Optional[NewsSummary] = None
    degraded: Tuple[str, ...] = field(default_factory=tuple)


def to_payload(value: Any) -> Any:
    """Convert records into JSON-friendly structures (enums to values, datetimes to ISO)."""

    if is_dataclass(value) and not isinstance(value, type):
        return to_payload(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


__all__ = [
    "AI_CONFIDENCE",
    "AccessorySuggestion",
    "ClothingSuggestion",
    "DEFAULT_TEMPERATURE_THRESHOLD",
    "FALLBACK_CONFIDENCE",
    "Location",
    "LocationLabel",
    "MorningSuggestions",
    "NEWS_DISCLAIMER",
    "NewsHeadline",
    "NewsSummary",
    "RULE_CONFIDENCE",
    "SuggestionContext",
    "TransportSuggestion",
    "UserPreferences",
    "WeatherSnapshot",
    "to_payload",
]
