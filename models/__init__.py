"""Model package exports."""

from models.enums import *  # noqa: F401,F403
from models.suggestions import (
    AccessorySuggestion,
    ClothingSuggestion,
    Location,
    MorningSuggestions,
    NewsHeadline,
    NewsSummary,
    TransportSuggestion,
    UserPreferences,
    WeatherSnapshot,
)

__all__ = [
    "AccessorySuggestion",
    "ClothingSuggestion",
    "Location",
    "MorningSuggestions",
    "NewsHeadline",
    "NewsSummary",
    "TransportSuggestion",
    "UserPreferences",
    "WeatherSnapshot",
]
