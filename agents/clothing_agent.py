"""Clothing suggestion pipeline: weather, rules, optional AI tip."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Awaitable

from agents.pipeline import should_enhance, with_timeout
from logic.clothing_rules import decide_clothing
from models.enums import ClothingType, label_for
from models.suggestions import (
    AI_CONFIDENCE,
    FALLBACK_CONFIDENCE,
    RULE_CONFIDENCE,
    ClothingSuggestion,
    Location,
    SuggestionContext,
    WeatherSnapshot,
)
from morning_app.config import AppConfig
from morning_app.logging_config import get_logger, log_event
from tools.ai_enhancer import AIEnhancer
from tools.weather_provider import WeatherProvider


LOGGER = get_logger(__name__)

UNAVAILABLE_REASON = "Weather data is unavailable. Take a light jacket just in case."
UNKNOWN_CONDITION = "unknown"


class ClothingSuggestionAgent:
    """Turns current conditions into a clothing suggestion."""

    def __init__(
        self,
        config: AppConfig,
        provider: WeatherProvider,
        enhancer: AIEnhancer | None = None,
    ) -> None:
        self.config = config
        self.provider = provider
        self.enhancer = enhancer

    async def fetch_weather(self, location: Location) -> WeatherSnapshot:
        return await with_timeout(
            self.provider.get_current_weather(location),
            self.config.provider_timeout_seconds,
            self.provider.name,
        )

    def build_suggestion(self, weather: WeatherSnapshot, threshold: float) -> ClothingSuggestion:
        decision = decide_clothing(
            weather.temperature, threshold, weather.will_rain, weather.will_snow, weather.condition
        )
        return ClothingSuggestion(
            recommended_types=decision.types,
            primary_type=decision.primary,
            reason=decision.reason,
            temperature=weather.temperature,
            weather_condition=weather.description or label_for(weather.condition),
            confidence=RULE_CONFIDENCE,
        )

    async def enhance(self, suggestion: ClothingSuggestion, weather: WeatherSnapshot) -> ClothingSuggestion:
        """Attach an AI tip; any enhancer failure leaves the suggestion untouched."""

        if self.enhancer is None:
            return suggestion
        try:
            tip = await with_timeout(
                self.enhancer.enhance_clothing(suggestion.reason, weather),
                self.config.ai_timeout_seconds,
                self.enhancer.name,
            )
        except Exception as exc:  # noqa: BLE001 - enhancement is best effort
            log_event(
                LOGGER,
                logging.WARNING,
                "enhancement_failed",
                pipeline="clothing",
                error=type(exc).__name__,
            )
            return suggestion
        return replace(suggestion, ai_enhanced_tip=tip, ai_enhanced=True, confidence=AI_CONFIDENCE)

    async def suggest(
        self,
        context: SuggestionContext,
        use_ai: bool = True,
        shared_weather: Awaitable[WeatherSnapshot] | None = None,
    ) -> ClothingSuggestion:
        """Run the pipeline; ``shared_weather`` lets callers share one in-flight fetch."""

        if shared_weather is None:
            shared_weather = self.fetch_weather(context.location)
        weather = await shared_weather
        suggestion = self.build_suggestion(weather, context.settings.temperature_threshold)
        if should_enhance(context, use_ai, self.enhancer):
            suggestion = await self.enhance(suggestion, weather)
        log_event(
            LOGGER,
            logging.INFO,
            "pipeline_completed",
            pipeline="clothing",
            primary=suggestion.primary_type.value,
            ai_enhanced=suggestion.ai_enhanced,
        )
        return suggestion

    @staticmethod
    def default_suggestion() -> ClothingSuggestion:
        return ClothingSuggestion(
            recommended_types=(ClothingType.LIGHT_JACKET,),
            primary_type=ClothingType.LIGHT_JACKET,
            reason=UNAVAILABLE_REASON,
            temperature=None,
            weather_condition=UNKNOWN_CONDITION,
            confidence=FALLBACK_CONFIDENCE,
        )


__all__ = ["ClothingSuggestionAgent"]
