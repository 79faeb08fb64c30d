"""Accessory suggestion pipeline: weather plus forecast, additive rules, optional AI tip."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Awaitable, List

from agents.pipeline import should_enhance, with_timeout
from logic.accessory_rules import decide_accessories
from models.enums import label_for
from models.suggestions import (
    AI_CONFIDENCE,
    FALLBACK_CONFIDENCE,
    RULE_CONFIDENCE,
    AccessorySuggestion,
    Location,
    SuggestionContext,
    WeatherSnapshot,
)
from morning_app.config import AppConfig
from morning_app.logging_config import get_logger, log_event
from tools.ai_enhancer import AIEnhancer
from tools.weather_provider import WeatherProvider


LOGGER = get_logger(__name__)

UNAVAILABLE_REASON = "Weather data is unavailable."
UNKNOWN_CONDITION = "unknown"


class AccessorySuggestionAgent:
    """Turns current conditions into essential and optional accessories."""

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

    async def fetch_forecast(self, location: Location) -> List[WeatherSnapshot]:
        """Forecast points are optional input; a failed lookup yields an empty list."""

        try:
            return await with_timeout(
                self.provider.get_forecast(location, self.config.forecast_hours),
                self.config.provider_timeout_seconds,
                self.provider.name,
            )
        except Exception as exc:  # noqa: BLE001 - the rules do not need the forecast
            log_event(
                LOGGER,
                logging.WARNING,
                "forecast_unavailable",
                pipeline="accessories",
                error=type(exc).__name__,
            )
            return []

    def build_suggestion(
        self, weather: WeatherSnapshot, threshold: float, forecast: List[WeatherSnapshot]
    ) -> AccessorySuggestion:
        decision = decide_accessories(
            weather.temperature,
            threshold,
            weather.will_rain,
            weather.will_snow,
            weather.condition,
            forecast,
        )
        return AccessorySuggestion(
            essential_items=decision.essential,
            optional_items=decision.optional,
            reason=decision.reason,
            weather_condition=weather.description or label_for(weather.condition),
            confidence=RULE_CONFIDENCE,
        )

    async def enhance(self, suggestion: AccessorySuggestion, weather: WeatherSnapshot) -> AccessorySuggestion:
        if self.enhancer is None:
            return suggestion
        try:
            tip = await with_timeout(
                self.enhancer.enhance_accessories(suggestion.reason, weather),
                self.config.ai_timeout_seconds,
                self.enhancer.name,
            )
        except Exception as exc:  # noqa: BLE001 - enhancement is best effort
            log_event(
                LOGGER,
                logging.WARNING,
                "enhancement_failed",
                pipeline="accessories",
                error=type(exc).__name__,
            )
            return suggestion
        return replace(suggestion, ai_enhanced_tip=tip, ai_enhanced=True, confidence=AI_CONFIDENCE)

    async def suggest(
        self,
        context: SuggestionContext,
        use_ai: bool = True,
        shared_weather: Awaitable[WeatherSnapshot] | None = None,
    ) -> AccessorySuggestion:
        if shared_weather is None:
            shared_weather = self.fetch_weather(context.location)
        weather = await shared_weather
        forecast = await self.fetch_forecast(context.location)
        suggestion = self.build_suggestion(weather, context.settings.temperature_threshold, forecast)
        if should_enhance(context, use_ai, self.enhancer):
            suggestion = await self.enhance(suggestion, weather)
        log_event(
            LOGGER,
            logging.INFO,
            "pipeline_completed",
            pipeline="accessories",
            essential=[item.value for item in suggestion.essential_items],
            ai_enhanced=suggestion.ai_enhanced,
        )
        return suggestion

    @staticmethod
    def default_suggestion() -> AccessorySuggestion:
        return AccessorySuggestion(
            essential_items=(),
            optional_items=(),
            reason=UNAVAILABLE_REASON,
            weather_condition=UNKNOWN_CONDITION,
            confidence=FALLBACK_CONFIDENCE,
        )


__all__ = ["AccessorySuggestionAgent"]
