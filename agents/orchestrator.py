"""Morning suggestions orchestrator."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, List

from agents.accessory_agent import AccessorySuggestionAgent
from agents.clothing_agent import ClothingSuggestionAgent
from agents.news_agent import NewsSuggestionAgent
from logic.settle import settle_all
from models.suggestions import (
    Location,
    LocationLabel,
    MorningSuggestions,
    SuggestionContext,
    TransportSuggestion,
    UserPreferences,
)
from morning_app.config import AppConfig
from morning_app.logging_config import get_logger, log_event, operation_context
from tools.ai_enhancer import AIEnhancer
from tools.news_provider import NewsProvider
from tools.weather_provider import WeatherProvider


LOGGER = get_logger(__name__)

DEFAULT_CITY = "your city"
DEFAULT_COUNTRY = "your country"


class OrchestratorAgent:
    """Runs the clothing, accessory and news pipelines side by side.

    Each pipeline settles on its own: a failed clothing or accessory pipeline
    is replaced by its low-confidence default and a failed news pipeline is
    omitted, so a provider outage never surfaces as an exception here. Errors
    raised before the pipelines start still propagate to the caller.
    """

    def __init__(
        self,
        config: AppConfig,
        weather_provider: WeatherProvider,
        news_provider: NewsProvider,
        enhancer: AIEnhancer | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self.weather_provider = weather_provider
        self.news_provider = news_provider
        self.enhancer = enhancer
        self._now = now or (lambda: datetime.now(timezone.utc))
        self.clothing_agent = ClothingSuggestionAgent(config, weather_provider, enhancer)
        self.accessory_agent = AccessorySuggestionAgent(config, weather_provider, enhancer)
        self.news_agent = NewsSuggestionAgent(config, news_provider, enhancer, now=self._now)

    def build_context(self, location: Location, settings: UserPreferences) -> SuggestionContext:
        return SuggestionContext(location=location, timestamp=self._now(), settings=settings)

    async def generate(
        self, location: Location, settings: UserPreferences, use_ai: bool = True
    ) -> MorningSuggestions:
        """Generate every morning suggestion for ``location``."""

        with operation_context("agent:orchestrator.generate") as correlation_id:
            context = self.build_context(location, settings)
            log_event(
                LOGGER,
                logging.INFO,
                "orchestration_started",
                correlation_id=correlation_id,
                use_ai=use_ai,
                news_enabled=settings.news_enabled,
                ai_enabled=settings.ai_suggestions_enabled,
            )

            # Both weather pipelines read the same snapshot.
            weather = asyncio.ensure_future(self.clothing_agent.fetch_weather(location))
            pipelines: List[Awaitable] = [
                self.clothing_agent.suggest(context, use_ai, shared_weather=weather),
                self.accessory_agent.suggest(context, use_ai, shared_weather=weather),
            ]
            if settings.news_enabled:
                pipelines.append(self.news_agent.suggest(context, use_ai))

            try:
                outcomes = await settle_all(*pipelines)
            finally:
                if not weather.done():
                    weather.cancel()

            clothing_outcome, accessory_outcome = outcomes[0], outcomes[1]
            news_outcome = outcomes[2] if settings.news_enabled else None

            degraded: List[str] = []
            for pipeline, outcome in (
                ("clothing", clothing_outcome),
                ("accessories", accessory_outcome),
                ("news", news_outcome),
            ):
                if outcome is not None and not outcome.ok:
                    degraded.append(pipeline)
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "pipeline_degraded",
                        pipeline=pipeline,
                        correlation_id=correlation_id,
                        error=type(outcome.error).__name__,
                        details=str(outcome.error),
                    )

            clothing = clothing_outcome.value_or(ClothingSuggestionAgent.default_suggestion)
            accessories = accessory_outcome.value_or(AccessorySuggestionAgent.default_suggestion)
            news = news_outcome.value_or(lambda: None) if news_outcome is not None else None

            result = MorningSuggestions(
                clothing=clothing,
                accessories=accessories,
                transport=TransportSuggestion(),
                news=news,
                generated_at=self._now(),
                location=LocationLabel(
                    city=location.city or DEFAULT_CITY,
                    country=location.country or DEFAULT_COUNTRY,
                ),
                degraded=tuple(degraded),
            )
            log_event(
                LOGGER,
                logging.INFO,
                "orchestration_completed",
                correlation_id=correlation_id,
                degraded=list(degraded),
                has_news=news is not None,
            )
            return result

    async def check_services_availability(self) -> Dict[str, bool]:
        """Probe each provider; a failing probe reads as unavailable."""

        weather_ok, news_ok = await settle_all(
            self.weather_provider.is_available(), self.news_provider.is_available()
        )
        weather_available = bool(weather_ok.value_or(lambda: False))
        return {
            "clothing": weather_available,
            "accessories": weather_available,
            "news": bool(news_ok.value_or(lambda: False)),
        }


__all__ = ["OrchestratorAgent", "DEFAULT_CITY", "DEFAULT_COUNTRY"]
