"""Morning Helper app bootstrap."""

from __future__ import annotations

import logging
from typing import Dict

from agents.orchestrator import OrchestratorAgent
from memory.settings_store import UserSettingsStore
from models.suggestions import Location, MorningSuggestions, UserPreferences
from morning_app.config import AppConfig
from morning_app.logging_config import configure_logging, get_logger, log_event, operation_context
from tools.ai_enhancer import AIEnhancer, create_enhancer
from tools.cache import TTLCache
from tools.news_provider import MockNewsProvider, NewsAPIProvider, NewsProvider
from tools.weather_provider import MockWeatherProvider, OpenWeatherProvider, WeatherProvider


LOGGER = get_logger(__name__)


class MorningHelperApp:
    """Wires together providers, the settings store and the orchestrator."""

    def __init__(
        self,
        config: AppConfig | None = None,
        weather_provider: WeatherProvider | None = None,
        news_provider: NewsProvider | None = None,
        enhancer: AIEnhancer | None = None,
        settings_store: UserSettingsStore | None = None,
        use_mocks: bool = False,
    ) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging()

        self.weather_provider = weather_provider or self._build_weather_provider(use_mocks)
        self.news_provider = news_provider or self._build_news_provider(use_mocks)
        self.enhancer = enhancer if enhancer is not None else create_enhancer(self.config)
        self.settings_store = settings_store or UserSettingsStore(
            self.config.settings_store_path or "data/settings"
        )
        self.orchestrator = OrchestratorAgent(
            config=self.config,
            weather_provider=self.weather_provider,
            news_provider=self.news_provider,
            enhancer=self.enhancer,
        )

    def _build_weather_provider(self, use_mocks: bool) -> WeatherProvider:
        if use_mocks:
            return MockWeatherProvider()
        return OpenWeatherProvider(
            api_key=self.config.openweather_api_key,
            timeout_seconds=self.config.provider_timeout_seconds,
            cache=TTLCache(self.config.weather_cache_ttl_seconds),
        )

    def _build_news_provider(self, use_mocks: bool) -> NewsProvider:
        if use_mocks:
            return MockNewsProvider()
        return NewsAPIProvider(
            api_key=self.config.news_api_key,
            timeout_seconds=self.config.provider_timeout_seconds,
            cache=TTLCache(self.config.news_cache_ttl_seconds),
        )

    async def morning_suggestions(
        self,
        location: Location,
        settings: UserPreferences | None = None,
        user_id: str | None = None,
        use_ai: bool = True,
    ) -> MorningSuggestions:
        """Resolve the user's settings and run the orchestrator.

        Inline ``settings`` win over stored ones; with neither, defaults apply.
        """

        with operation_context("app:morning_suggestions") as correlation_id:
            if settings is None:
                settings = self.settings_store.load(user_id) if user_id else UserPreferences()
            log_event(
                LOGGER,
                logging.INFO,
                "app_call_started",
                method="morning_suggestions",
                correlation_id=correlation_id,
                user_id=user_id,
                threshold=settings.temperature_threshold,
            )
            return await self.orchestrator.generate(location, settings, use_ai=use_ai)

    async def services_availability(self) -> Dict[str, bool]:
        return await self.orchestrator.check_services_availability()


__all__ = ["MorningHelperApp"]
