"""AI enhancers that add one short practical sentence to rule-based suggestions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import google.generativeai as genai

from morning_app.config import AppConfig
from models.enums import label_for
from models.suggestions import NewsHeadline, WeatherSnapshot
from tools.errors import EnhancementError
from tools.observability import instrument_call


LOGGER = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = "You are a helpful assistant that gives short, practical advice."
MAX_OUTPUT_TOKENS = 150
TEMPERATURE = 0.7
MAX_SUMMARY_HEADLINES = 10


def _weather_line(weather: WeatherSnapshot) -> str:
    description = weather.description or label_for(weather.condition)
    return f"- Temperature: {weather.temperature}°C\n- Weather: {description}"


class AIEnhancer(ABC):
    """Optional language-model collaborator.

    Subclasses implement :meth:`generate`; the prompt builders are shared.
    Every method raises :class:`EnhancementError` instead of returning canned
    text so callers can tell enhanced output from plain rules.
    """

    name = "ai"

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the model's answer to ``prompt``."""

    async def enhance_clothing(self, base_reason: str, weather: WeatherSnapshot) -> str:
        prompt = (
            "You give practical clothing advice.\n\n"
            f"Context:\n{_weather_line(weather)}\n- Base suggestion: {base_reason}\n\n"
            "Add ONE short practical tip (one sentence, 15-20 words max). "
            'Example: "Wear layers you can remove easily on heated public transport."\n'
            "Tone: practical, friendly. Format: a single sentence with no introduction."
        )
        return await self.generate(prompt)

    async def enhance_accessories(self, base_reason: str, weather: WeatherSnapshot) -> str:
        prompt = (
            "You give practical advice.\n\n"
            f"Context:\n{_weather_line(weather)}\n- Base suggestion: {base_reason}\n\n"
            "Add ONE very short practical tip (one sentence, 15-20 words max). "
            'Example: "A compact umbrella slips easily into your bag."\n'
            "Tone: practical, friendly. Format: a single sentence."
        )
        return await self.generate(prompt)

    async def summarize_news(self, headlines: Sequence[NewsHeadline]) -> str:
        if not headlines:
            return "No important news this morning."
        titles = "\n".join(
            f"{idx}. {headline.title}" for idx, headline in enumerate(headlines[:MAX_SUMMARY_HEADLINES], start=1)
        )
        prompt = (
            "You summarise important news for someone getting ready in the morning.\n\n"
            f"Today's articles:\n{titles}\n\n"
            "Summarise in 2-3 short sentences the information most likely to affect the day "
            "(strikes, alerts, transport disruption, major events).\n"
            "Tone: factual, concise, useful. Format: plain text without introduction."
        )
        return await self.generate(prompt)


class GeminiEnhancer(AIEnhancer):
    """Gemini-backed enhancer using ``google.generativeai``."""

    name = "gemini"

    def __init__(self, api_key: str, model: str, model_client: Optional[genai.GenerativeModel] = None) -> None:
        self.model = model
        genai.configure(api_key=api_key)
        self._client = model_client or genai.GenerativeModel(
            model_name=model, system_instruction=SYSTEM_INSTRUCTION
        )

    @instrument_call("ai.generate")
    async def generate(self, prompt: str) -> str:
        try:
            response = await self._client.generate_content_async(
                prompt,
                generation_config=genai.GenerationConfig(
                    max_output_tokens=MAX_OUTPUT_TOKENS, temperature=TEMPERATURE
                ),
            )
            text = (response.text or "").strip()
        except Exception as exc:
            raise EnhancementError(self.name, f"completion failed: {exc}") from exc
        if not text:
            raise EnhancementError(self.name, "empty completion")
        return text


class MockAIEnhancer(AIEnhancer):
    """Deterministic enhancer for development without an API key."""

    name = "mock-ai"

    async def generate(self, prompt: str) -> str:
        return "This is a suggestion generated by the mock AI provider for development."

    async def enhance_clothing(self, base_reason: str, weather: WeatherSnapshot) -> str:
        if weather.temperature < 10:
            return "Wear several layers so you can adjust between indoors and outdoors."
        if weather.will_rain:
            return "Keep your raincoat in your bag."
        return "Adapt your outfit to what you have planned today."

    async def enhance_accessories(self, base_reason: str, weather: WeatherSnapshot) -> str:
        if weather.will_rain:
            return "A compact umbrella is easy to carry."
        if weather.temperature < 10:
            return "Touchscreen gloves let you use your phone without taking them off."
        return "Keep your essential accessories in one place."

    async def summarize_news(self, headlines: Sequence[NewsHeadline]) -> str:
        if not headlines:
            return "No important news this morning."
        return f"{len(headlines)} important headline(s) this morning."


def create_enhancer(config: AppConfig) -> Optional[AIEnhancer]:
    """Build the configured enhancer; ``None`` disables AI enhancement entirely."""

    provider = (config.ai_provider or "none").lower()
    if provider == "none":
        return None
    if provider == "mock":
        return MockAIEnhancer()
    if provider == "gemini":
        if not config.google_api_key:
            LOGGER.warning("Google API key not found, using mock AI enhancer")
            return MockAIEnhancer()
        return GeminiEnhancer(api_key=config.google_api_key, model=config.model)
    raise ValueError(f"Unknown AI provider type: {config.ai_provider}")


__all__ = ["AIEnhancer", "GeminiEnhancer", "MockAIEnhancer", "create_enhancer"]
