"""Configuration helpers for the Morning Helper app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_GEMINI_MODEL = "models/gemini-1.5-flash-002"

# Seconds.
PROVIDER_TIMEOUT_SECONDS = 10.0
AI_TIMEOUT_SECONDS = 30.0
WEATHER_CACHE_TTL_SECONDS = 3600
NEWS_CACHE_TTL_SECONDS = 21600

MAX_NEWS_HEADLINES = 10
FORECAST_HOURS = 12


@dataclass
class AppConfig:
    """Configuration values for the Morning Helper app.

    Secrets (API keys) are expected to come from the environment while
    tunables can also be provided through an environment YAML file.
    """

    model: str = DEFAULT_GEMINI_MODEL
    google_api_key: Optional[str] = None
    openweather_api_key: Optional[str] = None
    news_api_key: Optional[str] = None
    ai_provider: str = "gemini"
    provider_timeout_seconds: float = PROVIDER_TIMEOUT_SECONDS
    ai_timeout_seconds: float = AI_TIMEOUT_SECONDS
    weather_cache_ttl_seconds: float = WEATHER_CACHE_TTL_SECONDS
    news_cache_ttl_seconds: float = NEWS_CACHE_TTL_SECONDS
    max_news_headlines: int = MAX_NEWS_HEADLINES
    forecast_hours: int = FORECAST_HOURS
    settings_store_path: Optional[str] = None
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables so that secrets can be
        injected by the runtime environment.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("APP_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        def get_number(key: str, default: float) -> float:
            raw = get_value(key)
            if raw in (None, ""):
                return default
            try:
                return float(raw)
            except ValueError as exc:
                raise ValueError(f"Config value '{key}' must be numeric, got {raw!r}") from exc

        return cls(
            model=str(get_value("model", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL),
            google_api_key=get_value("google_api_key"),
            openweather_api_key=get_value("openweather_api_key"),
            news_api_key=get_value("news_api_key"),
            ai_provider=str(get_value("ai_provider", "gemini") or "gemini").lower(),
            provider_timeout_seconds=get_number("provider_timeout_seconds", PROVIDER_TIMEOUT_SECONDS),
            ai_timeout_seconds=get_number("ai_timeout_seconds", AI_TIMEOUT_SECONDS),
            weather_cache_ttl_seconds=get_number("weather_cache_ttl_seconds", WEATHER_CACHE_TTL_SECONDS),
            news_cache_ttl_seconds=get_number("news_cache_ttl_seconds", NEWS_CACHE_TTL_SECONDS),
            max_news_headlines=int(get_number("max_news_headlines", MAX_NEWS_HEADLINES)),
            forecast_hours=int(get_number("forecast_hours", FORECAST_HOURS)),
            settings_store_path=get_value("settings_store_path"),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
