"""Command line entrypoint printing the morning suggestions as JSON."""

import argparse
import asyncio
import json

from models.suggestions import Location, UserPreferences, to_payload
from morning_app.app import MorningHelperApp
from morning_app.config import AppConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate morning clothing, accessory and news suggestions.")
    parser.add_argument("--lat", type=float, default=48.8566, help="Latitude (default: Paris)")
    parser.add_argument("--lon", type=float, default=2.3522, help="Longitude (default: Paris)")
    parser.add_argument("--city", default=None)
    parser.add_argument("--country", default=None)
    parser.add_argument("--threshold", type=float, default=None, help="Cold threshold in °C (0-30)")
    parser.add_argument("--user-id", default=None, help="Load stored settings for this user")
    parser.add_argument("--no-ai", action="store_true", help="Skip AI enhancement for this run")
    parser.add_argument("--no-news", action="store_true", help="Skip the news digest")
    parser.add_argument("--mock", action="store_true", help="Use offline mock providers")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.threshold is not None and not 0 <= args.threshold <= 30:
        parser.error("--threshold must be between 0 and 30")
    if args.user_id is not None and (args.threshold is not None or args.no_news):
        parser.error("--user-id loads stored settings; drop --threshold and --no-news")

    config = AppConfig.from_env()
    if args.mock:
        config.ai_provider = "mock"
    app = MorningHelperApp(config=config, use_mocks=args.mock)

    settings = None
    if args.user_id is None:
        defaults = UserPreferences()
        settings = UserPreferences(
            temperature_threshold=args.threshold if args.threshold is not None else defaults.temperature_threshold,
            ai_suggestions_enabled=not args.no_ai,
            news_enabled=not args.no_news,
        )
    location = Location(latitude=args.lat, longitude=args.lon, city=args.city, country=args.country)
    suggestions = asyncio.run(
        app.morning_suggestions(location, settings=settings, user_id=args.user_id, use_ai=not args.no_ai)
    )
    print(json.dumps(to_payload(suggestions), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
