"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

import asyncio
from typing import Dict, List

from agents.orchestrator import OrchestratorAgent
from evaluation.scenarios import PARIS, EvaluationScenario, SCENARIOS
from models.suggestions import MorningSuggestions
from morning_app.config import AppConfig
from tools.news_provider import MockNewsProvider
from tools.weather_provider import MockWeatherProvider


def _evaluate_expectations(expectations: Dict[str, object], result: MorningSuggestions) -> Dict[str, bool]:
    checks: Dict[str, bool] = {}
    if "primary_clothing" in expectations:
        checks["primary_clothing"] = result.clothing.primary_type.value == expectations["primary_clothing"]
    if "essential_accessories" in expectations:
        essential = {item.value for item in result.accessories.essential_items}
        checks["essential_accessories"] = set(expectations["essential_accessories"]) <= essential
    if "optional_accessories" in expectations:
        optional = {item.value for item in result.accessories.optional_items}
        checks["optional_accessories"] = set(expectations["optional_accessories"]) <= optional
    if "first_headline_category" in expectations:
        headlines = result.news.headlines if result.news else ()
        checks["first_headline_category"] = bool(headlines) and (
            headlines[0].category.value == expectations["first_headline_category"]
        )
    return checks


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    orchestrator = OrchestratorAgent(
        config=AppConfig(ai_provider="none"),
        weather_provider=MockWeatherProvider(current=scenario.weather),
        news_provider=MockNewsProvider(headlines=scenario.headlines),
    )
    result = asyncio.run(orchestrator.generate(PARIS, scenario.settings, use_ai=False))
    checks = _evaluate_expectations(scenario.expectations, result)
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "degraded": list(result.degraded),
        "response": result,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
