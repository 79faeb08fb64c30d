"""Deterministic clothing rules mapping weather readings to garment categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from models.enums import ClothingType, WeatherCondition

VERY_COLD_OFFSET_C = 5
HOT_ABOVE_C = 25
MILD_BELOW_C = 20


@dataclass(frozen=True)
class ClothingDecision:
    types: Tuple[ClothingType, ...]
    primary: ClothingType
    reason: str


def decide_clothing(
    temperature: float,
    threshold: float,
    will_rain: bool,
    will_snow: bool,
    condition: WeatherCondition,
) -> ClothingDecision:
    """Pick clothing for the morning.

    Rules form an ordered chain and the first match wins, so a snowy or rainy
    cold morning never reaches the plain "very cold" branch.
    """

    if will_snow and temperature < threshold:
        return ClothingDecision(
            (ClothingType.HEAVY_COAT, ClothingType.THERMAL_LAYERS),
            ClothingType.HEAVY_COAT,
            f"Snow is expected and it is {temperature}°C. Wear a down jacket or heavy coat "
            "with thermal layers underneath.",
        )
    if will_rain and temperature < threshold:
        return ClothingDecision(
            (ClothingType.WATERPROOF_COAT, ClothingType.WINTER_JACKET),
            ClothingType.WATERPROOF_COAT,
            f"Rain is expected and it is {temperature}°C. Wear a warm waterproof coat "
            "or a waterproof winter jacket.",
        )
    if temperature < threshold - VERY_COLD_OFFSET_C:
        return ClothingDecision(
            (ClothingType.HEAVY_COAT, ClothingType.THERMAL_LAYERS),
            ClothingType.HEAVY_COAT,
            f"It is very cold ({temperature}°C). Wear a down jacket or heavy coat.",
        )
    if temperature < threshold:
        return ClothingDecision(
            (ClothingType.WINTER_JACKET, ClothingType.SWEATER),
            ClothingType.WINTER_JACKET,
            f"It is {temperature}°C. Wear a winter jacket or coat.",
        )
    if will_rain:
        return ClothingDecision(
            (ClothingType.RAINCOAT, ClothingType.LIGHT_JACKET),
            ClothingType.RAINCOAT,
            f"Rain is expected but it is {temperature}°C. A light raincoat will do.",
        )
    if temperature > HOT_ABOVE_C:
        return ClothingDecision(
            (ClothingType.LIGHT_CLOTHING,),
            ClothingType.LIGHT_CLOTHING,
            f"It is hot ({temperature}°C). Wear light, breathable clothing.",
        )
    if temperature < MILD_BELOW_C:
        return ClothingDecision(
            (ClothingType.LIGHT_JACKET, ClothingType.SWEATER),
            ClothingType.LIGHT_JACKET,
            f"It is {temperature}°C. Wear a light jacket or a sweater.",
        )
    return ClothingDecision(
        (ClothingType.LIGHT_JACKET, ClothingType.LIGHT_CLOTHING),
        ClothingType.LIGHT_CLOTHING,
        f"It is {temperature}°C. Pleasant weather, light clothing is enough; "
        "a light jacket may come in handy.",
    )


__all__ = ["ClothingDecision", "decide_clothing", "VERY_COLD_OFFSET_C"]
