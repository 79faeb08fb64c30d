"""Additive accessory rules: every matching condition contributes items and a reason."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from models.enums import AccessoryType, WeatherCondition
from models.suggestions import WeatherSnapshot

VERY_COLD_OFFSET_C = 5
STRONG_SUN_ABOVE_C = 25
SUNNY_ABOVE_C = 20

_ICY_CONDITIONS = {WeatherCondition.FREEZING, WeatherCondition.SLEET}


@dataclass(frozen=True)
class AccessoryDecision:
    essential: Tuple[AccessoryType, ...]
    optional: Tuple[AccessoryType, ...]
    reason: str

    @property
    def all(self) -> Tuple[AccessoryType, ...]:
        return tuple(dict.fromkeys(self.essential + self.optional))


def _add(items: List[AccessoryType], *new_items: AccessoryType) -> None:
    for item in new_items:
        if item not in items:
            items.append(item)


def decide_accessories(
    temperature: float,
    threshold: float,
    will_rain: bool,
    will_snow: bool,
    condition: WeatherCondition,
    forecast: Optional[Iterable[WeatherSnapshot]] = None,
) -> AccessoryDecision:
    """Collect essential and optional accessories for the given readings.

    ``forecast`` is accepted for callers that already hold forecast points but
    is not consulted by the current rules.

    An item lives in exactly one of the two lists. Very cold mornings promote
    the scarf to essential; the wind rule only adds a hat when neither list
    has one.
    """

    essential: List[AccessoryType] = []
    optional: List[AccessoryType] = []
    reasons: List[str] = []

    if will_rain:
        _add(essential, AccessoryType.UMBRELLA)
        reasons.append("Take an umbrella, rain is expected")

    if will_snow or condition in _ICY_CONDITIONS:
        _add(
            essential,
            AccessoryType.ANTI_SLIP_SHOES,
            AccessoryType.WINTER_BOOTS,
            AccessoryType.HAT,
            AccessoryType.GLOVES,
        )
        _add(optional, AccessoryType.SCARF)
        reasons.append("Watch out for ice and snow: wear suitable shoes and cover up")
    elif temperature < threshold:
        _add(essential, AccessoryType.HAT, AccessoryType.GLOVES)
        _add(optional, AccessoryType.SCARF)
        reasons.append(f"It is cold ({temperature}°C): hat and gloves recommended")

    if temperature < threshold - VERY_COLD_OFFSET_C:
        if AccessoryType.SCARF in optional:
            optional.remove(AccessoryType.SCARF)
        _add(essential, AccessoryType.SCARF)

    if temperature > STRONG_SUN_ABOVE_C and condition == WeatherCondition.CLEAR:
        _add(optional, AccessoryType.SUNGLASSES, AccessoryType.CAP, AccessoryType.SUNSCREEN)
        reasons.append("Strong sun today: protect yourself")
    elif temperature > SUNNY_ABOVE_C and condition == WeatherCondition.CLEAR:
        _add(optional, AccessoryType.SUNGLASSES)

    if condition == WeatherCondition.WIND:
        if AccessoryType.HAT not in essential:
            _add(optional, AccessoryType.HAT)
        reasons.append("Strong wind expected")

    if reasons:
        reason = ". ".join(reasons) + "."
    else:
        reason = f"Recommended accessories for {temperature}°C."

    return AccessoryDecision(tuple(essential), tuple(optional), reason)


__all__ = ["AccessoryDecision", "decide_accessories"]
