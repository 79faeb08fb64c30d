"""Clothing rule chain coverage."""

import pytest

from logic.clothing_rules import decide_clothing
from models.enums import ClothingType, WeatherCondition


def test_snow_below_threshold_calls_for_heavy_coat() -> None:
    decision = decide_clothing(5, 10, will_rain=False, will_snow=True, condition=WeatherCondition.SNOW)

    assert decision.primary == ClothingType.HEAVY_COAT
    assert decision.types == (ClothingType.HEAVY_COAT, ClothingType.THERMAL_LAYERS)
    assert "5°C" in decision.reason


def test_cold_rain_prefers_waterproof_coat_over_snow_free_cold_rules() -> None:
    decision = decide_clothing(2, 10, will_rain=True, will_snow=False, condition=WeatherCondition.RAIN)

    assert decision.primary == ClothingType.WATERPROOF_COAT
    assert ClothingType.WINTER_JACKET in decision.types


def test_snow_wins_over_rain_when_both_expected() -> None:
    decision = decide_clothing(1, 10, will_rain=True, will_snow=True, condition=WeatherCondition.SLEET)

    assert decision.primary == ClothingType.HEAVY_COAT


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [
        (3, ClothingType.HEAVY_COAT),
        (5, ClothingType.WINTER_JACKET),
        (9, ClothingType.WINTER_JACKET),
        (10, ClothingType.LIGHT_JACKET),
        (19, ClothingType.LIGHT_JACKET),
        (22, ClothingType.LIGHT_CLOTHING),
        (25, ClothingType.LIGHT_CLOTHING),
        (28, ClothingType.LIGHT_CLOTHING),
    ],
)
def test_dry_weather_bands(temperature: int, expected: ClothingType) -> None:
    decision = decide_clothing(temperature, 10, will_rain=False, will_snow=False, condition=WeatherCondition.CLOUDY)

    assert decision.primary == expected


def test_mild_rain_only_needs_a_raincoat() -> None:
    decision = decide_clothing(15, 10, will_rain=True, will_snow=False, condition=WeatherCondition.RAIN)

    assert decision.primary == ClothingType.RAINCOAT
    assert decision.types == (ClothingType.RAINCOAT, ClothingType.LIGHT_JACKET)


def test_pleasant_weather_keeps_light_jacket_as_secondary() -> None:
    decision = decide_clothing(22, 10, will_rain=False, will_snow=False, condition=WeatherCondition.CLEAR)

    assert decision.types == (ClothingType.LIGHT_JACKET, ClothingType.LIGHT_CLOTHING)


def test_zero_threshold_is_honoured() -> None:
    mild = decide_clothing(2, 0, will_rain=False, will_snow=False, condition=WeatherCondition.CLOUDY)
    freezing = decide_clothing(-1, 0, will_rain=False, will_snow=False, condition=WeatherCondition.CLOUDY)

    assert mild.primary == ClothingType.LIGHT_JACKET
    assert freezing.primary == ClothingType.WINTER_JACKET


def test_higher_threshold_shifts_the_cold_bands() -> None:
    decision = decide_clothing(18, 20, will_rain=False, will_snow=False, condition=WeatherCondition.CLOUDY)

    assert decision.primary == ClothingType.WINTER_JACKET


@pytest.mark.parametrize("temperature", [-10, 0, 7, 12, 18, 24, 31])
@pytest.mark.parametrize("will_rain", [True, False])
@pytest.mark.parametrize("will_snow", [True, False])
def test_primary_is_always_one_of_the_recommended_types(temperature: int, will_rain: bool, will_snow: bool) -> None:
    decision = decide_clothing(temperature, 10, will_rain, will_snow, WeatherCondition.CLOUDY)

    assert decision.types
    assert decision.primary in decision.types
    assert decision.reason


def test_engine_is_pure() -> None:
    first = decide_clothing(4, 10, True, False, WeatherCondition.RAIN)
    second = decide_clothing(4, 10, True, False, WeatherCondition.RAIN)

    assert first == second
