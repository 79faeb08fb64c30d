"""Additive accessory rules."""

from logic.accessory_rules import decide_accessories
from models.enums import AccessoryType, WeatherCondition


def test_snow_needs_grip_and_warmth() -> None:
    decision = decide_accessories(5, 10, will_rain=False, will_snow=True, condition=WeatherCondition.SNOW)

    assert decision.essential == (
        AccessoryType.ANTI_SLIP_SHOES,
        AccessoryType.WINTER_BOOTS,
        AccessoryType.HAT,
        AccessoryType.GLOVES,
    )
    assert decision.optional == (AccessoryType.SCARF,)
    assert "ice and snow" in decision.reason


def test_rain_adds_umbrella_on_top_of_cold_items() -> None:
    decision = decide_accessories(7, 10, will_rain=True, will_snow=False, condition=WeatherCondition.RAIN)

    assert decision.essential == (AccessoryType.UMBRELLA, AccessoryType.HAT, AccessoryType.GLOVES)
    assert decision.optional == (AccessoryType.SCARF,)
    assert decision.reason.startswith("Take an umbrella")
    assert "7°C" in decision.reason


def test_very_cold_promotes_scarf_to_essential() -> None:
    decision = decide_accessories(2, 10, will_rain=False, will_snow=False, condition=WeatherCondition.CLOUDY)

    assert AccessoryType.SCARF in decision.essential
    assert AccessoryType.SCARF not in decision.optional


def test_icy_conditions_trigger_grip_without_snow() -> None:
    decision = decide_accessories(12, 10, will_rain=False, will_snow=False, condition=WeatherCondition.FREEZING)

    assert AccessoryType.ANTI_SLIP_SHOES in decision.essential


def test_strong_sun_suggests_protection() -> None:
    decision = decide_accessories(28, 10, will_rain=False, will_snow=False, condition=WeatherCondition.CLEAR)

    assert decision.essential == ()
    assert decision.optional == (AccessoryType.SUNGLASSES, AccessoryType.CAP, AccessoryType.SUNSCREEN)


def test_warm_clear_day_only_suggests_sunglasses() -> None:
    decision = decide_accessories(22, 10, will_rain=False, will_snow=False, condition=WeatherCondition.CLEAR)

    assert decision.optional == (AccessoryType.SUNGLASSES,)
    assert decision.reason == "Recommended accessories for 22°C."


def test_wind_hat_is_not_duplicated_when_already_essential() -> None:
    mild = decide_accessories(15, 10, will_rain=False, will_snow=False, condition=WeatherCondition.WIND)
    cold = decide_accessories(7, 10, will_rain=False, will_snow=False, condition=WeatherCondition.WIND)

    assert mild.optional == (AccessoryType.HAT,)
    assert AccessoryType.HAT in cold.essential
    assert AccessoryType.HAT not in cold.optional
    assert "wind" in cold.reason


def test_neutral_weather_has_no_items() -> None:
    decision = decide_accessories(15, 10, will_rain=False, will_snow=False, condition=WeatherCondition.CLOUDY)

    assert decision.all == ()
    assert decision.reason == "Recommended accessories for 15°C."


def test_essential_and_optional_never_overlap() -> None:
    for temperature in (-8, 0, 4, 9, 15, 23, 30):
        for condition in WeatherCondition:
            for will_rain in (True, False):
                for will_snow in (True, False):
                    decision = decide_accessories(temperature, 10, will_rain, will_snow, condition)
                    assert not set(decision.essential) & set(decision.optional)
                    assert len(decision.all) == len(decision.essential) + len(decision.optional)


def test_engine_is_pure_when_several_rules_fire() -> None:
    first = decide_accessories(2, 10, will_rain=True, will_snow=False, condition=WeatherCondition.WIND)
    second = decide_accessories(2, 10, will_rain=True, will_snow=False, condition=WeatherCondition.WIND)

    assert first == second
    assert first.essential == (
        AccessoryType.UMBRELLA,
        AccessoryType.HAT,
        AccessoryType.GLOVES,
        AccessoryType.SCARF,
    )
    assert first.optional == ()
    assert first.reason == (
        "Take an umbrella, rain is expected. It is cold (2°C): hat and gloves recommended. "
        "Strong wind expected."
    )
