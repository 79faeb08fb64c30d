"""Closed enumerations and their display labels.

Every enum has a matching ``*_LABELS`` table keyed by member so display text
never drifts from the set of values the rule engines can produce.
"""

from enum import Enum
from typing import Dict


class WeatherCondition(str, Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    HEAVY_RAIN = "heavy_rain"
    DRIZZLE = "drizzle"
    SNOW = "snow"
    SLEET = "sleet"
    THUNDERSTORM = "thunderstorm"
    FOG = "fog"
    WIND = "wind"
    HOT = "hot"
    FREEZING = "freezing"


class ClothingType(str, Enum):
    HEAVY_COAT = "heavy_coat"
    WATERPROOF_COAT = "waterproof_coat"
    WINTER_JACKET = "winter_jacket"
    LIGHT_JACKET = "light_jacket"
    RAINCOAT = "raincoat"
    SWEATER = "sweater"
    LIGHT_CLOTHING = "light_clothing"
    THERMAL_LAYERS = "thermal_layers"


class AccessoryType(str, Enum):
    UMBRELLA = "umbrella"
    HAT = "hat"
    GLOVES = "gloves"
    SCARF = "scarf"
    SUNGLASSES = "sunglasses"
    CAP = "cap"
    ANTI_SLIP_SHOES = "anti_slip_shoes"
    WINTER_BOOTS = "winter_boots"
    SUNSCREEN = "sunscreen"


class NewsCategory(str, Enum):
    STRIKE = "strike"
    ALERT = "alert"
    WEATHER = "weather"
    SECURITY = "security"
    TRANSPORT = "transport"
    OTHER = "other"


class TransportMode(str, Enum):
    METRO = "metro"
    BUS = "bus"
    TRAM = "tram"
    TRAIN = "train"
    CAR = "car"
    BIKE = "bike"
    SCOOTER = "scooter"
    MOTORCYCLE = "motorcycle"
    WALKING = "walking"
    CARPOOL = "carpool"
    TAXI = "taxi"


WEATHER_CONDITION_LABELS: Dict[WeatherCondition, str] = {
    WeatherCondition.CLEAR: "Clear sky",
    WeatherCondition.CLOUDY: "Cloudy",
    WeatherCondition.RAIN: "Rain",
    WeatherCondition.HEAVY_RAIN: "Heavy rain",
    WeatherCondition.DRIZZLE: "Drizzle",
    WeatherCondition.SNOW: "Snow",
    WeatherCondition.SLEET: "Sleet",
    WeatherCondition.THUNDERSTORM: "Thunderstorm",
    WeatherCondition.FOG: "Fog",
    WeatherCondition.WIND: "Strong wind",
    WeatherCondition.HOT: "Very hot",
    WeatherCondition.FREEZING: "Frost / black ice",
}

CLOTHING_LABELS: Dict[ClothingType, str] = {
    ClothingType.HEAVY_COAT: "Heavy coat / down jacket",
    ClothingType.WATERPROOF_COAT: "Warm waterproof coat",
    ClothingType.WINTER_JACKET: "Winter jacket",
    ClothingType.LIGHT_JACKET: "Light jacket",
    ClothingType.RAINCOAT: "Light raincoat",
    ClothingType.SWEATER: "Sweater / sweatshirt",
    ClothingType.LIGHT_CLOTHING: "Light clothing",
    ClothingType.THERMAL_LAYERS: "Thermal layers",
}

ACCESSORY_LABELS: Dict[AccessoryType, str] = {
    AccessoryType.UMBRELLA: "Umbrella",
    AccessoryType.HAT: "Beanie",
    AccessoryType.GLOVES: "Gloves",
    AccessoryType.SCARF: "Scarf",
    AccessoryType.SUNGLASSES: "Sunglasses",
    AccessoryType.CAP: "Cap",
    AccessoryType.ANTI_SLIP_SHOES: "Anti-slip shoes",
    AccessoryType.WINTER_BOOTS: "Winter boots",
    AccessoryType.SUNSCREEN: "Sunscreen",
}

NEWS_CATEGORY_LABELS: Dict[NewsCategory, str] = {
    NewsCategory.STRIKE: "Strike",
    NewsCategory.ALERT: "Alert",
    NewsCategory.WEATHER: "Weather",
    NewsCategory.SECURITY: "Security",
    NewsCategory.TRANSPORT: "Transport",
    NewsCategory.OTHER: "Other",
}

TRANSPORT_MODE_LABELS: Dict[TransportMode, str] = {
    TransportMode.METRO: "Metro",
    TransportMode.BUS: "Bus",
    TransportMode.TRAM: "Tram",
    TransportMode.TRAIN: "Train",
    TransportMode.CAR: "Car",
    TransportMode.BIKE: "Bike",
    TransportMode.SCOOTER: "Scooter",
    TransportMode.MOTORCYCLE: "Motorcycle",
    TransportMode.WALKING: "Walking",
    TransportMode.CARPOOL: "Carpool",
    TransportMode.TAXI: "Taxi / ride-hailing",
}


_LABEL_TABLES: Dict[type, Dict] = {
    WeatherCondition: WEATHER_CONDITION_LABELS,
    ClothingType: CLOTHING_LABELS,
    AccessoryType: ACCESSORY_LABELS,
    NewsCategory: NEWS_CATEGORY_LABELS,
    TransportMode: TRANSPORT_MODE_LABELS,
}


def label_for(member: Enum) -> str:
    """Return the display label for any member of the enums above."""

    table = _LABEL_TABLES.get(type(member))
    if table is not None and member in table:
        return table[member]  # type: ignore[index]
    raise KeyError(f"No label registered for {member!r}")


__all__ = [
    "WeatherCondition",
    "ClothingType",
    "AccessoryType",
    "NewsCategory",
    "TransportMode",
    "WEATHER_CONDITION_LABELS",
    "CLOTHING_LABELS",
    "ACCESSORY_LABELS",
    "NEWS_CATEGORY_LABELS",
    "TRANSPORT_MODE_LABELS",
    "label_for",
]
