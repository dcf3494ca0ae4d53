"""Domain models for weather advisory cards."""

from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.models.card import (
    CardCategory,
    CardSeverity,
    CardType,
    ConditionCard,
)
from weather_advisories.models.preferences import CardTypePreferences

__all__ = [
    # Location
    "Coordinates",
    # Weather
    "WeatherSnapshot",
    # Cards
    "CardCategory",
    "CardSeverity",
    "CardType",
    "ConditionCard",
    # Preferences
    "CardTypePreferences",
]
