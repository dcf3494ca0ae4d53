"""Weather advisory cards: heat/cold, UV, air quality, wind and activity indices."""

from weather_advisories.models import (
    CardCategory,
    CardSeverity,
    CardType,
    CardTypePreferences,
    ConditionCard,
    WeatherSnapshot,
)
from weather_advisories.rules import ConditionRuleEngine, evaluate_conditions

__version__ = "0.1.0"

__all__ = [
    "CardCategory",
    "CardSeverity",
    "CardType",
    "CardTypePreferences",
    "ConditionCard",
    "WeatherSnapshot",
    "ConditionRuleEngine",
    "evaluate_conditions",
]
