"""Condition rule engine.

The rule engine runs every category evaluator against one weather snapshot
and returns the resulting condition cards, most urgent first. It is a pure
function of the snapshot: no I/O, no state kept between calls, and safe to
call from several threads at once. Callers re-run it on every refresh.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from weather_advisories.models.card import CardSeverity, ConditionCard, utcnow
from weather_advisories.models.preferences import CardTypePreferences
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.rules.evaluators import DEFAULT_EVALUATORS, Evaluator

logger = logging.getLogger(__name__)


def sort_by_severity(cards: Iterable[ConditionCard]) -> list[ConditionCard]:
    """Order cards danger > warning > info, keeping emission order within a tier."""
    return sorted(cards, key=lambda card: card.severity.rank, reverse=True)


@dataclass
class EvaluationSummary:
    """Overview of an ordered card list for list-rendering clients."""

    cards: list[ConditionCard] = field(default_factory=list)

    @property
    def highest_severity(self) -> CardSeverity | None:
        """Severity of the most urgent card, or None for an empty list."""
        if not self.cards:
            return None
        return max((card.severity for card in self.cards), key=lambda s: s.rank)

    @property
    def counts(self) -> dict[CardSeverity, int]:
        """Number of cards per severity (every severity present, possibly 0)."""
        counts = {severity: 0 for severity in CardSeverity}
        for card in self.cards:
            counts[card.severity] += 1
        return counts

    @property
    def has_alerts(self) -> bool:
        """True if any card is a warning or danger."""
        return any(card.severity != CardSeverity.INFO for card in self.cards)


class ConditionRuleEngine:
    """Engine turning a weather snapshot into prioritized condition cards.

    Example:
        ```python
        engine = ConditionRuleEngine()
        cards = engine.evaluate(snapshot)

        # Hide categories the user switched off
        cards = engine.evaluate(snapshot, preferences=user_preferences)
        ```
    """

    def __init__(self, evaluators: Sequence[Evaluator] = DEFAULT_EVALUATORS):
        """Initialize the rule engine.

        Args:
            evaluators: Category evaluators, run in this order
        """
        self.evaluators = tuple(evaluators)

    def evaluate(
        self,
        snapshot: WeatherSnapshot,
        preferences: CardTypePreferences | None = None,
        now: datetime | None = None,
    ) -> list[ConditionCard]:
        """Evaluate a snapshot and return cards in priority order.

        Every category is evaluated. If ``preferences`` is given, cards of
        disabled categories are dropped afterwards, exactly as
        ``preferences.filter`` would.

        Args:
            snapshot: Weather snapshot to evaluate
            preferences: Optional category preferences to filter the result
            now: Timestamp shared by every produced card (defaults to the
                current time, read once per call)

        Returns:
            Cards sorted by severity, most urgent first
        """
        logger.debug(f"Evaluating weather conditions for {snapshot.city_name}")
        logger.debug(
            f"Temperature: {snapshot.temperature_c}°C, "
            f"UV: {snapshot.uv_index}, AQI: {snapshot.air_quality}"
        )

        cards: list[ConditionCard] = []
        for evaluator in self.evaluators:
            cards.extend(evaluator(snapshot))

        now = now or utcnow()
        cards = [card.model_copy(update={"timestamp": now}) for card in cards]

        cards = sort_by_severity(cards)

        if preferences is not None:
            cards = preferences.filter(cards)

        logger.debug(f"Generated {len(cards)} condition cards")
        return cards

    def summarize(
        self,
        snapshot: WeatherSnapshot,
        preferences: CardTypePreferences | None = None,
        now: datetime | None = None,
    ) -> EvaluationSummary:
        """Evaluate a snapshot and wrap the cards in an EvaluationSummary."""
        return EvaluationSummary(cards=self.evaluate(snapshot, preferences, now))


_default_engine = ConditionRuleEngine()


def evaluate_conditions(
    snapshot: WeatherSnapshot,
    preferences: CardTypePreferences | None = None,
    now: datetime | None = None,
) -> list[ConditionCard]:
    """Evaluate a snapshot with the default evaluators.

    Args:
        snapshot: Weather snapshot to evaluate
        preferences: Optional category preferences to filter the result
        now: Timestamp shared by every produced card

    Returns:
        Cards sorted by severity, most urgent first
    """
    return _default_engine.evaluate(snapshot, preferences, now)
