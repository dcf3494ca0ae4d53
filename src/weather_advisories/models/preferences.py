"""Card category preferences.

Preferences are read-only configuration for the presentation layer. The
rule engine always evaluates every category; callers drop the cards of
disabled categories afterwards with ``CardTypePreferences.filter``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Self

from pydantic import BaseModel, ConfigDict

from weather_advisories.errors import UnknownCategoryError
from weather_advisories.models.card import CardCategory, CardType, ConditionCard


class CardTypePreferences(BaseModel):
    """Enabled flag per card category. Every category is enabled by default."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    heat_cold_alerts: bool = True
    uv_alerts: bool = True
    air_quality_alerts: bool = True
    wind_alerts: bool = True
    activity_indices: bool = True

    @classmethod
    def default(cls) -> Self:
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping[str, bool]) -> Self:
        """Build preferences from a ``{category_key: enabled}`` mapping.

        Categories missing from the mapping stay enabled.

        Raises:
            UnknownCategoryError: If a key is not a known category
        """
        return cls(**{_parse_category(key).value: enabled for key, enabled in values.items()})

    def to_mapping(self) -> dict[str, bool]:
        """Return preferences as a ``{category_key: enabled}`` dict."""
        return {category.value: getattr(self, category.value) for category in CardCategory}

    def is_enabled(self, item: CardType | CardCategory) -> bool:
        """Check whether a card type (or a whole category) should be shown."""
        category = item.category if isinstance(item, CardType) else item
        return getattr(self, category.value)

    def with_category(self, key: str | CardCategory, enabled: bool) -> Self:
        """Return a copy with one category switched on or off."""
        category = _parse_category(key)
        return self.model_copy(update={category.value: enabled})

    def disabled_categories(self) -> list[CardCategory]:
        return [category for category in CardCategory if not self.is_enabled(category)]

    def filter(self, cards: Iterable[ConditionCard]) -> list[ConditionCard]:
        """Keep only cards of enabled categories, preserving their order."""
        return [card for card in cards if self.is_enabled(card.type)]


def _parse_category(key: str | CardCategory) -> CardCategory:
    if isinstance(key, CardCategory):
        return key
    try:
        return CardCategory(key)
    except ValueError:
        raise UnknownCategoryError(key) from None
