"""Tests for card category preferences."""

import pytest
from pydantic import ValidationError

from weather_advisories.errors import UnknownCategoryError
from weather_advisories.models.card import CardCategory, CardType
from weather_advisories.models.preferences import CardTypePreferences
from weather_advisories.rules.engine import ConditionRuleEngine


class TestCardTypePreferences:
    """Tests for CardTypePreferences."""

    def test_all_enabled_by_default(self):
        preferences = CardTypePreferences.default()
        assert preferences.to_mapping() == {
            "heat_cold_alerts": True,
            "uv_alerts": True,
            "air_quality_alerts": True,
            "wind_alerts": True,
            "activity_indices": True,
        }
        assert preferences.disabled_categories() == []

    def test_shared_key_gates_both_types(self):
        preferences = CardTypePreferences(heat_cold_alerts=False)
        assert preferences.is_enabled(CardType.HEAT_WAVE) is False
        assert preferences.is_enabled(CardType.COLD_WAVE) is False
        assert preferences.is_enabled(CardType.UV_INDEX) is True
        assert preferences.is_enabled(CardCategory.HEAT_COLD_ALERTS) is False

    def test_from_mapping(self):
        preferences = CardTypePreferences.from_mapping({"wind_alerts": False})
        assert preferences.wind_alerts is False
        assert preferences.uv_alerts is True

    def test_from_mapping_unknown_key(self):
        with pytest.raises(UnknownCategoryError) as exc_info:
            CardTypePreferences.from_mapping({"typhoon_alerts": False})
        assert exc_info.value.key == "typhoon_alerts"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            CardTypePreferences(typhoon_alerts=False)

    def test_with_category_returns_copy(self):
        original = CardTypePreferences()
        updated = original.with_category("uv_alerts", False)
        assert original.uv_alerts is True
        assert updated.uv_alerts is False
        assert updated.disabled_categories() == [CardCategory.UV_ALERTS]

    def test_with_category_unknown(self):
        with pytest.raises(UnknownCategoryError):
            CardTypePreferences().with_category("pollen_alerts", False)

    def test_filter_preserves_order(self, seoul_heat_snapshot):
        """Filtering drops disabled categories without reordering the rest."""
        cards = ConditionRuleEngine().evaluate(seoul_heat_snapshot)
        filtered = CardTypePreferences(uv_alerts=False).filter(cards)
        assert [c.type for c in filtered] == [
            CardType.HEAT_WAVE,
            CardType.CAR_WASH_INDEX,
            CardType.LAUNDRY_INDEX,
        ]

    def test_filter_everything_disabled(self, seoul_heat_snapshot):
        preferences = CardTypePreferences.from_mapping(
            {category.value: False for category in CardCategory}
        )
        cards = ConditionRuleEngine().evaluate(seoul_heat_snapshot)
        assert preferences.filter(cards) == []
