"""Condition card routes.

Evaluates snapshots posted by clients and describes the card categories
available for preference screens.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from weather_advisories.config import get_settings
from weather_advisories.errors import InvalidSnapshotError, UnknownCategoryError
from weather_advisories.models.card import (
    CardCategory,
    CardSeverity,
    CardType,
    ConditionCard,
)
from weather_advisories.models.preferences import CardTypePreferences
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.providers.mock import MockSnapshotProvider
from weather_advisories.rules.engine import ConditionRuleEngine, EvaluationSummary
from weather_advisories.validation import SnapshotValidator

logger = logging.getLogger(__name__)

router = APIRouter()

engine = ConditionRuleEngine()
validator = SnapshotValidator()


class EvaluateRequest(BaseModel):
    """Snapshot to evaluate, with optional category preferences."""

    snapshot: WeatherSnapshot
    preferences: CardTypePreferences | None = Field(
        default=None,
        description="Category preferences (server defaults if omitted)",
    )


class CardResponse(BaseModel):
    """A condition card with display metadata for the client."""

    card: ConditionCard
    category: CardCategory
    display_name: str
    color_hex: str
    safety_tips: str

    @classmethod
    def from_card(cls, card: ConditionCard) -> CardResponse:
        return cls(
            card=card,
            category=card.category,
            display_name=card.type.display_name,
            color_hex=card.severity.color_hex,
            safety_tips=card.type.safety_tips,
        )


class EvaluateResponse(BaseModel):
    """Ordered cards for one snapshot."""

    city_name: str
    cards: list[CardResponse]
    highest_severity: CardSeverity | None
    refresh_interval_minutes: int


class CategoryInfo(BaseModel):
    """A preference category and the card types it controls."""

    key: CardCategory
    display_name: str
    description: str
    icon_code: str
    enabled_by_default: bool
    card_types: list[CardType]


def _build_response(
    snapshot: WeatherSnapshot,
    preferences: CardTypePreferences,
) -> EvaluateResponse:
    summary = EvaluationSummary(cards=engine.evaluate(snapshot, preferences))
    return EvaluateResponse(
        city_name=snapshot.city_name,
        cards=[CardResponse.from_card(card) for card in summary.cards],
        highest_severity=summary.highest_severity,
        refresh_interval_minutes=get_settings().refresh_interval_minutes,
    )


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate(data: EvaluateRequest) -> EvaluateResponse:
    """Evaluate a snapshot and return its condition cards, most urgent first."""
    try:
        snapshot = validator.validate(data.snapshot)
    except InvalidSnapshotError as e:
        raise HTTPException(
            status_code=422,  # constant name differs across Starlette releases
            detail={"message": "Invalid weather snapshot", "problems": e.problems},
        ) from e

    preferences = data.preferences or get_settings().default_preferences()
    return _build_response(snapshot, preferences)


@router.get("/mock", response_model=EvaluateResponse)
async def evaluate_mock(
    disable: list[str] = Query(default=[], description="Categories to hide"),
) -> EvaluateResponse:
    """Evaluate the mock fallback snapshot."""
    preferences = get_settings().default_preferences()
    try:
        for key in disable:
            preferences = preferences.with_category(key, False)
    except UnknownCategoryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    snapshot = MockSnapshotProvider().get_current_snapshot()
    return _build_response(snapshot, preferences)


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories() -> list[CategoryInfo]:
    """List card categories with their default enabled state."""
    defaults = get_settings().default_preferences()
    return [
        CategoryInfo(
            key=category,
            display_name=category.display_name,
            description=category.description,
            icon_code=category.icon_code,
            enabled_by_default=defaults.is_enabled(category),
            card_types=[t for t in CardType if t.category == category],
        )
        for category in CardCategory
    ]
