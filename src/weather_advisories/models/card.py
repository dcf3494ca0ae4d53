"""Condition card models.

A condition card is a single advisory shown to the user: a heat or cold
wave warning, a UV or air quality alert, a strong wind alert, or a
positive activity index such as "good day to wash the car".

All card types share one shape (severity, title, message, icon, data), so
cards are a single model tagged by ``type`` rather than a class hierarchy.
The classmethod factories render the variant-specific text.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CardCategory(str, Enum):
    """Preference categories used to switch groups of cards on or off."""

    HEAT_COLD_ALERTS = "heat_cold_alerts"
    UV_ALERTS = "uv_alerts"
    AIR_QUALITY_ALERTS = "air_quality_alerts"
    WIND_ALERTS = "wind_alerts"
    ACTIVITY_INDICES = "activity_indices"

    @property
    def display_name(self) -> str:
        """Name shown in the settings screen."""
        return _CATEGORY_DISPLAY[self][0]

    @property
    def description(self) -> str:
        """One-line explanation of what the category alerts on."""
        return _CATEGORY_DISPLAY[self][1]

    @property
    def icon_code(self) -> str:
        return _CATEGORY_DISPLAY[self][2]


_CATEGORY_DISPLAY: dict[CardCategory, tuple[str, str, str]] = {
    CardCategory.HEAT_COLD_ALERTS: (
        "Heat / Cold Wave",
        "Alert when temperature reaches dangerous levels",
        "🌡️",
    ),
    CardCategory.UV_ALERTS: ("UV", "Alert when the UV index is high", "☀️"),
    CardCategory.AIR_QUALITY_ALERTS: (
        "Fine Dust",
        "Alert when air quality is poor",
        "😷",
    ),
    CardCategory.WIND_ALERTS: (
        "Strong Wind / Typhoon",
        "Alert when strong winds or a typhoon are expected",
        "💨",
    ),
    CardCategory.ACTIVITY_INDICES: (
        "Car Wash / Laundry Index",
        "Notify when the weather is good for washing the car or drying laundry",
        "🚗",
    ),
}


class CardType(str, Enum):
    """Closed set of condition card variants."""

    HEAT_WAVE = "heat_wave"
    COLD_WAVE = "cold_wave"
    UV_INDEX = "uv_index"
    AIR_QUALITY = "air_quality"
    STRONG_WIND = "strong_wind"
    TYPHOON = "typhoon"
    CAR_WASH_INDEX = "car_wash_index"
    LAUNDRY_INDEX = "laundry_index"

    @property
    def display_name(self) -> str:
        return _TYPE_DISPLAY_NAMES[self]

    @property
    def category(self) -> CardCategory:
        """Preference category this card type belongs to."""
        return _TYPE_CATEGORIES[self]

    @property
    def safety_tips(self) -> str:
        """Expanded help text for a card detail view."""
        return _TYPE_SAFETY_TIPS[self]


_TYPE_DISPLAY_NAMES: dict[CardType, str] = {
    CardType.HEAT_WAVE: "Heat/Cold Wave",
    CardType.COLD_WAVE: "Cold Wave",
    CardType.UV_INDEX: "UV Index",
    CardType.AIR_QUALITY: "Air Quality",
    CardType.STRONG_WIND: "Strong Wind/Typhoon",
    CardType.TYPHOON: "Typhoon",
    CardType.CAR_WASH_INDEX: "Car Wash Index",
    CardType.LAUNDRY_INDEX: "Laundry Index",
}

_TYPE_CATEGORIES: dict[CardType, CardCategory] = {
    CardType.HEAT_WAVE: CardCategory.HEAT_COLD_ALERTS,
    CardType.COLD_WAVE: CardCategory.HEAT_COLD_ALERTS,
    CardType.UV_INDEX: CardCategory.UV_ALERTS,
    CardType.AIR_QUALITY: CardCategory.AIR_QUALITY_ALERTS,
    CardType.STRONG_WIND: CardCategory.WIND_ALERTS,
    CardType.TYPHOON: CardCategory.WIND_ALERTS,
    CardType.CAR_WASH_INDEX: CardCategory.ACTIVITY_INDICES,
    CardType.LAUNDRY_INDEX: CardCategory.ACTIVITY_INDICES,
}

_GOOD_DAY_TIP = "Perfect weather conditions! Now is a great opportunity!"

_TYPE_SAFETY_TIPS: dict[CardType, str] = {
    CardType.HEAT_WAVE: (
        "Heat Wave Safety Tips:\n"
        "• Stay hydrated with plenty of water\n"
        "• Avoid outdoor activities 11 AM - 3 PM\n"
        "• Take breaks in cool, shaded areas"
    ),
    CardType.COLD_WAVE: (
        "Cold Wave Safety Tips:\n"
        "• Keep warm and dress in layers\n"
        "• Maintain proper indoor temperature\n"
        "• Watch for signs of frostbite"
    ),
    CardType.UV_INDEX: (
        "UV Protection Methods:\n"
        "• Use SPF 30+ sunscreen\n"
        "• Wear hat and sunglasses\n"
        "• Stay in shaded areas"
    ),
    CardType.AIR_QUALITY: (
        "Air Quality Protection:\n"
        "• Wear mask when outdoors\n"
        "• Keep windows closed\n"
        "• Use air purifiers indoors"
    ),
    CardType.STRONG_WIND: (
        "Strong Wind Precautions:\n"
        "• Watch for falling objects\n"
        "• Secure outdoor items\n"
        "• Limit outdoor activities"
    ),
    CardType.TYPHOON: (
        "Typhoon Preparations:\n"
        "• Monitor latest weather updates\n"
        "• Prepare emergency supplies\n"
        "• Avoid outdoor activities"
    ),
    CardType.CAR_WASH_INDEX: _GOOD_DAY_TIP,
    CardType.LAUNDRY_INDEX: _GOOD_DAY_TIP,
}


class CardSeverity(str, Enum):
    """Severity of a condition card, ordered info < warning < danger."""

    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def rank(self) -> int:
        """Sort rank, higher is more urgent."""
        return _SEVERITY_RANKS[self]

    @property
    def color_hex(self) -> str:
        return _SEVERITY_COLORS[self]


_SEVERITY_RANKS: dict[CardSeverity, int] = {
    CardSeverity.DANGER: 3,
    CardSeverity.WARNING: 2,
    CardSeverity.INFO: 1,
}

_SEVERITY_COLORS: dict[CardSeverity, str] = {
    CardSeverity.INFO: "#2196F3",
    CardSeverity.WARNING: "#FF9800",
    CardSeverity.DANGER: "#F44336",
}


def round_half_away(value: float) -> int | float:
    """Round to the nearest integer, halves away from zero (35.5 -> 36, -12.5 -> -13).

    Infinite and NaN values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class ConditionCard(BaseModel):
    """An advisory card produced from a weather snapshot."""

    model_config = ConfigDict(frozen=True)

    type: CardType = Field(..., description="Card variant")
    severity: CardSeverity = Field(..., description="Severity tier")
    title: str = Field(..., description="Short title")
    message: str = Field(..., description="Full advisory message")
    icon_code: str = Field(..., description="Symbolic glyph for the card")
    data: dict[str, Any] = Field(
        default_factory=dict, description="Values that triggered the card"
    )
    timestamp: datetime = Field(
        default_factory=utcnow, description="When the card was created"
    )

    @property
    def category(self) -> CardCategory:
        return self.type.category

    @classmethod
    def heat_wave(
        cls,
        temperature: float,
        city_name: str,
        severity: CardSeverity,
    ) -> ConditionCard:
        """Create a heat wave advisory (warning) or warning (danger) card."""
        level = "Advisory" if severity == CardSeverity.WARNING else "Warning"
        return cls(
            type=CardType.HEAT_WAVE,
            severity=severity,
            title=f"Heat Wave {level}",
            message=(
                f"Heat wave {level}! Today's high temperature in {city_name} "
                f"will reach {round_half_away(temperature)}°C. "
                "Don't forget to stay hydrated."
            ),
            icon_code="🌡️",
            data={"temperature": temperature, "city_name": city_name},
        )

    @classmethod
    def cold_wave(
        cls,
        temperature: float,
        city_name: str,
        severity: CardSeverity,
    ) -> ConditionCard:
        """Create a cold wave advisory (warning) or warning (danger) card."""
        level = "Advisory" if severity == CardSeverity.WARNING else "Warning"
        return cls(
            type=CardType.COLD_WAVE,
            severity=severity,
            title=f"Cold Wave {level}",
            message=(
                f"Cold wave {level}! Tomorrow morning temperature in {city_name} "
                f"will drop to {round_half_away(temperature)}°C. "
                "Dress warmly when going outside."
            ),
            icon_code="❄️",
            data={"temperature": temperature, "city_name": city_name},
        )

    @classmethod
    def uv_alert(cls, uv_index: float, severity: CardSeverity) -> ConditionCard:
        """Create a UV card; info is an advisory, warning and danger share the warning text."""
        if severity == CardSeverity.INFO:
            title = "UV Advisory"
            message = (
                "UV Advisory! Today's UV index is at 'High' level. "
                "Use hat or sunglasses when going outside."
            )
            icon = "🕶️"
        else:
            title = "UV Warning"
            message = (
                "UV Warning! UV index is very high. "
                "Avoid outdoor activities between 11 AM and 3 PM."
            )
            icon = "☀️"

        return cls(
            type=CardType.UV_INDEX,
            severity=severity,
            title=title,
            message=message,
            icon_code=icon,
            data={"uv_index": uv_index},
        )

    @classmethod
    def air_quality_alert(
        cls,
        pm25: float,
        pm10: float,
        aqi: int,
        city_name: str,
        severity: CardSeverity,
    ) -> ConditionCard:
        """Create a poor (warning) or very poor (danger) air quality card."""
        if severity == CardSeverity.WARNING:
            title = "Poor Air Quality"
            message = (
                f"Poor air quality! Current fine dust concentration in {city_name} "
                "is high. Make sure to wear a mask when going outside."
            )
            icon = "😷"
        elif severity == CardSeverity.DANGER:
            title = "Very Poor Air Quality"
            message = (
                "Very poor air quality! Fine dust concentration is at dangerous "
                "levels. Keep windows closed and stay indoors as much as possible."
            )
            icon = "🚨"
        else:
            title = "Air Quality Advisory"
            message = "Check air quality levels."
            icon = "💨"

        return cls(
            type=CardType.AIR_QUALITY,
            severity=severity,
            title=title,
            message=message,
            icon_code=icon,
            data={"pm25": pm25, "pm10": pm10, "aqi": aqi, "city_name": city_name},
        )

    @classmethod
    def strong_wind(
        cls,
        wind_speed: float,
        city_name: str,
        severity: CardSeverity,
    ) -> ConditionCard:
        return cls(
            type=CardType.STRONG_WIND,
            severity=severity,
            title="Strong Wind Advisory",
            message=(
                f"Strong wind advisory! Strong winds of {wind_speed:.1f}m/s are "
                f"expected in {city_name} from this afternoon. "
                "Be careful with facilities and outdoor objects."
            ),
            icon_code="💨",
            data={"wind_speed": wind_speed, "city_name": city_name},
        )

    @classmethod
    def car_wash_index(
        cls,
        precipitation_probability: float,
        air_quality: int,
    ) -> ConditionCard:
        return cls(
            type=CardType.CAR_WASH_INDEX,
            severity=CardSeverity.INFO,
            title="Perfect Car Wash Day",
            message=(
                "Perfect day for car washing! No rain expected until the weekend, "
                "so it will stay clean longer."
            ),
            icon_code="🚗",
            data={
                "precipitation_probability": precipitation_probability,
                "air_quality": air_quality,
            },
        )

    @classmethod
    def laundry_index(
        cls,
        precipitation_probability: float,
        humidity: int,
        wind_speed: float,
    ) -> ConditionCard:
        return cls(
            type=CardType.LAUNDRY_INDEX,
            severity=CardSeverity.INFO,
            title="Perfect Laundry Weather",
            message=(
                "Perfect laundry weather! Clear skies and moderate winds make it "
                "ideal for drying clothes."
            ),
            icon_code="👔",
            data={
                "precipitation_probability": precipitation_probability,
                "humidity": humidity,
                "wind_speed": wind_speed,
            },
        )
