"""Category evaluators for the condition rule engine.

Each evaluator looks at one aspect of a snapshot and returns the cards it
produces (usually zero or one). Evaluators are independent of each other
and never raise for a well-formed snapshot: when an optional input such as
the UV index is missing, the evaluator returns no cards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from weather_advisories.models.card import ConditionCard
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.rules.thresholds import (
    CAR_WASH_AIR_QUALITY_LIMIT,
    CAR_WASH_MAX_PRECIPITATION,
    COLD_WAVE_BANDS,
    DEFAULT_AIR_QUALITY,
    HEAT_WAVE_BANDS,
    LAUNDRY_MAX_HUMIDITY,
    LAUNDRY_MAX_PRECIPITATION,
    LAUNDRY_MIN_WIND_SPEED,
    UV_BANDS,
    WIND_BANDS,
    classify_air_quality,
    classify_falling,
    classify_rising,
)

logger = logging.getLogger(__name__)

Evaluator = Callable[[WeatherSnapshot], list[ConditionCard]]


def evaluate_temperature(snapshot: WeatherSnapshot) -> list[ConditionCard]:
    """Heat wave or cold wave card.

    The heat bands start at 33°C and the cold bands at -12°C, so a single
    temperature can produce at most one of the two.
    """
    temperature = snapshot.temperature_c

    severity = classify_rising(temperature, HEAT_WAVE_BANDS)
    if severity is not None:
        logger.debug(f"Heat wave alert ({severity.value}): {temperature}°C")
        return [
            ConditionCard.heat_wave(
                temperature=temperature,
                city_name=snapshot.city_name,
                severity=severity,
            )
        ]

    severity = classify_falling(temperature, COLD_WAVE_BANDS)
    if severity is not None:
        logger.debug(f"Cold wave alert ({severity.value}): {temperature}°C")
        return [
            ConditionCard.cold_wave(
                temperature=temperature,
                city_name=snapshot.city_name,
                severity=severity,
            )
        ]

    return []


def evaluate_uv(snapshot: WeatherSnapshot) -> list[ConditionCard]:
    """UV card, skipped when the UV index is unavailable."""
    if snapshot.uv_index is None:
        logger.debug("UV data not available, skipping UV evaluation")
        return []

    severity = classify_rising(snapshot.uv_index, UV_BANDS)
    if severity is None:
        return []

    logger.debug(f"UV alert ({severity.value}): {snapshot.uv_index}")
    return [ConditionCard.uv_alert(uv_index=snapshot.uv_index, severity=severity)]


def evaluate_air_quality(snapshot: WeatherSnapshot) -> list[ConditionCard]:
    """Air quality card, skipped when the air quality index is unavailable.

    PM2.5, PM10 and the index are independent signals; breaching any one of
    them is enough for a tier.
    """
    if snapshot.air_quality is None:
        logger.debug("Air quality data not available, skipping air quality evaluation")
        return []

    severity = classify_air_quality(snapshot.pm25, snapshot.pm10, snapshot.air_quality)
    if severity is None:
        return []

    logger.debug(
        f"Air quality alert ({severity.value}): "
        f"PM2.5={snapshot.pm25}, PM10={snapshot.pm10}, AQI={snapshot.air_quality}"
    )
    return [
        ConditionCard.air_quality_alert(
            pm25=snapshot.pm25,
            pm10=snapshot.pm10,
            aqi=snapshot.air_quality,
            city_name=snapshot.city_name,
            severity=severity,
        )
    ]


def evaluate_wind(snapshot: WeatherSnapshot) -> list[ConditionCard]:
    severity = classify_rising(snapshot.wind_speed_ms, WIND_BANDS)
    if severity is None:
        return []

    logger.debug(f"Strong wind alert ({severity.value}): {snapshot.wind_speed_ms} m/s")
    return [
        ConditionCard.strong_wind(
            wind_speed=snapshot.wind_speed_ms,
            city_name=snapshot.city_name,
            severity=severity,
        )
    ]


def is_car_wash_day(snapshot: WeatherSnapshot) -> bool:
    """Dry and not dusty; without air quality data only rain is checked."""
    return snapshot.precipitation_probability <= CAR_WASH_MAX_PRECIPITATION and (
        snapshot.air_quality is None
        or snapshot.air_quality < CAR_WASH_AIR_QUALITY_LIMIT
    )


def is_laundry_day(snapshot: WeatherSnapshot) -> bool:
    """Dry, not humid, and enough wind to dry clothes."""
    return (
        snapshot.precipitation_probability <= LAUNDRY_MAX_PRECIPITATION
        and snapshot.humidity_percent <= LAUNDRY_MAX_HUMIDITY
        and snapshot.wind_speed_ms >= LAUNDRY_MIN_WIND_SPEED
    )


def evaluate_activity_indices(snapshot: WeatherSnapshot) -> list[ConditionCard]:
    """Car wash and laundry cards; each is checked on its own and both may apply."""
    cards: list[ConditionCard] = []

    if is_car_wash_day(snapshot):
        cards.append(
            ConditionCard.car_wash_index(
                precipitation_probability=snapshot.precipitation_probability,
                air_quality=(
                    snapshot.air_quality
                    if snapshot.air_quality is not None
                    else DEFAULT_AIR_QUALITY
                ),
            )
        )
        logger.debug("Car wash index: good conditions")

    if is_laundry_day(snapshot):
        cards.append(
            ConditionCard.laundry_index(
                precipitation_probability=snapshot.precipitation_probability,
                humidity=snapshot.humidity_percent,
                wind_speed=snapshot.wind_speed_ms,
            )
        )
        logger.debug("Laundry index: good conditions")

    return cards


# Emission order; ties in severity keep this order after sorting
DEFAULT_EVALUATORS: tuple[Evaluator, ...] = (
    evaluate_temperature,
    evaluate_uv,
    evaluate_air_quality,
    evaluate_wind,
    evaluate_activity_indices,
)
