"""Threshold tables for the condition rule engine.

Each advisory category maps a weather value onto a severity tier. Tiers are
expressed as bands checked from the most severe down, so a value that
breaches the danger threshold never falls through to a weaker tier.

Units follow ``WeatherSnapshot``: °C, m/s, µg/m³, probability as 0.0-1.0.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from weather_advisories.models.card import CardSeverity


@dataclass(frozen=True)
class SeverityBand:
    """A threshold and the severity assigned when it is reached."""

    threshold: float
    severity: CardSeverity


@dataclass(frozen=True)
class AirQualityTier:
    """Composite air quality tier: any single breached signal is enough."""

    severity: CardSeverity
    min_pm25: float
    min_pm10: float
    min_aqi: int

    def is_breached(self, pm25: float, pm10: float, aqi: int) -> bool:
        return pm25 >= self.min_pm25 or pm10 >= self.min_pm10 or aqi >= self.min_aqi


# Heat wave: advisory from 33°C, warning from 35°C
HEAT_WAVE_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(threshold=35.0, severity=CardSeverity.DANGER),
    SeverityBand(threshold=33.0, severity=CardSeverity.WARNING),
)

# Cold wave: advisory at or below -12°C, warning at or below -15°C
COLD_WAVE_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(threshold=-15.0, severity=CardSeverity.DANGER),
    SeverityBand(threshold=-12.0, severity=CardSeverity.WARNING),
)

# UV: high from 6, very high from 8, extreme from 11
UV_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(threshold=11.0, severity=CardSeverity.DANGER),
    SeverityBand(threshold=8.0, severity=CardSeverity.WARNING),
    SeverityBand(threshold=6.0, severity=CardSeverity.INFO),
)

# Wind: branches sway from 9 m/s
WIND_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(threshold=14.0, severity=CardSeverity.DANGER),
    SeverityBand(threshold=9.0, severity=CardSeverity.WARNING),
)

# Air quality: "very bad" and "bad" levels for PM2.5, PM10 and the 1-5 index
AIR_QUALITY_TIERS: tuple[AirQualityTier, ...] = (
    AirQualityTier(severity=CardSeverity.DANGER, min_pm25=76.0, min_pm10=151.0, min_aqi=5),
    AirQualityTier(severity=CardSeverity.WARNING, min_pm25=36.0, min_pm10=81.0, min_aqi=4),
)

# Activity indices
CAR_WASH_MAX_PRECIPITATION = 0.20
CAR_WASH_AIR_QUALITY_LIMIT = 4  # exclusive
LAUNDRY_MAX_PRECIPITATION = 0.20
LAUNDRY_MAX_HUMIDITY = 60
LAUNDRY_MIN_WIND_SPEED = 2.0

# Fallback index recorded on car wash cards when air quality is unavailable
DEFAULT_AIR_QUALITY = 1


def _most_severe_first(bands: Sequence[SeverityBand]) -> list[SeverityBand]:
    return sorted(bands, key=lambda band: band.severity.rank, reverse=True)


def classify_rising(value: float, bands: Sequence[SeverityBand]) -> CardSeverity | None:
    """Severity of the most severe band whose threshold ``value`` reaches or exceeds."""
    for band in _most_severe_first(bands):
        if value >= band.threshold:
            return band.severity
    return None


def classify_falling(value: float, bands: Sequence[SeverityBand]) -> CardSeverity | None:
    """Severity of the most severe band whose threshold ``value`` reaches or drops below."""
    for band in _most_severe_first(bands):
        if value <= band.threshold:
            return band.severity
    return None


def classify_air_quality(
    pm25: float,
    pm10: float,
    aqi: int,
    tiers: Sequence[AirQualityTier] = AIR_QUALITY_TIERS,
) -> CardSeverity | None:
    """Severity of the most severe air quality tier breached by any signal."""
    for tier in sorted(tiers, key=lambda t: t.severity.rank, reverse=True):
        if tier.is_breached(pm25, pm10, aqi):
            return tier.severity
    return None
