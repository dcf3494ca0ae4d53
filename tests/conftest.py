"""Pytest fixtures for weather advisories tests.

This module provides test fixtures that ensure:
1. Configuration comes from a controlled environment, not a local .env
2. Snapshots can be built from a neutral baseline that triggers no cards
"""

import os
from datetime import datetime, timezone
from typing import Any, Callable

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Reset settings cache and disabled categories around each test."""
    from weather_advisories.config import get_settings

    monkeypatch.delenv("DISABLED_CATEGORIES", raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))  # keep any developer .env out
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Snapshot Fixtures
# =============================================================================

# Mild, humid, rainy-ish weather: no alert or activity card applies
NEUTRAL_SNAPSHOT: dict[str, Any] = {
    "temperature_c": 20.0,
    "feels_like_c": 20.0,
    "humidity_percent": 70,
    "wind_speed_ms": 1.0,
    "uv_index": 3.0,
    "air_quality": 1,
    "pm25": 5.0,
    "pm10": 5.0,
    "precipitation_probability": 0.5,
    "city_name": "Seoul",
    "country": "KR",
    "description": "light rain",
}


@pytest.fixture
def make_snapshot() -> Callable[..., WeatherSnapshot]:
    """Factory for snapshots: neutral baseline plus keyword overrides."""

    def _make(**overrides: Any) -> WeatherSnapshot:
        return WeatherSnapshot(**{**NEUTRAL_SNAPSHOT, **overrides})

    return _make


@pytest.fixture
def neutral_snapshot(make_snapshot) -> WeatherSnapshot:
    """Snapshot that produces no cards."""
    return make_snapshot()


@pytest.fixture
def seoul_heat_snapshot() -> WeatherSnapshot:
    """Hot, dry, breezy summer day with high UV in Seoul."""
    return WeatherSnapshot(
        temperature_c=36.0,
        feels_like_c=39.0,
        humidity_percent=40,
        wind_speed_ms=3.0,
        uv_index=9.0,
        air_quality=2,
        pm25=20.0,
        pm10=30.0,
        precipitation_probability=0.1,
        city_name="Seoul",
        country="KR",
        description="clear sky",
        coordinates=Coordinates(latitude=37.5665, longitude=126.9780),
    )


@pytest.fixture
def moscow_cold_snapshot() -> WeatherSnapshot:
    """Severe cold with snow and strong wind in Moscow."""
    return WeatherSnapshot(
        temperature_c=-16.0,
        feels_like_c=-22.0,
        humidity_percent=80,
        wind_speed_ms=10.0,
        uv_index=1.0,
        air_quality=2,
        pm25=10.0,
        pm10=20.0,
        precipitation_probability=0.7,
        city_name="Moscow",
        country="RU",
        description="snow",
    )


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def openweather_payload() -> dict[str, Any]:
    """Saved OpenWeatherMap current weather response (metric units)."""
    return {
        "coord": {"lon": -112.074, "lat": 33.4484},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {
            "temp": 41.2,
            "feels_like": 43.0,
            "temp_min": 39.0,
            "temp_max": 42.0,
            "pressure": 1008,
            "humidity": 12,
        },
        "visibility": 10000,
        "wind": {"speed": 4.6, "deg": 250},
        "dt": 1719835200,
        "sys": {"country": "US"},
        "name": "Phoenix",
    }
