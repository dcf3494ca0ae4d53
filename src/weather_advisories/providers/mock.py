"""Mock snapshot provider.

Used when the real weather source is unavailable (no network, no location
permission) so the app still has something to show. The rule engine cannot
tell a mock snapshot from a real one.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.providers.base import SnapshotProvider

logger = logging.getLogger(__name__)

SEOUL = Coordinates(latitude=37.5665, longitude=126.9780)


class MockSnapshotProvider(SnapshotProvider):
    """Provider returning fixed, mild weather for Seoul."""

    name = "mock"

    def get_current_snapshot(
        self,
        coordinates: Coordinates | None = None,
    ) -> WeatherSnapshot:
        """Return the fallback snapshot.

        Coordinates are recorded on the snapshot when given; the weather
        values are the same everywhere.
        """
        logger.info("Using mock weather snapshot")
        return WeatherSnapshot(
            temperature_c=22.0,
            feels_like_c=24.0,
            humidity_percent=65,
            wind_speed_ms=3.2,
            uv_index=5.0,
            air_quality=2,
            pm25=15.0,
            pm10=25.0,
            precipitation_probability=0.1,
            city_name="Seoul",
            country="KR",
            description="Partly Cloudy",
            coordinates=coordinates or SEOUL,
            observed_at=datetime.now(timezone.utc),
        )
