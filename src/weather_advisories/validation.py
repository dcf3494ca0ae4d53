"""Plausibility checks for weather snapshots.

The rule engine trusts its input. Run a ``SnapshotValidator`` upstream,
where snapshots arrive from a provider or a file, to reject values no real
observation could have.
"""

from __future__ import annotations

import logging
import math

from weather_advisories.errors import InvalidSnapshotError
from weather_advisories.models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


class SnapshotValidator:
    """Range checks for snapshot values."""

    min_temperature_c: float = -100.0
    max_temperature_c: float = 60.0

    def is_valid_temperature(self, temperature: float) -> bool:
        """Check a Celsius temperature is within -100..60."""
        if math.isnan(temperature):
            return False
        return self.min_temperature_c <= temperature <= self.max_temperature_c

    def is_valid_humidity(self, humidity: int) -> bool:
        return 0 <= humidity <= 100

    def is_valid_coordinates(self, latitude: float, longitude: float) -> bool:
        return -90 <= latitude <= 90 and -180 <= longitude <= 180

    def problems(self, snapshot: WeatherSnapshot) -> list[str]:
        """List every plausibility problem found in a snapshot (empty if valid)."""
        problems: list[str] = []

        if not self.is_valid_temperature(snapshot.temperature_c):
            problems.append(f"temperature {snapshot.temperature_c}°C out of range")
        if not self.is_valid_humidity(snapshot.humidity_percent):
            problems.append(f"humidity {snapshot.humidity_percent}% out of range")
        if not snapshot.city_name.strip():
            problems.append("city name is empty")
        if snapshot.coordinates is not None and not self.is_valid_coordinates(
            snapshot.coordinates.latitude, snapshot.coordinates.longitude
        ):
            problems.append(f"coordinates {snapshot.coordinates} out of range")

        return problems

    def is_valid_snapshot(self, snapshot: WeatherSnapshot) -> bool:
        return not self.problems(snapshot)

    def validate(self, snapshot: WeatherSnapshot) -> WeatherSnapshot:
        """Return the snapshot unchanged, or raise if it is implausible.

        Raises:
            InvalidSnapshotError: Listing every problem found
        """
        problems = self.problems(snapshot)
        if problems:
            logger.warning(f"Rejected snapshot for {snapshot.city_name}: {problems}")
            raise InvalidSnapshotError(problems, city_name=snapshot.city_name or None)
        return snapshot
