"""Snapshot provider abstraction.

A snapshot provider supplies the current ``WeatherSnapshot`` the rule engine
evaluates. Providers here never touch the network: they read snapshots from
files, wrap snapshots built by the caller, or fall back to mock data.

## Canonical Units

Every provider translates its input into the canonical snapshot units:
- Temperature: Celsius (°C)
- Wind speed: meters per second (m/s)
- Humidity: percentage (0-100)
- Precipitation probability: fraction (0.0-1.0)
- Particulate matter: µg/m³
- Air quality: index 1 (good) to 5 (very poor)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot


class SnapshotProvider(ABC):
    """Abstract base class for snapshot providers.

    Example:
        ```python
        class MyProvider(SnapshotProvider):
            name = "my_provider"

            def get_current_snapshot(self, coordinates=None):
                return WeatherSnapshot(...)
        ```
    """

    name: str

    @abstractmethod
    def get_current_snapshot(
        self,
        coordinates: Coordinates | None = None,
    ) -> WeatherSnapshot:
        """Get the current weather snapshot.

        Args:
            coordinates: Location to get weather for (providers may ignore it)

        Returns:
            Snapshot in canonical units

        Raises:
            AdvisoryError: If no snapshot can be produced
        """


class StaticSnapshotProvider(SnapshotProvider):
    """Provider that always returns the snapshot it was created with."""

    name = "static"

    def __init__(self, snapshot: WeatherSnapshot):
        self.snapshot = snapshot

    def get_current_snapshot(
        self,
        coordinates: Coordinates | None = None,
    ) -> WeatherSnapshot:
        return self.snapshot
