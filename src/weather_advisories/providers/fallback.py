"""Provider that falls back to mock weather when the real source fails."""

from __future__ import annotations

import logging

from weather_advisories.errors import AdvisoryError
from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.providers.base import SnapshotProvider
from weather_advisories.providers.mock import MockSnapshotProvider

logger = logging.getLogger(__name__)


class FallbackSnapshotProvider(SnapshotProvider):
    """Try ``primary`` first; on any ``AdvisoryError`` use ``fallback``.

    The fallback defaults to ``MockSnapshotProvider``, so callers always get
    a snapshot to evaluate. Errors from the fallback itself propagate.
    """

    name = "fallback"

    def __init__(
        self,
        primary: SnapshotProvider,
        fallback: SnapshotProvider | None = None,
    ):
        self.primary = primary
        self.fallback = fallback or MockSnapshotProvider()

    def get_current_snapshot(
        self,
        coordinates: Coordinates | None = None,
    ) -> WeatherSnapshot:
        try:
            return self.primary.get_current_snapshot(coordinates)
        except AdvisoryError as e:
            logger.warning(
                f"{self.primary.name} provider failed, using {self.fallback.name}: {e}"
            )
            return self.fallback.get_current_snapshot(coordinates)
