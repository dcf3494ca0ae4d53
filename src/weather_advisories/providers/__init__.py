"""Weather snapshot providers."""

from weather_advisories.providers.base import SnapshotProvider, StaticSnapshotProvider
from weather_advisories.providers.fallback import FallbackSnapshotProvider
from weather_advisories.providers.file import (
    FileSnapshotProvider,
    load_snapshot,
    parse_snapshot,
    translate_openweather,
)
from weather_advisories.providers.mock import MockSnapshotProvider

__all__ = [
    "SnapshotProvider",
    "StaticSnapshotProvider",
    "FallbackSnapshotProvider",
    "FileSnapshotProvider",
    "MockSnapshotProvider",
    "load_snapshot",
    "parse_snapshot",
    "translate_openweather",
]
