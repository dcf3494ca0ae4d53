"""File-based snapshot provider.

Reads a snapshot from a JSON file. Two layouts are accepted:

### Canonical snapshot
The fields of ``WeatherSnapshot`` as a flat object:
```json
{"temperature_c": 36, "feels_like_c": 38, "humidity_percent": 40,
 "wind_speed_ms": 3.0, "uv_index": 9, "air_quality": 2, "pm25": 20,
 "pm10": 30, "precipitation_probability": 0.1, "city_name": "Seoul"}
```
Only the temperatures, humidity, wind speed and city are required;
description, country, coordinates and observed_at may be left out.

### OpenWeatherMap current weather response
A saved response of the `/data/2.5/weather` endpoint (metric units).
Key paths: main.temp, main.feels_like, main.humidity, wind.speed,
weather[0].description, name, sys.country, coord.lat/lon, dt.
That endpoint carries no UV, air quality or precipitation probability, so
those stay unavailable (UV and air quality) or default to 0.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from weather_advisories.errors import SnapshotLoadError
from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot
from weather_advisories.providers.base import SnapshotProvider

logger = logging.getLogger(__name__)


def translate_openweather(payload: dict[str, Any]) -> WeatherSnapshot:
    """Translate an OpenWeatherMap current weather response to a snapshot.

    Raises:
        KeyError: If a required key is missing
        ValidationError: If a value has the wrong type
    """
    main = payload["main"]
    weather = payload.get("weather") or [{}]
    coord = payload.get("coord")
    observed = payload.get("dt")

    return WeatherSnapshot(
        temperature_c=main["temp"],
        feels_like_c=main["feels_like"],
        humidity_percent=main["humidity"],
        wind_speed_ms=payload["wind"]["speed"],
        city_name=payload["name"],
        country=payload.get("sys", {}).get("country", ""),
        description=weather[0].get("description", ""),
        coordinates=(
            Coordinates(latitude=coord["lat"], longitude=coord["lon"])
            if coord
            else None
        ),
        observed_at=(
            datetime.fromtimestamp(observed, tz=timezone.utc) if observed else None
        ),
    )


def parse_snapshot(payload: dict[str, Any]) -> WeatherSnapshot:
    """Parse either supported layout into a snapshot."""
    if "main" in payload and "wind" in payload:
        return translate_openweather(payload)
    return WeatherSnapshot.model_validate(payload)


def load_snapshot(path: str | Path) -> WeatherSnapshot:
    """Load a snapshot from a JSON file.

    Raises:
        SnapshotLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read snapshot file ({e.strerror})", str(path)) from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"Snapshot file is not valid JSON ({e.msg})", str(path)) from e

    if not isinstance(payload, dict):
        raise SnapshotLoadError("Snapshot file must contain a JSON object", str(path))

    try:
        snapshot = parse_snapshot(payload)
    except KeyError as e:
        raise SnapshotLoadError(f"Missing key {e}", str(path)) from e
    except ValidationError as e:
        raise SnapshotLoadError(
            f"Invalid snapshot ({e.error_count()} errors)", str(path)
        ) from e

    logger.debug(f"Loaded snapshot for {snapshot.city_name} from {path}")
    return snapshot


class FileSnapshotProvider(SnapshotProvider):
    """Provider reading the snapshot from a JSON file on every call."""

    name = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_current_snapshot(
        self,
        coordinates: Coordinates | None = None,
    ) -> WeatherSnapshot:
        return load_snapshot(self.path)
