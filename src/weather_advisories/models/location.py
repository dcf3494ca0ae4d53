"""Where a snapshot was observed."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Observation point in decimal degrees, range-checked on construction."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Degrees north (negative south)")
    longitude: float = Field(..., ge=-180, le=180, description="Degrees east (negative west)")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse ``"lat,lon"`` as typed on the command line, e.g. ``"37.5665,126.978"``.

        Raises:
            ValueError: If the text is not two comma-separated numbers, or a
                value is out of range
        """
        parts = [part.strip() for part in value.split(",")]
        try:
            latitude, longitude = (float(part) for part in parts)
        except ValueError:
            raise ValueError(f"Expected 'latitude,longitude', got '{value}'") from None
        return cls(latitude=latitude, longitude=longitude)

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
