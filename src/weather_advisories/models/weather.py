"""Current-weather snapshot model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from weather_advisories.models.location import Coordinates


AIR_QUALITY_LABELS = {
    1: "Good",
    2: "Fair",
    3: "Moderate",
    4: "Poor",
    5: "Very Poor",
}


class WeatherSnapshot(BaseModel):
    """Current weather for one place, as supplied by a weather data source.

    Snapshots are immutable. ``uv_index`` and ``air_quality`` are optional:
    ``None`` means the source had no data, and the matching advisory
    category is skipped rather than treated as an error.

    Plausibility ranges (humidity 0-100, temperature -100..60) are not
    enforced here; see ``weather_advisories.validation``.
    """

    model_config = ConfigDict(frozen=True)

    # Temperature
    temperature_c: float = Field(..., description="Temperature in Celsius")
    feels_like_c: float = Field(..., description="Feels-like temperature in Celsius")

    # Humidity and wind
    humidity_percent: int = Field(..., description="Relative humidity percentage")
    wind_speed_ms: float = Field(..., description="Wind speed in meters per second")

    # UV and air quality
    uv_index: float | None = Field(default=None, description="UV index (0-12+)")
    air_quality: int | None = Field(
        default=None, description="Air quality index, 1 (good) to 5 (very poor)"
    )
    pm25: float = Field(default=0.0, description="PM2.5 concentration in µg/m³")
    pm10: float = Field(default=0.0, description="PM10 concentration in µg/m³")

    # Precipitation
    precipitation_probability: float = Field(
        default=0.0, description="Probability of precipitation (0.0-1.0)"
    )

    # Place and description
    city_name: str = Field(..., description="City the snapshot was taken for")
    country: str = Field(default="", description="ISO country code")
    description: str = Field(default="", description="Provider condition text")
    coordinates: Coordinates | None = Field(
        default=None, description="Location of the observation"
    )
    observed_at: datetime | None = Field(
        default=None, description="When the provider observed these values"
    )

    @property
    def temperature_f(self) -> float:
        """Temperature in Fahrenheit."""
        return self.temperature_c * 9 / 5 + 32

    @property
    def wind_speed_kph(self) -> float:
        """Wind speed in kilometers per hour."""
        return self.wind_speed_ms * 3.6

    @property
    def capitalized_description(self) -> str:
        """Description with every word capitalized ("clear sky" -> "Clear Sky")."""
        return " ".join(
            word[0].upper() + word[1:] if word else word
            for word in self.description.split(" ")
        )

    @property
    def air_quality_label(self) -> str | None:
        """Human-readable air quality level, or None if unavailable."""
        if self.air_quality is None:
            return None
        return AIR_QUALITY_LABELS.get(self.air_quality, "Unknown")
