"""Tests for snapshot and location models."""

import pytest
from pydantic import ValidationError

from weather_advisories.models.location import Coordinates
from weather_advisories.models.weather import WeatherSnapshot


class TestCoordinates:
    """Tests for the Coordinates model."""

    def test_valid_coordinates(self):
        coords = Coordinates(latitude=37.5665, longitude=126.9780)
        assert coords.latitude == 37.5665
        assert str(coords) == "37.5665,126.978"

    @pytest.mark.parametrize("latitude, longitude", [(91, 0), (-90.5, 0), (0, -181), (0, 180.1)])
    def test_out_of_range(self, latitude, longitude):
        with pytest.raises(ValidationError):
            Coordinates(latitude=latitude, longitude=longitude)

    def test_from_string(self):
        coords = Coordinates.from_string(" -33.8688, 151.2093 ")
        assert coords.latitude == pytest.approx(-33.8688)
        assert coords.longitude == pytest.approx(151.2093)

    @pytest.mark.parametrize("value", ["Seoul", "37.5", "1,2,3", "north,east"])
    def test_from_string_malformed(self, value):
        with pytest.raises(ValueError, match="Expected 'latitude,longitude'"):
            Coordinates.from_string(value)

    def test_from_string_out_of_range(self):
        with pytest.raises(ValueError):
            Coordinates.from_string("95,10")


class TestWeatherSnapshot:
    """Tests for the WeatherSnapshot model."""

    def test_optional_fields_default(self):
        """UV and air quality default to unavailable."""
        snapshot = WeatherSnapshot(
            temperature_c=20.0,
            feels_like_c=19.0,
            humidity_percent=50,
            wind_speed_ms=3.0,
            city_name="Seoul",
        )
        assert snapshot.uv_index is None
        assert snapshot.air_quality is None
        assert snapshot.air_quality_label is None
        assert snapshot.pm25 == 0.0
        assert snapshot.precipitation_probability == 0.0

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            WeatherSnapshot(temperature_c=20.0, feels_like_c=19.0, city_name="Seoul")

    def test_is_immutable(self, neutral_snapshot):
        with pytest.raises(ValidationError):
            neutral_snapshot.temperature_c = 40.0

    def test_out_of_range_values_are_accepted(self, make_snapshot):
        """Plausibility is left to the validator, not the model."""
        snapshot = make_snapshot(humidity_percent=150, temperature_c=80.0)
        assert snapshot.humidity_percent == 150

    def test_unit_conversions(self, make_snapshot):
        snapshot = make_snapshot(temperature_c=35.0, wind_speed_ms=10.0)
        assert snapshot.temperature_f == pytest.approx(95.0)
        assert snapshot.wind_speed_kph == pytest.approx(36.0)

    def test_capitalized_description(self, make_snapshot):
        assert make_snapshot(description="broken clouds").capitalized_description == "Broken Clouds"
        assert make_snapshot(description="").capitalized_description == ""

    @pytest.mark.parametrize(
        "aqi, label", [(1, "Good"), (3, "Moderate"), (5, "Very Poor"), (9, "Unknown")]
    )
    def test_air_quality_label(self, make_snapshot, aqi, label):
        assert make_snapshot(air_quality=aqi).air_quality_label == label

    def test_from_json(self):
        snapshot = WeatherSnapshot.model_validate_json(
            '{"temperature_c": 36, "feels_like_c": 38, "humidity_percent": 40,'
            ' "wind_speed_ms": 3, "uv_index": 9, "city_name": "Seoul",'
            ' "coordinates": {"latitude": 37.5, "longitude": 127.0}}'
        )
        assert snapshot.temperature_c == 36.0
        assert snapshot.uv_index == 9.0
        assert snapshot.coordinates == Coordinates(latitude=37.5, longitude=127.0)
