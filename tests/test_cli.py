"""Tests for the command-line interface."""

import json

import pytest

from weather_advisories.cli import main

# Flat snapshot layout as documented for snapshot files
CANONICAL_SNAPSHOT = {
    "temperature_c": 36,
    "feels_like_c": 38,
    "humidity_percent": 40,
    "wind_speed_ms": 3.0,
    "uv_index": 9,
    "air_quality": 2,
    "pm25": 20,
    "pm10": 30,
    "precipitation_probability": 0.1,
    "city_name": "Seoul",
}


class TestMockCommand:
    def test_text_output(self, capsys):
        assert main(["mock"]) == 0
        out = capsys.readouterr().out
        assert "Seoul (37.5665,126.978): 22.0°C, Partly Cloudy" in out
        assert "[INFO   ]" in out
        assert "Perfect Car Wash Day" in out

    def test_json_output(self, capsys):
        assert main(["mock", "--json"]) == 0
        cards = json.loads(capsys.readouterr().out)
        assert [c["type"] for c in cards] == ["car_wash_index"]
        assert cards[0]["severity"] == "info"

    def test_disable_category(self, capsys):
        assert main(["mock", "--disable", "activity_indices"]) == 0
        assert "No advisories." in capsys.readouterr().out

    def test_unknown_category_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["mock", "--disable", "pollen_alerts"])
        assert exc_info.value.code == 2

    def test_coordinates(self, capsys):
        assert main(["mock", "--coordinates", "35.1796,129.0756"]) == 0
        assert capsys.readouterr().out.startswith("Seoul (35.1796,129.0756): 22.0°C")

    @pytest.mark.parametrize("value", ["Busan", "91,0"])
    def test_invalid_coordinates(self, capsys, value):
        with pytest.raises(SystemExit) as exc_info:
            main(["mock", "--coordinates", value])
        assert exc_info.value.code == 2
        assert "invalid coordinates" in capsys.readouterr().err


class TestEvaluateCommand:
    def test_evaluate_file(self, capsys, tmp_path, seoul_heat_snapshot):
        path = tmp_path / "snapshot.json"
        path.write_text(seoul_heat_snapshot.model_dump_json(), encoding="utf-8")

        assert main(["evaluate", str(path), "--json"]) == 0
        cards = json.loads(capsys.readouterr().out)
        assert [c["type"] for c in cards] == [
            "heat_wave",
            "uv_index",
            "car_wash_index",
            "laundry_index",
        ]

    def test_canonical_layout_without_description(self, capsys, tmp_path):
        """The documented flat layout loads even without condition text."""
        path = tmp_path / "seoul.json"
        path.write_text(json.dumps(CANONICAL_SNAPSHOT), encoding="utf-8")

        assert main(["evaluate", str(path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Seoul: 36.0°C\n")
        assert "[DANGER ]" in out
        assert "Heat Wave Warning" in out
        assert "Perfect Laundry Weather" in out

    def test_missing_file(self, capsys, tmp_path):
        assert main(["evaluate", str(tmp_path / "missing.json")]) == 1
        assert capsys.readouterr().err.startswith("Error: Cannot read snapshot file")

    def test_missing_file_falls_back_to_mock(self, capsys, tmp_path):
        path = tmp_path / "missing.json"
        assert main(["evaluate", str(path), "--fallback-to-mock", "--json"]) == 0
        cards = json.loads(capsys.readouterr().out)
        assert [c["type"] for c in cards] == ["car_wash_index"]

    def test_implausible_snapshot(self, capsys, tmp_path, make_snapshot):
        path = tmp_path / "snapshot.json"
        path.write_text(make_snapshot(humidity_percent=150).model_dump_json(), encoding="utf-8")

        assert main(["evaluate", str(path)]) == 1
        assert "humidity 150% out of range" in capsys.readouterr().err


class TestCategoriesCommand:
    def test_lists_categories(self, capsys):
        assert main(["categories"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5
        assert lines[0].startswith("heat_cold_alerts")
        assert "heat_wave, cold_wave" in lines[0]

    def test_disabled_by_settings(self, capsys, monkeypatch):
        monkeypatch.setenv("DISABLED_CATEGORIES", '["uv_alerts"]')
        assert main(["categories"]) == 0
        uv_line = capsys.readouterr().out.splitlines()[1]
        assert uv_line.split()[:2] == ["uv_alerts", "off"]


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: weather-advisories" in capsys.readouterr().out
