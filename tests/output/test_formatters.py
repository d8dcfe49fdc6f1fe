"""Tests for the format_result dispatcher and OutputSettings."""

import json

from convert_temp.output.formatters import OutputSettings, format_result
from convert_temp.services.result import ServiceError, ServiceResult


def _ok() -> ServiceResult:
    reading = {"value": 37.0, "unit": "celsius", "symbol": "°C", "display": "37°C"}
    source = {"value": 98.6, "unit": "fahrenheit", "symbol": "°F", "display": "98.6°F"}
    return ServiceResult(ok=True, op="convert", data={"source": source, "results": [reading]})


def _err() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="convert",
        error=ServiceError(code="INVALID_UNIT", kind="InvalidUnit", message="bad unit"),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_default_is_rich_text(self) -> None:
        assert format_result(_ok()) == "98.6°F = 37°C"

    def test_json_mode(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["results"][0]["display"] == "37°C"

    def test_json_mode_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_UNIT"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "convert"

    def test_quiet_mode(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "37°C"

    def test_error_text(self) -> None:
        assert format_result(_err()) == "ERROR: convert — InvalidUnit: bad unit"
