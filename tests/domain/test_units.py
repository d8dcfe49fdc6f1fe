"""Tests for TemperatureUnit — members, symbols, and token parsing."""

import pytest

from convert_temp.domain.errors import InvalidUnitError, TemperatureError
from convert_temp.domain.units import TemperatureUnit


def test_enum_members_and_values() -> None:
    assert {u.value for u in TemperatureUnit} == {"celsius", "fahrenheit", "kelvin"}
    for member in TemperatureUnit:
        assert member == member.value
        assert isinstance(member, str)


@pytest.mark.parametrize(
    "unit,symbol,abbreviation,description",
    [
        (TemperatureUnit.CELSIUS, "°C", "C", "Celsius"),
        (TemperatureUnit.FAHRENHEIT, "°F", "F", "Fahrenheit"),
        (TemperatureUnit.KELVIN, "K", "K", "kelvin"),
    ],
    ids=["celsius", "fahrenheit", "kelvin"],
)
def test_display_attributes(
    unit: TemperatureUnit, symbol: str, abbreviation: str, description: str
) -> None:
    assert unit.symbol == symbol
    assert unit.abbreviation == abbreviation
    assert unit.description == description


class TestParse:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("C", TemperatureUnit.CELSIUS),
            ("c", TemperatureUnit.CELSIUS),
            ("celsius", TemperatureUnit.CELSIUS),
            ("CELSIUS", TemperatureUnit.CELSIUS),
            ("°C", TemperatureUnit.CELSIUS),
            ("F", TemperatureUnit.FAHRENHEIT),
            ("Fahrenheit", TemperatureUnit.FAHRENHEIT),
            ("°f", TemperatureUnit.FAHRENHEIT),
            ("k", TemperatureUnit.KELVIN),
            ("Kelvin", TemperatureUnit.KELVIN),
            ("  K  ", TemperatureUnit.KELVIN),
        ],
    )
    def test_accepts_letters_names_and_symbols(
        self, token: str, expected: TemperatureUnit
    ) -> None:
        assert TemperatureUnit.parse(token) is expected

    def test_member_passes_through(self) -> None:
        assert TemperatureUnit.parse(TemperatureUnit.KELVIN) is TemperatureUnit.KELVIN

    @pytest.mark.parametrize("token", ["X", "", "  ", "cel", "kelvins", "°K", "R"])
    def test_rejects_unknown_tokens(self, token: str) -> None:
        with pytest.raises(InvalidUnitError) as exc_info:
            TemperatureUnit.parse(token)
        assert exc_info.value.token == token
        assert exc_info.value.kind == "InvalidUnit"

    @pytest.mark.parametrize("token", [None, 1, 3.5])
    def test_rejects_non_strings(self, token: object) -> None:
        with pytest.raises(InvalidUnitError):
            TemperatureUnit.parse(token)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            TemperatureUnit.parse("X")
        with pytest.raises(TemperatureError):
            TemperatureUnit.parse("X")

    def test_error_message_names_token(self) -> None:
        with pytest.raises(InvalidUnitError, match="'X'"):
            TemperatureUnit.parse("X")
