"""Temperature scales and unit-token parsing."""

from __future__ import annotations

from enum import StrEnum

from convert_temp.domain.errors import InvalidUnitError


class TemperatureUnit(StrEnum):
    """The three supported temperature scales."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        """Display symbol appended to formatted values."""
        return _SYMBOLS[self]

    @property
    def abbreviation(self) -> str:
        return _ABBREVIATIONS[self]

    @property
    def description(self) -> str:
        """Human-readable scale name (kelvin is lowercase, as an SI unit)."""
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, token: object) -> TemperatureUnit:
        """Resolve a unit from a letter, full name, or display symbol.

        Matching is case-insensitive and ignores surrounding whitespace:
        ``"C"``, ``"celsius"`` and ``"°C"`` all resolve to :attr:`CELSIUS`.

        Raises:
            InvalidUnitError: If *token* matches none of the scales.
        """
        if isinstance(token, TemperatureUnit):
            return token
        if not isinstance(token, str):
            raise InvalidUnitError(token)
        unit = _ALIASES.get(token.strip().casefold())
        if unit is None:
            raise InvalidUnitError(token)
        return unit


_SYMBOLS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.KELVIN: "K",
}

_ABBREVIATIONS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "C",
    TemperatureUnit.FAHRENHEIT: "F",
    TemperatureUnit.KELVIN: "K",
}

_DESCRIPTIONS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "Celsius",
    TemperatureUnit.FAHRENHEIT: "Fahrenheit",
    TemperatureUnit.KELVIN: "kelvin",
}

_ALIASES: dict[str, TemperatureUnit] = {}
for _unit in TemperatureUnit:
    for _alias in (_unit.value, _ABBREVIATIONS[_unit], _SYMBOLS[_unit]):
        _ALIASES[_alias.casefold()] = _unit
del _unit, _alias
