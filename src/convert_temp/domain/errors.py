"""Validation errors raised while building units and temperatures.

Three failure kinds, all detected at construction time:
- InvalidUnit: token matches none of the known scales.
- InvalidValue: value is not a finite real number.
- BelowAbsoluteZero: value expressed in Kelvin is negative.

Conversion and formatting never raise; they only operate on values that
already passed these checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from convert_temp.domain.units import TemperatureUnit


class TemperatureError(ValueError):
    """Base class for every temperature validation failure."""

    kind: ClassVar[str] = "TemperatureError"
    code: ClassVar[str] = "TEMPERATURE_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for the offending input."""
        return {}


class InvalidUnitError(TemperatureError):
    """The unit token is not Celsius, Fahrenheit or Kelvin."""

    kind = "InvalidUnit"
    code = "INVALID_UNIT"

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Unknown temperature unit {token!r} (expected C, F or K)")

    def detail(self) -> dict[str, Any]:
        return {"token": str(self.token)}


class InvalidValueError(TemperatureError):
    """The value is not a finite real number."""

    kind = "InvalidValue"
    code = "INVALID_VALUE"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Temperature value {value!r} is not a finite number")

    def detail(self) -> dict[str, Any]:
        return {"value": str(self.value)}


class BelowAbsoluteZeroError(TemperatureError):
    """The value lies below 0 K once expressed in Kelvin."""

    kind = "BelowAbsoluteZero"
    code = "BELOW_ABSOLUTE_ZERO"

    def __init__(self, value: float, unit: TemperatureUnit) -> None:
        from convert_temp.domain.conversion import absolute_zero_in
        from convert_temp.domain.formatting import format_value

        self.value = value
        self.unit = unit
        floor = absolute_zero_in(unit)
        super().__init__(
            f"{format_value(value)}{unit.symbol} is below absolute zero "
            f"({format_value(floor, 2)}{unit.symbol})"
        )

    def detail(self) -> dict[str, Any]:
        return {"value": self.value, "unit": self.unit.value}
