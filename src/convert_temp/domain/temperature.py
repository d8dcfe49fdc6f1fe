"""Temperature value object.

A Temperature is an immutable ``(value, unit)`` pair.  Construction is the
single validation gate: the value must be finite and, once expressed in
Kelvin, must not lie below absolute zero.  Conversion always returns a new
instance and leaves the original untouched.

INVARIANT: no Temperature below 0 K or with a non-finite value can exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real

from convert_temp.domain.constants import ABSOLUTE_ZERO_TOLERANCE
from convert_temp.domain.conversion import absolute_zero_in, convert, exact_kelvin, to_kelvin
from convert_temp.domain.errors import BelowAbsoluteZeroError, InvalidValueError
from convert_temp.domain.formatting import format_value
from convert_temp.domain.units import TemperatureUnit


@dataclass(frozen=True, slots=True)
class Temperature:
    """A validated temperature reading in one of the three scales.

    Attributes:
        value: Numeric value in :attr:`unit`, exactly as supplied.
        unit: Scale the value is expressed in.
    """

    value: float
    unit: TemperatureUnit

    def __post_init__(self) -> None:
        if not isinstance(self.unit, TemperatureUnit):
            object.__setattr__(self, "unit", TemperatureUnit.parse(self.unit))
        object.__setattr__(self, "value", _coerce_value(self.value))
        # Fahrenheit has the widest magnitude; it must stay representable.
        if not math.isfinite(convert(self.value, self.unit, TemperatureUnit.FAHRENHEIT)):
            raise InvalidValueError(self.value)
        if exact_kelvin(self.value, self.unit) < -_kelvin_slack(self.unit):
            raise BelowAbsoluteZeroError(self.value, self.unit)

    @classmethod
    def new(cls, value: float | Decimal | str, unit: TemperatureUnit | str) -> Temperature:
        """Validate raw input and build a Temperature.

        *value* may be a real number, a :class:`~decimal.Decimal` or a numeric
        string; *unit* may be a :class:`TemperatureUnit` or any token accepted
        by :meth:`TemperatureUnit.parse`.

        Raises:
            InvalidUnitError: If *unit* is not a known scale.
            InvalidValueError: If *value* is not a finite number.
            BelowAbsoluteZeroError: If the value lies below 0 K.
        """
        return cls(_coerce_value(value), TemperatureUnit.parse(unit))

    @property
    def kelvin(self) -> float:
        """This temperature expressed in Kelvin."""
        return to_kelvin(self.value, self.unit)

    def to(self, target: TemperatureUnit | str) -> Temperature:
        """Return a new Temperature expressed in *target*.

        Never fails for a valid source: every scale covers the full range
        above absolute zero, and a result that rounds under it is pinned to
        absolute zero in *target*.
        """
        unit = TemperatureUnit.parse(target)
        value = convert(self.value, self.unit, unit)
        if exact_kelvin(value, unit) < -_kelvin_slack(unit):
            value = absolute_zero_in(unit)
        return Temperature(value, unit)

    def to_celsius(self) -> Temperature:
        return self.to(TemperatureUnit.CELSIUS)

    def to_fahrenheit(self) -> Temperature:
        return self.to(TemperatureUnit.FAHRENHEIT)

    def to_kelvin(self) -> Temperature:
        return self.to(TemperatureUnit.KELVIN)

    def isclose(self, other: Temperature, *, abs_tol: float = 1e-9) -> bool:
        """Whether *other* denotes the same physical temperature, compared in Kelvin."""
        return math.isclose(self.kelvin, other.kelvin, rel_tol=0.0, abs_tol=abs_tol)

    def format(self, precision: int | None = None) -> str:
        """Render as ``<value><symbol>``, e.g. ``"37.5°C"`` or ``"0K"``."""
        return f"{format_value(self.value, precision)}{self.unit.symbol}"

    def __str__(self) -> str:
        return self.format()


def _kelvin_slack(unit: TemperatureUnit) -> float:
    # Only the Fahrenheit formula rounds: -459.67 F lands a few ulps under 0 K.
    return ABSOLUTE_ZERO_TOLERANCE if unit is TemperatureUnit.FAHRENHEIT else 0.0


def _coerce_value(value: object) -> float:
    """Turn a number or numeric string into a finite float."""
    if isinstance(value, bool):
        raise InvalidValueError(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidValueError(value) from None
    elif isinstance(value, (Real, Decimal)):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            raise InvalidValueError(value) from None
    else:
        raise InvalidValueError(value)
    if not math.isfinite(number):
        raise InvalidValueError(value)
    return number


# --- Reference points ---

ABSOLUTE_ZERO = Temperature(0.0, TemperatureUnit.KELVIN)
FREEZING_POINT = Temperature(0.0, TemperatureUnit.CELSIUS)
BOILING_POINT = Temperature(100.0, TemperatureUnit.CELSIUS)
