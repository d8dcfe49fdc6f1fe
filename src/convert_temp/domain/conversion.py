"""Pairwise linear conversions between temperature scales.

Every source/target pair has its own explicit formula.  Routing through a
third scale (e.g. Fahrenheit -> Celsius -> Kelvin) rounds differently from
the direct formula, so no formula here is derived from another.

Celsius to:
  Fahrenheit  F = C * 1.8 + 32.0
  Kelvin      K = C + 273.15
Fahrenheit to:
  Celsius     C = (F - 32.0) / 1.8
  Kelvin      K = (F - 32.0) / 1.8 + 273.15
Kelvin to:
  Celsius     C = K - 273.15
  Fahrenheit  F = (K - 273.15) * 1.8 + 32.0
"""

from __future__ import annotations

from convert_temp.domain.constants import (
    ABSOLUTE_ZERO_TOLERANCE,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_SCALE,
    KELVIN_OFFSET,
)
from convert_temp.domain.units import TemperatureUnit

Unit = TemperatureUnit


def convert(value: float, source: TemperatureUnit, target: TemperatureUnit) -> float:
    """Convert *value* from *source* to *target* using the direct formula.

    Kelvin results within float noise of absolute zero are floored to ``0.0``.
    """
    result = _direct(value, source, target)
    if target is Unit.KELVIN:
        return _floor_kelvin(result)
    return result


def exact_kelvin(value: float, unit: TemperatureUnit) -> float:
    """Express *value* (in *unit*) in Kelvin without flooring near absolute zero."""
    return _direct(value, unit, Unit.KELVIN)


def _direct(value: float, source: TemperatureUnit, target: TemperatureUnit) -> float:
    if source is target:
        return value
    match (source, target):
        case (Unit.CELSIUS, Unit.FAHRENHEIT):
            return value * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
        case (Unit.CELSIUS, Unit.KELVIN):
            return value + KELVIN_OFFSET
        case (Unit.FAHRENHEIT, Unit.CELSIUS):
            return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
        case (Unit.FAHRENHEIT, Unit.KELVIN):
            return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE + KELVIN_OFFSET
        case (Unit.KELVIN, Unit.CELSIUS):
            return value - KELVIN_OFFSET
        case (Unit.KELVIN, Unit.FAHRENHEIT):
            return (value - KELVIN_OFFSET) * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
    msg = f"No conversion from {source!r} to {target!r}"
    raise ValueError(msg)


def to_kelvin(value: float, unit: TemperatureUnit) -> float:
    """Express *value* (in *unit*) in Kelvin."""
    return convert(value, unit, Unit.KELVIN)


def absolute_zero_in(unit: TemperatureUnit) -> float:
    """Absolute zero expressed in *unit* (0 K, -273.15 °C, -459.67 °F)."""
    return convert(0.0, Unit.KELVIN, unit)


def _floor_kelvin(kelvin: float) -> float:
    # Float error can land a few ulps under 0 K for exact absolute-zero input.
    if -ABSOLUTE_ZERO_TOLERANCE <= kelvin < 0.0:
        return 0.0
    return kelvin
