"""Numeric constants shared by the conversion formulas and validation."""

from __future__ import annotations

from typing import Final

# Kelvin = Celsius + KELVIN_OFFSET
KELVIN_OFFSET: Final[float] = 273.15

# Fahrenheit = Celsius * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
FAHRENHEIT_SCALE: Final[float] = 1.8
FAHRENHEIT_OFFSET: Final[float] = 32.0

# Kelvin values within this distance below zero count as absolute zero.
ABSOLUTE_ZERO_TOLERANCE: Final[float] = 1e-9
