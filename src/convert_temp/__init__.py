"""convert-temp — Celsius / Fahrenheit / Kelvin conversion library and CLI."""

from __future__ import annotations

from convert_temp.domain.conversion import convert
from convert_temp.domain.errors import (
    BelowAbsoluteZeroError,
    InvalidUnitError,
    InvalidValueError,
    TemperatureError,
)
from convert_temp.domain.formatting import format_value
from convert_temp.domain.temperature import (
    ABSOLUTE_ZERO,
    BOILING_POINT,
    FREEZING_POINT,
    Temperature,
)
from convert_temp.domain.units import TemperatureUnit

__version__ = "0.1.0"

__all__ = [
    "ABSOLUTE_ZERO",
    "BOILING_POINT",
    "FREEZING_POINT",
    "BelowAbsoluteZeroError",
    "InvalidUnitError",
    "InvalidValueError",
    "Temperature",
    "TemperatureError",
    "TemperatureUnit",
    "__version__",
    "convert",
    "format_value",
]
