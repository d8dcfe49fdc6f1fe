"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, convert-temp.toml only contains
overrides.  No config file is needed at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from convert_temp.domain.units import TemperatureUnit

DEFAULT_TARGET_ORDER: tuple[TemperatureUnit, ...] = (
    TemperatureUnit.CELSIUS,
    TemperatureUnit.FAHRENHEIT,
    TemperatureUnit.KELVIN,
)

MAX_PRECISION = 15


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    precision: int = Field(default=2, ge=0, le=MAX_PRECISION)


class ConvertConfig(BaseModel):
    """[convert] section.

    ``target_order`` decides the order of results when no target unit is
    given; the source unit is always skipped.
    """

    model_config = {"frozen": True}

    target_order: tuple[TemperatureUnit, ...] = DEFAULT_TARGET_ORDER

    @field_validator("target_order", mode="before")
    @classmethod
    def _parse_units(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return tuple(TemperatureUnit.parse(token) for token in value)
        return value

    @field_validator("target_order")
    @classmethod
    def _check_permutation(cls, value: tuple[TemperatureUnit, ...]) -> tuple[TemperatureUnit, ...]:
        if sorted(value) != sorted(TemperatureUnit):
            msg = "target_order must list celsius, fahrenheit and kelvin exactly once"
            raise ValueError(msg)
        return value


class TempConfig(BaseModel):
    """Top-level convert-temp.toml model."""

    model_config = {"frozen": True}

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    convert: ConvertConfig = Field(default_factory=ConvertConfig)
