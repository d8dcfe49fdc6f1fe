"""Typed payload contracts for the service/CLI boundary.

These models validate payload shapes before they leave the service layer
so key regressions (for example ``results`` vs ``items``) fail fast in
tests and during development.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from convert_temp.domain.temperature import Temperature


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class Reading(BaseModel):
    """One temperature as shown to the user."""

    value: float
    unit: str
    symbol: str
    display: str

    @classmethod
    def from_temperature(cls, temp: Temperature, *, precision: int | None = None) -> Reading:
        return cls(
            value=temp.value,
            unit=temp.unit.value,
            symbol=temp.unit.symbol,
            display=temp.format(precision),
        )


class ConversionResultData(BaseModel):
    """Payload contract for ``ConvertService.convert``."""

    source: Reading
    results: list[Reading] = Field(min_length=1)
