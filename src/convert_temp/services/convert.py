"""ConvertService — turns raw CLI input into a ServiceResult.

Pipeline: PARSE → VALIDATE → CONVERT → RESPOND

All domain validation errors are caught here and reported as
``ServiceResult(ok=False)``; nothing below this layer writes output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from convert_temp.domain.errors import TemperatureError
from convert_temp.domain.temperature import Temperature
from convert_temp.domain.units import TemperatureUnit
from convert_temp.services.contracts import ConversionResultData, Reading, dump_validated
from convert_temp.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from convert_temp.config.settings import TempSettings

logger = structlog.get_logger(__name__)


class ConvertService:
    """Converts one temperature to one or all other scales.

    Usage::

        result = ConvertService(settings).convert("98.6", "F", "C")
        result.data["results"][0]["display"]  # "37°C"
    """

    def __init__(self, settings: TempSettings | None = None) -> None:
        if settings is None:
            from convert_temp.config.settings import TempSettings

            settings = TempSettings()
        self._settings = settings

    def convert(
        self,
        value: str | float,
        from_unit: str | TemperatureUnit,
        to_unit: str | TemperatureUnit | None = None,
    ) -> ServiceResult:
        """Convert *value* in *from_unit* to *to_unit*, or to every other unit.

        Without *to_unit* the results follow ``[convert] target_order``
        (Celsius, Fahrenheit, Kelvin by default), skipping the source unit.
        """
        op = "convert"
        try:
            # ── PARSE ────────────────────────────────────────────
            source_unit = TemperatureUnit.parse(from_unit)
            targets = self._targets(source_unit, to_unit)
            # ── VALIDATE ─────────────────────────────────────────
            source = Temperature.new(value, source_unit)
        except TemperatureError as exc:
            logger.debug(
                "convert.rejected",
                kind=exc.kind,
                value=str(value),
                from_unit=str(from_unit),
                to_unit=None if to_unit is None else str(to_unit),
            )
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=exc.code,
                    kind=exc.kind,
                    message=str(exc),
                    detail=exc.detail(),
                ),
            )

        # ── CONVERT ──────────────────────────────────────────────
        precision = self._settings.display_precision
        converted = [source.to(target) for target in targets]

        # ── RESPOND ──────────────────────────────────────────────
        data = dump_validated(
            ConversionResultData,
            {
                "source": Reading.from_temperature(source),
                "results": [Reading.from_temperature(t, precision=precision) for t in converted],
            },
        )
        logger.debug(
            "convert.complete",
            source=str(source),
            results=[r["display"] for r in data["results"]],
            precision=precision,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            meta={"kelvin": source.kelvin},
        )

    def _targets(
        self,
        source: TemperatureUnit,
        to_unit: str | TemperatureUnit | None,
    ) -> list[TemperatureUnit]:
        if to_unit is not None:
            return [TemperatureUnit.parse(to_unit)]
        return [unit for unit in self._settings.convert.target_order if unit is not source]
