"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CONVERT_TEMP_*`` prefix
  3. TOML file    — ``convert-temp.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:func:`convert_temp.config.discovery.resolve_config`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from convert_temp.config.discovery import resolve_config
from convert_temp.config.models import MAX_PRECISION, ConvertConfig, DisplayConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``convert-temp.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TempSettings(BaseSettings):
    """Settings for one convert-temp invocation.

    Frozen after construction and stored on the Click context object.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        precision: ``--precision`` override; None defers to ``[display]``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CONVERT_TEMP_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    precision: int | None = Field(default=None, ge=0, le=MAX_PRECISION)

    # --- TOML sections ---
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    convert: ConvertConfig = Field(default_factory=ConvertConfig)

    @property
    def display_precision(self) -> int:
        """Decimal places used for converted values."""
        if self.precision is not None:
            return self.precision
        return self.display.precision

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> TempSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* or discovers ``convert-temp.toml``
        from *cwd*, then merges CLI flags as highest-priority overrides.
        Flags passed as None are dropped so lower layers still apply.
        """
        toml_path = resolve_config(config_path, cwd)
        overrides = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
