"""Shared pytest fixtures and test helpers for convert-temp tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from convert_temp.config.settings import TempSettings
from convert_temp.domain.units import TemperatureUnit

ALL_UNITS = list(TemperatureUnit)


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no CONVERT_TEMP_* env vars.

    Keeps a stray convert-temp.toml or exported variable on the host from
    leaking into settings.
    """
    import os

    for name in list(os.environ):
        if name.startswith("CONVERT_TEMP_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state; the CLI reconfigures logging per invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("convert_temp")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> TempSettings:
    """Default settings with config discovery rooted at an empty temp dir."""
    return TempSettings.from_cli(cwd=tmp_path)


def make_settings(tmp_path: Path, toml: str | None = None, **flags: Any) -> TempSettings:
    """Build settings, optionally from a convert-temp.toml written into *tmp_path*."""
    if toml is not None:
        (tmp_path / "convert-temp.toml").write_text(toml, encoding="utf-8")
    return TempSettings.from_cli(cwd=tmp_path, **flags)
