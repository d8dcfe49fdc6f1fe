"""Config file discovery.

Resolution order for the TOML file:
  1. ``--config PATH`` on the command line (must exist)
  2. ``CONVERT_TEMP_CONFIG`` env var
  3. ``convert-temp.toml`` found by walking up from the working directory
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "convert-temp.toml"
CONFIG_ENV_VAR = "CONVERT_TEMP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for convert-temp.toml.

    Checks CONVERT_TEMP_CONFIG first; a value pointing at a missing file
    disables discovery rather than falling through to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | Path | None, start: Path | None = None) -> Path | None:
    """Return the config file to load, or None to run on defaults.

    An explicit *config_path* that does not exist is a usage error.
    """
    if config_path is None:
        return find_config(start)
    p = Path(config_path)
    if not p.is_file():
        msg = f"Config file not found: {p}"
        raise click.UsageError(msg)
    return p
