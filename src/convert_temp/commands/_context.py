"""AppContext — shared Click context for the convert-temp command.

Created once per invocation.  Configures logging and provides centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from convert_temp.config.logging import configure_logging
from convert_temp.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from convert_temp.config.settings import TempSettings
    from convert_temp.services.result import ServiceResult


class AppContext:
    """Per-invocation state: settings plus output routing."""

    def __init__(self, settings: TempSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
