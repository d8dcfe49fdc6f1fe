"""Root CLI command for convert-temp with global flags."""

from __future__ import annotations

import click
from pydantic import ValidationError

from convert_temp import __version__
from convert_temp.commands._base import TempCommand
from convert_temp.commands._context import AppContext
from convert_temp.config.models import MAX_PRECISION
from convert_temp.config.settings import TempSettings


@click.command(
    cls=TempCommand,
    examples="""\
  convert-temp 98.6 F C
  convert-temp 100 celsius
  convert-temp -40 C F
  convert-temp 0 K --precision 4
  convert-temp --json 37 C K
  convert-temp -q 451 F C""",
)
@click.version_option(__version__, "-V", "--version", prog_name="convert-temp")
@click.argument("value", metavar="FROM_VALUE")
@click.argument("from_unit", metavar="FROM_UNIT")
@click.argument("to_unit", metavar="[TO_UNIT]", required=False)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print converted readings only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-p",
    "--precision",
    type=click.IntRange(0, MAX_PRECISION),
    default=None,
    help="Decimal places for converted values (default: 2).",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
def cli(
    value: str,
    from_unit: str,
    to_unit: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    precision: int | None,
    config_path: str | None,
) -> None:
    """Convert a temperature between Celsius, Fahrenheit and Kelvin.

    Units are C, F or K (case-insensitive; full names also accepted).
    Without TO_UNIT the value is converted to both other units.
    """
    try:
        settings = TempSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            precision=precision,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    app = AppContext(settings)

    from convert_temp.services.convert import ConvertService

    app.emit(ConvertService(settings).convert(value, from_unit, to_unit))
