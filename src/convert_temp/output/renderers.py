"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Successful conversions render one ``<source> = <result>`` line per target;
failures render a single ``ERROR:`` line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from convert_temp.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from convert_temp.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_convert(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one converted reading per line."""
    if not result.ok:
        return error_line(result)

    return "\n".join(reading["display"] for reading in result.data["results"])


def error_line(result: ServiceResult) -> str:
    """One-line diagnostic: ``ERROR: <op> — <Kind>: <message>``."""
    if result.error is None:
        return f"ERROR: {result.op} — Unknown error"
    kind = result.error.kind or result.error.code
    return f"ERROR: {result.op} — {kind}: {result.error.message}"


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    line = Text()
    line.append("ERROR", style="temp.error")
    line.append(f": {result.op} — ", style="temp.op")
    if result.error is None:
        line.append("Unknown error")
        console.print(line)
        return
    line.append(result.error.kind or result.error.code, style="temp.kind")
    line.append(f": {result.error.message}")
    console.print(line)
    if verbose:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """``98.6°F = 37°C`` — one line per target unit."""
    source = result.data["source"]["display"]
    for reading in result.data["results"]:
        line = Text()
        line.append(source, style="temp.source")
        line.append(" = ", style="temp.equals")
        line.append(reading["display"], style="temp.result")
        console.print(line)
    if verbose and result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="temp.key"), Text(str(value)), sep="")

