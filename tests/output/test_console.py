"""Tests for Rich Console factory and theme."""

from io import StringIO

from convert_temp.output.console import TEMP_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[temp.result]37°C[/temp.result]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "37°C" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


def test_theme_defines_result_styles() -> None:
    for name in ("temp.error", "temp.source", "temp.result", "temp.kind"):
        assert name in TEMP_THEME.styles
