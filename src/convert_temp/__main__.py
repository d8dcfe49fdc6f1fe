"""CLI entry point: python -m convert_temp."""

from convert_temp.cli import cli

if __name__ == "__main__":
    cli(prog_name="convert-temp")
