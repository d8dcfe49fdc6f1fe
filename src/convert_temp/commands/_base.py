"""Custom Click command class with --examples support and negative numbers.

``TempCommand`` accepts an ``examples`` parameter; ``--examples`` prints
them and exits, which keeps ``--help`` concise.  It also lets negative
numbers such as ``-40`` through as positional arguments instead of
treating them as clusters of unknown short options.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TempCommand(click.Command):
    """Click Command subclass that supports ``--examples`` and negative values."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = dict(kwargs.pop("context_settings", None) or {})
        context_settings.setdefault("help_option_names", ["-h", "--help"])
        context_settings.setdefault("ignore_unknown_options", True)
        super().__init__(*args, context_settings=context_settings, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # ignore_unknown_options passes "-40" through; anything else that
        # still looks like an option is a genuine mistake.
        for arg in args:
            if arg == "--":
                break
            if arg.startswith("-") and len(arg) > 1 and not _is_number(arg):
                if not self._is_known_option(ctx, arg):
                    raise click.NoSuchOption(arg.split("=", 1)[0], ctx=ctx)
        return super().parse_args(ctx, args)

    def _is_known_option(self, ctx: click.Context, arg: str) -> bool:
        name = arg.split("=", 1)[0]
        for param in self.get_params(ctx):
            if not isinstance(param, click.Option):
                continue
            opts = [*param.opts, *param.secondary_opts]
            if name in opts:
                return True
            # Short option with an attached value or flag cluster: -p3, -qv
            if not name.startswith("--") and any(
                o == name[:2] for o in opts if not o.startswith("--")
            ):
                return True
        return False


def _is_number(arg: str) -> bool:
    try:
        float(arg)
    except ValueError:
        return False
    return True
