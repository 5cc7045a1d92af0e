# topmark:header:start
#
#   project      : Genny
#   file         : main.py
#   file_relpath : src/genny/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj`` so that every
subcommand shares the same console and logging setup.
"""

from __future__ import annotations

import click

from genny.cli.commands.build import build_command
from genny.cli.commands.version import version_command
from genny.cli.console import ClickConsole
from genny.config.logging import resolve_env_log_level, setup_logging


def init_common_state(ctx: click.Context, *, no_color: bool) -> None:
    """Initialize logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Genny: a small static site generator.",
)
@click.option("--no-color", "no_color", is_flag=True, default=False, help="Disable ANSI colors.")
@click.pass_context
def cli(ctx: click.Context, no_color: bool) -> None:
    """Entry point for the Genny CLI."""
    init_common_state(ctx, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'genny build' inside a site directory to generate it.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(build_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
