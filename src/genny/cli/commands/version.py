# topmark:header:start
#
#   project      : Genny
#   file         : version.py
#   file_relpath : src/genny/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny `version` command.

Prints the Genny version installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from genny.constants import GENNY_VERSION

if TYPE_CHECKING:
    from genny.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Genny.",
)
def version_command() -> None:
    """Show the current version of Genny."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(console.styled(GENNY_VERSION, bold=True))
