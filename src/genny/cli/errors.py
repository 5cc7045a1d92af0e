# topmark:header:start
#
#   project      : Genny
#   file         : errors.py
#   file_relpath : src/genny/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Genny CLI.

Raise these from commands to signal errors with a standardized message and
exit code. When a project console is available in the Click context the
message is written through it; otherwise Click's default styling is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from genny.cli.exit_codes import ExitCode


class GennyCliError(click.ClickException):
    """Base class for all Genny CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colour is applied in `show`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class GennyConfigError(GennyCliError):
    """Error for configuration errors (missing/malformed ``genny.toml``)."""

    exit_code = ExitCode.CONFIG_ERROR


class GennyIOError(GennyCliError):
    """Error for I/O errors reading pages or writing the output tree."""

    exit_code = ExitCode.IO_ERROR


class GennyUsageError(GennyCliError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR
