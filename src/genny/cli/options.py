# topmark:header:start
#
#   project      : Genny
#   file         : options.py
#   file_relpath : src/genny/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Centralizes the reusable options (verbosity, site root) and their resolution
logic, so commands stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from genny.cli.errors import GennyUsageError
from genny.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        GennyUsageError: If both ``-v`` and ``-q`` are given.

    Behavior:
        ``-vvv`` sets TRACE, ``-vv`` DEBUG, ``-v`` INFO (per-page progress).
        ``-q`` sets ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise GennyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show build progress. Repeat for debug (-vv) and trace (-vvv) output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def root_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--root`` option naming the directory to search for ``genny.toml``."""
    return click.option(
        "--root",
        "root",
        type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
        default=None,
        help="Directory to start searching for genny.toml (defaults to the current directory).",
    )(f)
