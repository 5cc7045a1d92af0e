# topmark:header:start
#
#   project      : Genny
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Genny in a controlled working directory.

`run_cli_in()` changes the process working directory before invoking the
Click CLI, because ``genny build`` searches for ``genny.toml`` upwards from
the current directory.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from genny.cli.main import cli
from genny.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(cwd: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run the command from.
        argv (Sequence[str]): CLI argument vector, e.g. ``["build", "-v"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(previous)


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the suite's logging after the CLI rewired it to a runner stream."""
    yield
    setup_logging(level=TRACE_LEVEL)
