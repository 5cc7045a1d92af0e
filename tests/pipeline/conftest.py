# topmark:header:start
#
#   project      : Genny
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for the page pipeline tests.

Step tests bootstrap a `PageContext` directly from text and run one or more
steps on it, without going through `genny.builder`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.pipeline.context import PageContext
from genny.pipeline.runner import run

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from genny.config import SiteConfig
    from genny.pipeline.contracts import Step


def make_context(
    source: str,
    site: SiteConfig,
    *,
    file_path: Path | None = None,
    verbose: bool = False,
) -> PageContext:
    """Bootstrap a context for ``source`` rooted at ``site.root_directory``."""
    return PageContext.bootstrap(
        source=source,
        site=site,
        file_path=file_path,
        verbose=verbose,
    )


def run_steps(ctx: PageContext, *steps: Step) -> PageContext:
    """Run ``steps`` in order on ``ctx`` and return it."""
    sequence: Sequence[Step] = steps
    return run(ctx, sequence)
