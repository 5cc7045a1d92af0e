# topmark:header:start
#
#   project      : Genny
#   file         : runner.py
#   file_relpath : src/genny/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the page pipeline for a single page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from genny.config.logging import GennyLogger

    from .context import PageContext
    from .contracts import Step

logger: GennyLogger = get_logger(__name__)


def run(ctx: PageContext, steps: Sequence[Step]) -> PageContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (PageContext): Mutable page context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
            Each step takes and returns a context.

    Returns:
        PageContext: The final context after all steps have run.
    """
    logger.debug("running %d step(s) for %s", len(steps), ctx.file_path or "<memory>")
    for step in steps:
        ctx = step(ctx)
    return ctx
