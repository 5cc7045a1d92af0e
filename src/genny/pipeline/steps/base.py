# topmark:header:start
#
#   project      : Genny
#   file         : base.py
#   file_relpath : src/genny/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based page pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?

Steps hold no per-page state; their only members are their name and the
precompiled patterns defined at module level, so one instance is shared by
every page build.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from genny.config.logging import get_logger

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for page pipeline steps.

    Subclass this and override ``run()`` (and ``may_proceed()`` when the step
    is conditional). Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs and tracing.
    """

    name: str

    def __call__(self, ctx: "PageContext") -> "PageContext":
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (PageContext): The mutable context for the current page.

        Returns:
            PageContext: The same context instance after mutation.
        """
        ctx.steps.append(self)
        if self.may_proceed(ctx):
            logger.trace("step %s - running", self.name)
            self.run(ctx)
        else:
            logger.trace("step %s - skipped", self.name)
        return ctx

    def may_proceed(self, ctx: "PageContext") -> bool:
        """Return whether the step should run. Default: always.

        Args:
            ctx (PageContext): The mutable context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return True

    def run(self, ctx: "PageContext") -> None:
        """Perform the step's work, mutating ``ctx`` in place.

        Args:
            ctx (PageContext): The mutable context.
        """
        pass
