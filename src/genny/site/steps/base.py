# topmark:header:start
#
#   project      : Genny
#   file         : base.py
#   file_relpath : src/genny/site/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for site generation steps (same lifecycle as page steps)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from genny.config.logging import get_logger

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


@dataclass
class SiteStep:
    """Reusable foundation for site steps.

    Attributes:
        name (str): Stable step identifier for logs and tracing.
    """

    name: str

    def __call__(self, ctx: "SiteContext") -> "SiteContext":
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (SiteContext): The mutable site context.

        Returns:
            SiteContext: The same context instance.
        """
        ctx.steps.append(self)
        if ctx.verbose:
            logger.info("Running: %s", self.name)
        if self.may_proceed(ctx):
            self.run(ctx)
        return ctx

    def may_proceed(self, ctx: "SiteContext") -> bool:
        """Return whether the step should run. Default: always."""
        return True

    def run(self, ctx: "SiteContext") -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        pass
