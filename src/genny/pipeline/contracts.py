# topmark:header:start
#
#   project      : Genny
#   file         : contracts.py
#   file_relpath : src/genny/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for page pipeline steps.

Steps are instantiated objects that are *callable*; the runner invokes them as
``ctx = step(ctx)``. Internally a step gates itself with ``may_proceed(ctx)``
and then mutates the context in ``run(ctx)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import PageContext


class Step(Protocol):
    """Protocol for a single page pipeline step.

    Implementations typically subclass `genny.pipeline.steps.base.BaseStep`.
    """

    name: str

    def may_proceed(self, ctx: "PageContext") -> bool:
        """Return whether the step should run for ``ctx``."""
        ...

    def run(self, ctx: "PageContext") -> None:
        """Execute the step, mutating the context in place.

        Expected absences (missing layout, missing partial) must not raise.
        """
        ...

    def __call__(self, ctx: "PageContext") -> "PageContext":
        """Run the step lifecycle and return the same context object."""
        ...
