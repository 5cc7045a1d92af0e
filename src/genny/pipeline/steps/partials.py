# topmark:header:start
#
#   project      : Genny
#   file         : partials.py
#   file_relpath : src/genny/pipeline/steps/partials.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Partial inclusion step (``{{ partial: NAME }}``).

Each reference resolves to ``{root}/partials/NAME``. References are handled
in reverse textual order so splicing one occurrence never shifts the offsets
of the occurrences still to be handled.

For every reference:

* already being expanded (a cycle) → the placeholder is deleted;
* the file (or the whole ``partials/`` directory) is missing → deleted;
* otherwise the partial is read, placeholders are substituted with the
  parent page's values (``{{ content }}`` is empty inside a partial), nested
  references are expanded recursively against the same ``inclusion_stack``,
  and the result is spliced in place of the reference.

The path is pushed onto ``ctx.inclusion_stack`` before expansion and popped in
a ``finally`` block, so the stack always returns to its previous size and the
same partial may be included again in an unrelated branch of the page.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from genny.config.logging import get_logger
from genny.constants import PARTIALS_DIR
from genny.pipeline.steps.base import BaseStep
from genny.pipeline.steps.placeholders import PlaceholderValues, substitute_placeholders

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)

PARTIAL_RE: Final[re.Pattern[str]] = re.compile(
    r"\{\{\s*partial\s*:\s*([^\s}]+)\s*\}\}", re.IGNORECASE
)


def resolve_partial_path(root_directory: Path, name: str) -> str:
    """Return the absolute path used both to load a partial and to detect cycles."""
    return str((root_directory / PARTIALS_DIR / name).resolve())


def include_partials(ctx: PageContext) -> int:
    """Expand every partial reference in ``ctx.content``.

    Args:
        ctx (PageContext): The page (or partial) context to expand in place.

    Returns:
        int: The number of partials spliced into this text (not counting
        nested ones).
    """
    result: str = ctx.content
    included: int = 0

    for match in reversed(list(PARTIAL_RE.finditer(result))):
        name: str = match.group(1).strip()
        start, end = match.span()
        partial_path: str = resolve_partial_path(ctx.root_directory, name)

        if partial_path in ctx.inclusion_stack:
            ctx.add_warning(f"Skipping circular reference: {name}")
            result = result[:start] + result[end:]
            continue

        if not Path(partial_path).is_file():
            ctx.add_warning(f"Partial not found: {name}")
            result = result[:start] + result[end:]
            continue

        ctx.inclusion_stack.add(partial_path)
        try:
            text: str = Path(partial_path).read_text(encoding="utf-8")
            ctx.add_info(f"Including partial: {name}")

            child: PageContext = ctx.for_partial(text)
            child.content, child.substitutions = substitute_placeholders(
                child.content, PlaceholderValues.from_context(child)
            )
            child.inclusions = include_partials(child)
        finally:
            ctx.inclusion_stack.discard(partial_path)

        result = result[:start] + child.content + result[end:]
        included += 1

    ctx.content = result
    return included


class PartialStep(BaseStep):
    """Resolve ``{{ partial: NAME }}`` references in the working content.

    Sets:
      - ``ctx.content``
      - ``ctx.inclusions``: partials spliced in at the top level
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: PageContext) -> None:
        """Expand partials; never raises for missing or cyclic references.

        Args:
            ctx (PageContext): The context for the current page.
        """
        ctx.inclusions = include_partials(ctx)
        logger.debug("partials: %d included", ctx.inclusions)
        if ctx.inclusions:
            ctx.add_info(f"Included {ctx.inclusions} partial(s)")
