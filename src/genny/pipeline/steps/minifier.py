# topmark:header:start
#
#   project      : Genny
#   file         : minifier.py
#   file_relpath : src/genny/pipeline/steps/minifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace minifier step.

Rules, applied in order:
  1. whitespace between two tags is removed (``>  <`` → ``><``);
  2. whitespace right after ``>`` or right before ``<`` is removed;
  3. any remaining whitespace run becomes a single space;
  4. the document is trimmed.

Only whitespace is ever removed or replaced, so the sequence of
non-whitespace characters (tags, attribute values, text) is unchanged.

The rules do not parse markup, so they also apply inside quoted attribute
values: ``<a title="x > y">`` becomes ``<a title="x >y">``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from genny.config.logging import get_logger
from genny.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)

BETWEEN_TAGS_RE: Final[re.Pattern[str]] = re.compile(r">\s+<")
AFTER_TAG_RE: Final[re.Pattern[str]] = re.compile(r">\s+")
BEFORE_TAG_RE: Final[re.Pattern[str]] = re.compile(r"\s+<")
WHITESPACE_RUN_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def minify_html(html: str) -> str:
    """Collapse insignificant whitespace in ``html``.

    Whitespace next to a ``<`` or ``>`` inside an attribute value is removed
    too; see the module docstring.
    """
    result: str = BETWEEN_TAGS_RE.sub("><", html)
    result = AFTER_TAG_RE.sub(">", result)
    result = BEFORE_TAG_RE.sub("<", result)
    result = WHITESPACE_RUN_RE.sub(" ", result)
    return result.strip()


class MinifierStep(BaseStep):
    """Minify the final page content."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: PageContext) -> None:
        """Replace ``ctx.content`` with its minified form.

        Args:
            ctx (PageContext): The context for the current page.
        """
        before: int = len(ctx.content)
        ctx.content = minify_html(ctx.content)
        logger.debug("minifier: %d -> %d characters", before, len(ctx.content))
