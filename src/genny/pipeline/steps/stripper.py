# topmark:header:start
#
#   project      : Genny
#   file         : stripper.py
#   file_relpath : src/genny/pipeline/steps/stripper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that removes directive comments and fixes the page body.

Only ``<!-- layout: ... -->`` and ``<!-- title: ... -->`` comments are
removed, together with the whitespace on either side of them so no stray blank
lines are left behind. Every other HTML comment is kept.

The stripped text becomes ``ctx.page_body``: this is the only place the body
is assigned, and it happens before any layout replaces the working content.
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

LAYOUT_COMMENT_RE: Final[re.Pattern[str]] = re.compile(
    r"\s*<!--\s*layout:\s*\S+\s*-->\s*", re.IGNORECASE
)
TITLE_COMMENT_RE: Final[re.Pattern[str]] = re.compile(
    r"\s*<!--\s*title:\s*.+?\s*-->\s*", re.IGNORECASE
)


def strip_directives(text: str) -> str:
    """Return ``text`` without layout/title directive comments.

    Removing one directive can join the text around it into a new directive
    (``<!-- lay<!-- title: t -->out: x -->``), so both patterns are applied
    until nothing changes. Applying this twice gives the same result as
    applying it once.
    """
    previous: str | None = None
    result: str = text
    while result != previous:
        previous = result
        result = LAYOUT_COMMENT_RE.sub("", result)
        result = TITLE_COMMENT_RE.sub("", result)
    return result


class StripperStep(BaseStep):
    """Strip directive comments and assign ``ctx.page_body``.

    Sets:
      - ``ctx.content``: the stripped text
      - ``ctx.page_body``: the same text, kept for ``{{ content }}``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: PageContext) -> None:
        """Strip the working content and record it as the page body.

        Args:
            ctx (PageContext): The context for the current page.
        """
        stripped: str = strip_directives(ctx.content)
        if len(stripped) != len(ctx.content):
            logger.debug("stripper: removed %d characters", len(ctx.content) - len(stripped))
        ctx.content = stripped
        ctx.page_body = stripped
