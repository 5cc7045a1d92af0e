# topmark:header:start
#
#   project      : Genny
#   file         : metadata.py
#   file_relpath : src/genny/pipeline/steps/metadata.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metadata step: page title, layout name and build-time constants.

Title resolution order:
  1. a ``<!-- title: VALUE -->`` directive comment;
  2. the first ``<title>...</title>`` element;
  3. empty.

The layout comes from a ``<!-- layout: NAME -->`` directive and falls back to
``default.html``. Both directives are read from the *raw* source so the result
does not depend on what later steps do to the working content.
"""

from __future__ import annotations

import re
import time
from datetime import datetime
from typing import TYPE_CHECKING, Final

from genny.config.logging import get_logger
from genny.constants import DEFAULT_LAYOUT_NAME
from genny.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)

TITLE_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(
    r"<!--\s*title:\s*(.+?)\s*-->", re.IGNORECASE
)
TITLE_TAG_RE: Final[re.Pattern[str]] = re.compile(
    r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL
)
LAYOUT_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(
    r"<!--\s*layout:\s*(\S+)\s*-->", re.IGNORECASE
)


def extract_title(source: str) -> str:
    """Return the page title declared in ``source``, or ``""``."""
    match: re.Match[str] | None = TITLE_DIRECTIVE_RE.search(source)
    if match:
        return match.group(1).strip()
    match = TITLE_TAG_RE.search(source)
    if match:
        return match.group(1).strip()
    return ""


def extract_layout_name(source: str) -> str:
    """Return the layout named by a directive in ``source``, or ``default.html``."""
    match: re.Match[str] | None = LAYOUT_DIRECTIVE_RE.search(source)
    return match.group(1).strip() if match else DEFAULT_LAYOUT_NAME


class MetadataStep(BaseStep):
    """Resolve title, layout name, year and epoch from the raw source.

    Sets:
      - ``ctx.title``, ``ctx.layout_name``, ``ctx.year``, ``ctx.epoch``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: PageContext) -> None:
        """Populate the metadata fields. Never fails.

        Args:
            ctx (PageContext): The context for the current page.
        """
        ctx.title = extract_title(ctx.raw_source)
        ctx.layout_name = extract_layout_name(ctx.raw_source)
        ctx.year = str(datetime.now().year)
        ctx.epoch = str(int(time.time()))
        logger.debug(
            "metadata: title=%r layout=%r year=%s epoch=%s",
            ctx.title,
            ctx.layout_name,
            ctx.year,
            ctx.epoch,
        )
