# topmark:header:start
#
#   project      : Genny
#   file         : permalink.py
#   file_relpath : src/genny/pipeline/steps/permalink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Permalink step: derive the page's public URL from its location under ``pages/``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.constants import PAGES_DIR
from genny.pipeline.steps.base import BaseStep
from genny.urls import calculate_page_url

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)


class PermalinkStep(BaseStep):
    """Compute ``ctx.permalink`` with `genny.urls.calculate_page_url`.

    Contexts without a file path (in-memory pages) keep any permalink they
    already carry.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: PageContext) -> bool:
        """Only pages backed by a file have a location to derive a URL from."""
        return ctx.file_path is not None

    def run(self, ctx: PageContext) -> None:
        """Set ``ctx.permalink``.

        Args:
            ctx (PageContext): The context for the current page.
        """
        if ctx.file_path is None:
            return
        ctx.permalink = calculate_page_url(
            ctx.file_path,
            ctx.root_directory / PAGES_DIR,
            ctx.site.base_url,
        )
        logger.debug("permalink: %s -> %s", ctx.file_path, ctx.permalink)
