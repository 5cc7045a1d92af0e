# topmark:header:start
#
#   project      : Genny
#   file         : sitemap.py
#   file_relpath : src/genny/site/steps/sitemap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write ``sitemap.xml`` when the site enables ``generate_sitemap``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.constants import SITEMAP_FILE_NAME
from genny.site.steps.base import SiteStep
from genny.sitemap import generate_sitemap

if TYPE_CHECKING:
    from pathlib import Path

    from genny.config.logging import GennyLogger
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


class SitemapStep(SiteStep):
    """Render and write the sitemap.

    Sets:
      - ``ctx.sitemap_path`` (only when a sitemap was written)
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: SiteContext) -> bool:
        return ctx.config.generate_sitemap

    def run(self, ctx: SiteContext) -> None:
        if ctx.verbose:
            logger.info("Generating %s...", SITEMAP_FILE_NAME)
        xml: str | None = generate_sitemap(ctx.pages, ctx.pages_directory, ctx.config.base_url)
        if xml is None:
            return
        path: Path = ctx.config.output_directory / SITEMAP_FILE_NAME
        path.write_text(xml, encoding="utf-8")
        ctx.sitemap_path = path
        if ctx.verbose:
            logger.info("  Created: %s", SITEMAP_FILE_NAME)
