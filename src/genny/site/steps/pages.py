# topmark:header:start
#
#   project      : Genny
#   file         : pages.py
#   file_relpath : src/genny/site/steps/pages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build every discovered page and write it into the output tree.

Pages are built one after the other, each with a fresh `PageContext`. A page
that cannot be read aborts the build with `genny.errors.PageReadError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.builder import build_page_context
from genny.config.logging import get_logger
from genny.site.steps.base import SiteStep
from genny.urls import output_path_for

if TYPE_CHECKING:
    from pathlib import Path

    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


class PageWriterStep(SiteStep):
    """Render ``ctx.pages`` and write them below the output directory.

    Sets:
      - ``ctx.processed_pages``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: SiteContext) -> None:
        out_dir: Path = ctx.config.output_directory
        for page in ctx.pages:
            destination: Path = output_path_for(page, ctx.pages_directory, out_dir)
            destination.parent.mkdir(parents=True, exist_ok=True)
            if ctx.verbose:
                logger.info(
                    "Copying %s -> %s",
                    page.relative_to(ctx.pages_directory).as_posix(),
                    destination.relative_to(out_dir).as_posix(),
                )

            page_ctx: PageContext = build_page_context(
                page, ctx.config.root_directory, ctx.config, verbose=ctx.verbose
            )
            destination.write_text(page_ctx.content, encoding="utf-8")
            ctx.processed_pages += 1

            if ctx.verbose:
                logger.info("    Written: %s", destination.relative_to(out_dir).as_posix())
