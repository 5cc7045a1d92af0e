# topmark:header:start
#
#   project      : Genny
#   file         : discovery.py
#   file_relpath : src/genny/site/steps/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover the ``*.html`` pages under ``{root}/pages``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.constants import HTML_SUFFIX, IGNORED_DIRECTORIES
from genny.site.steps.base import SiteStep

if TYPE_CHECKING:
    from pathlib import Path

    from genny.config.logging import GennyLogger
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


def discover_pages(directory: Path) -> list[Path]:
    """Return the HTML files under ``directory``, skipping ignored directories.

    Files of a directory come before the files of its subdirectories; both are
    sorted by name. A missing directory yields no pages.
    """
    if not directory.is_dir():
        return []

    entries: list[Path] = sorted(directory.iterdir())
    pages: list[Path] = [p for p in entries if p.is_file() and p.suffix == HTML_SUFFIX]
    for sub in entries:
        if sub.is_dir() and sub.name.lower() not in IGNORED_DIRECTORIES:
            pages.extend(discover_pages(sub))
    return pages


class DiscoveryStep(SiteStep):
    """Populate ``ctx.pages`` and ``ctx.pages_directory``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: SiteContext) -> None:
        ctx.pages_directory = ctx.config.pages_directory
        ctx.pages = discover_pages(ctx.pages_directory)
        logger.info("Found %d page(s)", len(ctx.pages))
