# topmark:header:start
#
#   project      : Genny
#   file         : generator.py
#   file_relpath : src/genny/site/generator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generate a whole site from a `SiteConfig`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.site.context import SiteContext
from genny.site.pipelines import SITE_PIPELINE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from genny.config.logging import GennyLogger
    from genny.config.model import SiteConfig
    from genny.site.steps.base import SiteStep

logger: GennyLogger = get_logger(__name__)


def run(ctx: SiteContext, steps: Sequence[SiteStep]) -> SiteContext:
    """Execute the site steps sequentially and return the final context."""
    for step in steps:
        ctx = step(ctx)
    return ctx


def generate_site(config: SiteConfig, verbose: bool = False) -> SiteContext:
    """Build every page of the site into ``config.output_directory``.

    Args:
        config (SiteConfig): The site configuration.
        verbose (bool): Log progress for each step, page and asset.

    Returns:
        SiteContext: The final context (counts, discovered pages, sitemap path).

    Raises:
        PageReadError: If a page source cannot be read.
        OSError: If the output tree cannot be written.
    """
    logger.debug("generating site from %s", config.root_directory)
    return run(SiteContext(config=config, verbose=verbose), SITE_PIPELINE)
