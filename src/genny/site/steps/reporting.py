# topmark:header:start
#
#   project      : Genny
#   file         : reporting.py
#   file_relpath : src/genny/site/steps/reporting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Progress logging steps that bracket a site build."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.constants import VALUE_NOT_SET
from genny.site.steps.base import SiteStep

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


class ConfigurationLoggingStep(SiteStep):
    """Log the effective configuration in verbose mode."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: SiteContext) -> bool:
        return ctx.verbose

    def run(self, ctx: SiteContext) -> None:
        cfg = ctx.config
        logger.info("Configuration:")
        logger.info("  Root directory: %s", cfg.root_directory)
        logger.info("  Output directory: %s", cfg.output_directory)
        logger.info("  Site name: %s", cfg.name or VALUE_NOT_SET)
        logger.info("  Base URL: %s", cfg.base_url or VALUE_NOT_SET)
        logger.info("  Minify output: %s", cfg.minify_output)
        logger.info("  Generate sitemap: %s", cfg.generate_sitemap)


class CompletionStep(SiteStep):
    """Log where the site was written."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: SiteContext) -> None:
        logger.info(
            "Site generated to %s (%d page(s), %d asset(s))",
            ctx.config.output_directory,
            ctx.processed_pages,
            ctx.copied_public_files,
        )
