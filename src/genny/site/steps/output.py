# topmark:header:start
#
#   project      : Genny
#   file         : output.py
#   file_relpath : src/genny/site/steps/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output directory steps: start every build from an empty output directory."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.site.steps.base import SiteStep

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


class CleanupStep(SiteStep):
    """Remove the output directory left by a previous build."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: SiteContext) -> bool:
        return ctx.config.output_directory.is_dir()

    def run(self, ctx: SiteContext) -> None:
        if ctx.verbose:
            logger.info("Cleaning build directory...")
        shutil.rmtree(ctx.config.output_directory)


class CreateOutputStep(SiteStep):
    """Create the (empty) output directory."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: SiteContext) -> None:
        ctx.config.output_directory.mkdir(parents=True, exist_ok=True)
