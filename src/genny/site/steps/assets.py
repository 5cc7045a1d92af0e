# topmark:header:start
#
#   project      : Genny
#   file         : assets.py
#   file_relpath : src/genny/site/steps/assets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Copy static assets from ``public/`` into the output directory.

Files and directories listed in `genny.constants.IGNORED_FILES` and
`genny.constants.IGNORED_DIRECTORIES` are skipped (case-insensitive).
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.constants import IGNORED_DIRECTORIES, IGNORED_FILES, PUBLIC_DIR
from genny.site.steps.base import SiteStep

if TYPE_CHECKING:
    from pathlib import Path

    from genny.config.logging import GennyLogger
    from genny.site.context import SiteContext

logger: GennyLogger = get_logger(__name__)


def copy_directory_contents(source: Path, destination: Path, *, verbose: bool = False) -> int:
    """Recursively copy ``source`` into ``destination``, skipping ignored entries.

    Args:
        source (Path): Directory to copy from.
        destination (Path): Directory to copy into (created if needed).
        verbose (bool): Log every copied file.

    Returns:
        int: Number of files copied.
    """
    destination.mkdir(parents=True, exist_ok=True)
    copied: int = 0

    for entry in sorted(source.iterdir()):
        if entry.is_dir():
            if entry.name.lower() in IGNORED_DIRECTORIES:
                continue
            copied += copy_directory_contents(entry, destination / entry.name, verbose=verbose)
        elif entry.name.lower() not in IGNORED_FILES:
            shutil.copy2(entry, destination / entry.name)
            copied += 1
            if verbose:
                logger.info("    Copied: %s", entry.name)
    return copied


class PublicAssetsStep(SiteStep):
    """Copy ``{root}/public`` into the output directory when it exists.

    Sets:
      - ``ctx.copied_public_files``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: SiteContext) -> bool:
        return (ctx.config.root_directory / PUBLIC_DIR).is_dir()

    def run(self, ctx: SiteContext) -> None:
        if ctx.verbose:
            logger.info("Copying public assets...")
        ctx.copied_public_files = copy_directory_contents(
            ctx.config.root_directory / PUBLIC_DIR,
            ctx.config.output_directory,
            verbose=ctx.verbose,
        )
        if ctx.verbose:
            logger.info("  Copied %d file(s) from public directory", ctx.copied_public_files)
