# topmark:header:start
#
#   project      : Genny
#   file         : builder.py
#   file_relpath : src/genny/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build a single page: the public entry point of the page pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.errors import PageReadError
from genny.pipeline.context import PageContext
from genny.pipeline.pipelines import Pipeline
from genny.pipeline.runner import run

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.config.model import SiteConfig

logger: GennyLogger = get_logger(__name__)


def read_page_source(file_path: Path) -> str:
    """Read a page source file as UTF-8 text.

    Raises:
        PageReadError: If the file cannot be read or decoded.
    """
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading page %s: %s", file_path, exc)
        raise PageReadError(file_path, str(exc)) from exc


def build_page_context(
    file_path: Path | str,
    root_directory: Path | str,
    site_config: SiteConfig,
    verbose: bool = False,
) -> PageContext:
    """Run the page pipeline and return the final context.

    Same as `build_page` but keeps the context, so callers can inspect
    diagnostics and counters.
    """
    path = Path(file_path)
    ctx: PageContext = PageContext.bootstrap(
        source=read_page_source(path),
        site=site_config,
        root_directory=Path(root_directory),
        file_path=path,
        verbose=verbose,
    )
    return run(ctx, Pipeline.for_site(site_config.minify_output).steps)


def build_page(
    file_path: Path | str,
    root_directory: Path | str,
    site_config: SiteConfig,
    verbose: bool = False,
) -> str:
    """Render one page to its final HTML.

    Args:
        file_path (Path | str): The page source file.
        root_directory (Path | str): The site root (holds ``pages/``,
            ``layouts/`` and ``partials/``).
        site_config (SiteConfig): Site-wide values; ``minify_output`` selects
            the pipeline.
        verbose (bool): Record and log per-step diagnostics.

    Returns:
        str: The rendered HTML. Writing it out is the caller's job.

    Raises:
        PageReadError: If the page source cannot be read.
    """
    return build_page_context(file_path, root_directory, site_config, verbose).content
