# topmark:header:start
#
#   project      : Genny
#   file         : build.py
#   file_relpath : src/genny/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny `build` command.

Locates ``genny.toml`` (searching upwards from the current directory or from
``--root``) and generates the site into ``{root}/build``.

Exit codes:
    0: The site was generated.
    74: A page could not be read, or the output could not be written.
    78: No ``genny.toml`` was found, or it is malformed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from genny.cli.errors import GennyConfigError, GennyIOError
from genny.cli.options import common_verbose_options, resolve_verbosity, root_option
from genny.config.logging import get_logger, setup_logging
from genny.config.model import load_site_config
from genny.errors import ConfigError, PageReadError
from genny.site.generator import generate_site

if TYPE_CHECKING:
    from pathlib import Path

    from genny.cli.console import ClickConsole
    from genny.config.model import SiteConfig
    from genny.site.context import SiteContext

logger = get_logger(__name__)


@click.command(
    name="build",
    help="Generate the site found in (or above) the current directory.",
)
@common_verbose_options
@root_option
def build_command(*, verbose: int, quiet: int, root: Path | None) -> None:
    """Generate the site.

    Args:
        verbose (int): Count of ``-v`` flags; one or more enables build progress output.
        quiet (int): Count of ``-q`` flags.
        root (Path | None): Directory to start searching for ``genny.toml``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    level: int = resolve_verbosity(verbose, quiet)
    env_level: int | None = ctx.obj.get("log_level")
    # GENNY_LOG_LEVEL wins when it asks for more detail than the flags.
    if env_level is None or level < env_level:
        setup_logging(level=level)

    try:
        config: SiteConfig | None = load_site_config(root)
    except ConfigError as exc:
        raise GennyConfigError(str(exc)) from exc
    if config is None:
        raise GennyConfigError(
            "Could not find genny.toml in the current directory or any parent directory."
        )

    if verbose:
        console.print(console.styled("Building site...", bold=True))

    try:
        site: SiteContext = generate_site(config, verbose=verbose > 0)
    except PageReadError as exc:
        raise GennyIOError(str(exc)) from exc
    except OSError as exc:
        logger.error("Error writing site output: %s", exc)
        raise GennyIOError(f"Error writing site output: {exc}") from exc

    if quiet:
        return
    console.print(f"Found {len(site.pages)} page(s)")
    if not site.pages:
        console.warn(f"No pages found under {config.pages_directory}")
    if verbose and site.sitemap_path is not None:
        console.print(f"Sitemap written to {site.sitemap_path}")
    console.print(
        console.styled(f"Site generated to {config.output_directory}", fg="green", bold=True)
    )
