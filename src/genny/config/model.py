# topmark:header:start
#
#   project      : Genny
#   file         : model.py
#   file_relpath : src/genny/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Site configuration model.

Two shapes are provided:

* `MutableSiteConfig`: a draft used while reading ``genny.toml`` (and while
  tests or callers tweak values).
* `SiteConfig`: the frozen snapshot passed to the page and site pipelines.
  It is safe to share between concurrently built pages.

Use `MutableSiteConfig.freeze` to obtain a snapshot and `SiteConfig.thaw`
to get an editable copy back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from genny.config.io import (
    find_root_directory,
    get_bool_value,
    get_string_value,
    get_string_value_or_none,
    load_toml_dict,
)
from genny.config.keys import Toml
from genny.config.logging import get_logger
from genny.constants import BUILD_DIR, CONFIG_FILE_NAME, PAGES_DIR

if TYPE_CHECKING:
    from genny.config.io import TomlTable
    from genny.config.logging import GennyLogger

logger: GennyLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Immutable site configuration.

    Attributes:
        name (str): Site name, substituted for ``{{ site.name }}``.
        description (str): Site description, substituted for ``{{ site.description }}``.
        root_directory (Path): Directory holding ``genny.toml``, ``pages/``,
            ``layouts/``, ``partials/`` and ``public/``.
        output_directory (Path): Directory the site is written to.
        base_url (str | None): Optional absolute base URL for permalinks and the sitemap.
        generate_sitemap (bool): Whether to write ``sitemap.xml``.
        minify_output (bool): Whether to run the minifier on every page.
    """

    name: str = ""
    description: str = ""
    root_directory: Path = field(default_factory=Path)
    output_directory: Path = field(default_factory=lambda: Path(BUILD_DIR))
    base_url: str | None = None
    generate_sitemap: bool = True
    minify_output: bool = True

    @property
    def pages_directory(self) -> Path:
        """Return the pages directory (``{root}/pages``)."""
        return self.root_directory / PAGES_DIR

    def thaw(self) -> MutableSiteConfig:
        """Return an editable copy of this snapshot."""
        return MutableSiteConfig(
            name=self.name,
            description=self.description,
            root_directory=self.root_directory,
            output_directory=self.output_directory,
            base_url=self.base_url,
            generate_sitemap=self.generate_sitemap,
            minify_output=self.minify_output,
        )


@dataclass
class MutableSiteConfig:
    """Mutable draft of the site configuration.

    ``output_directory`` may be left as ``None``; `freeze` then derives it as
    ``{root}/build``.
    """

    name: str = ""
    description: str = ""
    root_directory: Path = field(default_factory=Path)
    output_directory: Path | None = None
    base_url: str | None = None
    generate_sitemap: bool = True
    minify_output: bool = True

    def freeze(self) -> SiteConfig:
        """Freeze this draft into an immutable `SiteConfig`."""
        return SiteConfig(
            name=self.name,
            description=self.description,
            root_directory=self.root_directory,
            output_directory=self.output_directory or (self.root_directory / BUILD_DIR),
            base_url=self.base_url,
            generate_sitemap=self.generate_sitemap,
            minify_output=self.minify_output,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, root_directory: Path) -> MutableSiteConfig:
        """Create a draft from a parsed ``genny.toml`` document.

        Args:
            data (TomlTable): The parsed TOML data.
            root_directory (Path): The directory that holds the config file.

        Returns:
            MutableSiteConfig: The populated draft.
        """
        draft: MutableSiteConfig = cls(root_directory=root_directory)
        draft.name = get_string_value(data, Toml.KEY_NAME)
        draft.description = get_string_value(data, Toml.KEY_DESCRIPTION)
        draft.base_url = get_string_value_or_none(data, Toml.KEY_BASE_URL)
        draft.generate_sitemap = get_bool_value(data, Toml.KEY_GENERATE_SITEMAP, True)
        draft.minify_output = get_bool_value(data, Toml.KEY_MINIFY_OUTPUT, True)
        logger.trace("genny.toml parsed into %s", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSiteConfig | None:
        """Load a draft from a ``genny.toml`` file.

        Args:
            path (Path): Path to the config file.

        Returns:
            MutableSiteConfig | None: The draft, or ``None`` if the file does not exist.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed.
        """
        if not path.is_file():
            logger.info("Config file %s not found", path)
            return None
        data: TomlTable = load_toml_dict(path)
        return cls.from_toml_dict(data, root_directory=path.resolve().parent)


def load_site_config(start: Path | None = None) -> SiteConfig | None:
    """Find ``genny.toml`` upwards from ``start`` and load it.

    Args:
        start (Path | None): Directory to start searching from (defaults to the CWD).

    Returns:
        SiteConfig | None: The frozen config, or ``None`` when no config file exists.

    Raises:
        ConfigError: If the config file exists but is malformed.
    """
    root: Path | None = find_root_directory(start)
    if root is None:
        return None
    draft: MutableSiteConfig | None = MutableSiteConfig.from_toml_file(root / CONFIG_FILE_NAME)
    return draft.freeze() if draft else None
