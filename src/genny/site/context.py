# topmark:header:start
#
#   project      : Genny
#   file         : context.py
#   file_relpath : src/genny/site/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""State shared by the site generation steps for one build."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from genny.config.model import SiteConfig
    from genny.site.steps.base import SiteStep


@dataclass
class SiteContext:
    """Mutable record produced, mutated and consumed by the site steps.

    Attributes:
        config (SiteConfig): The active site configuration.
        verbose (bool): Whether verbose progress output is enabled.
        pages (list[Path]): Discovered page files.
        pages_directory (Path): The pages directory.
        copied_public_files (int): Files copied from ``public/``.
        processed_pages (int): Pages built and written.
        sitemap_path (Path | None): Where ``sitemap.xml`` was written, if it was.
        steps (list[SiteStep]): Steps that have run.
    """

    config: SiteConfig
    verbose: bool = False
    pages: list[Path] = field(default_factory=lambda: [])
    pages_directory: Path = field(default_factory=Path)
    copied_public_files: int = 0
    processed_pages: int = 0
    sitemap_path: Path | None = None
    steps: list[SiteStep] = field(default_factory=lambda: [])
