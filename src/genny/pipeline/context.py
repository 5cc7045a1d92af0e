# topmark:header:start
#
#   project      : Genny
#   file         : context.py
#   file_relpath : src/genny/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context model for the page pipeline.

A `PageContext` represents the complete, mutable state of one page as it flows
through the pipeline. Steps communicate only through its fields.

Field ownership:
    raw_source: set once at bootstrap, read-only afterwards.
    content: the working text, reassigned by every step.
    page_body: set exactly once by the stripper, before the layout is applied.
    inclusion_stack: partial paths currently being expanded; the partial step
        restores it to its previous size after every expansion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.config.model import SiteConfig
from genny.constants import DEFAULT_LAYOUT_NAME
from genny.core.diagnostics import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.contracts import Step

logger: GennyLogger = get_logger(__name__)

__all__: list[str] = [
    "PageContext",
]


@dataclass
class PageContext:
    """Mutable per-page state threaded through every pipeline step.

    Attributes:
        file_path (Path | None): The page source file. ``None`` for contexts
            built from in-memory text (unit tests, partial expansion).
        root_directory (Path): The site root holding ``layouts/`` and ``partials/``.
        site (SiteConfig): Read-only site-wide values.
        verbose (bool): Record per-step diagnostics. Never changes the output.
        content (str): Working content, reassigned by every step.
        page_body (str): The page's own body, substituted for ``{{ content }}``.
        title (str): Resolved page title.
        layout_name (str): Resolved layout file name.
        year (str): Build year as a decimal string.
        epoch (str): Build time as Unix seconds.
        permalink (str): Resolved public URL.
        inclusion_stack (set[str]): Resolved partial paths being expanded.
        steps (list[Step]): Steps that have run for this context.
        diagnostics (list[Diagnostic]): Collected diagnostics.
        substitutions (int): Placeholders replaced by the last substitution pass.
        inclusions (int): Partials spliced in by the last inclusion pass.
    """

    file_path: Path | None
    root_directory: Path
    site: SiteConfig
    verbose: bool = False

    _raw_source: str = ""
    content: str = ""
    page_body: str = ""

    title: str = ""
    layout_name: str = DEFAULT_LAYOUT_NAME
    year: str = ""
    epoch: str = ""
    permalink: str = ""

    inclusion_stack: set[str] = field(default_factory=lambda: set[str]())

    steps: list[Step] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])

    substitutions: int = 0
    inclusions: int = 0

    @property
    def raw_source(self) -> str:
        """The page source as loaded; never changes after bootstrap."""
        return self._raw_source

    @classmethod
    def bootstrap(
        cls,
        *,
        source: str,
        site: SiteConfig,
        root_directory: Path | None = None,
        file_path: Path | None = None,
        verbose: bool = False,
    ) -> PageContext:
        """Create a fresh context whose working content is ``source``.

        Args:
            source (str): The raw page text.
            site (SiteConfig): Site-wide values.
            root_directory (Path | None): Site root; defaults to ``site.root_directory``.
            file_path (Path | None): The page file, if any.
            verbose (bool): Record per-step diagnostics.

        Returns:
            PageContext: Newly created context.
        """
        return cls(
            file_path=file_path,
            root_directory=root_directory if root_directory is not None else site.root_directory,
            site=site,
            verbose=verbose,
            _raw_source=source,
            content=source,
        )

    def for_partial(self, text: str) -> PageContext:
        """Return a child context for expanding a partial's text.

        The child shares this page's title, site values, build constants,
        permalink and the *same* ``inclusion_stack`` object. A partial has no
        page body of its own, so ``{{ content }}`` resolves to ``""`` inside it.
        """
        child = PageContext(
            file_path=None,
            root_directory=self.root_directory,
            site=self.site,
            verbose=self.verbose,
            _raw_source=text,
            content=text,
            page_body="",
            title=self.title,
            layout_name=self.layout_name,
            year=self.year,
            epoch=self.epoch,
            permalink=self.permalink,
            inclusion_stack=self.inclusion_stack,
        )
        # Child diagnostics feed the page's list.
        child.diagnostics = self.diagnostics
        return child

    # --- Convenience helpers -------------------------------------------------
    def add_info(self, message: str) -> None:
        """Record an ``info`` diagnostic when verbose diagnostics are enabled."""
        if not self.verbose:
            return
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))
        logger.info("      %s", message)

    def add_warning(self, message: str) -> None:
        """Record a ``warning`` diagnostic when verbose diagnostics are enabled.

        Used for content that was skipped (a missing layout or partial, a
        circular partial). The page is still rendered.
        """
        if not self.verbose:
            return
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))
        logger.warning("      %s", message)

    def __repr__(self) -> str:
        return (
            f"PageContext(file_path={self.file_path!s}, layout={self.layout_name!r}, "
            f"title={self.title!r}, permalink={self.permalink!r}, "
            f"steps={[s.name for s in self.steps]})"
        )
