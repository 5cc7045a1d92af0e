# topmark:header:start
#
#   project      : Genny
#   file         : layout.py
#   file_relpath : src/genny/pipeline/steps/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout step: replace the working content with the page's layout template.

The page body stays in ``ctx.page_body`` and is substituted later for the
layout's ``{{ content }}`` placeholder. A missing layout is not an error: the
stripped page is rendered as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.config.logging import get_logger
from genny.constants import HTML_SUFFIX, LAYOUTS_DIR
from genny.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from pathlib import Path

    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)


def resolve_layout_path(root_directory: Path, layout_name: str) -> Path:
    """Return ``{root}/layouts/{layout_name}``, appending ``.html`` when missing."""
    if not layout_name.endswith(HTML_SUFFIX):
        layout_name = f"{layout_name}{HTML_SUFFIX}"
    return root_directory / LAYOUTS_DIR / layout_name


class LayoutStep(BaseStep):
    """Load the named layout into ``ctx.content`` when it exists."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: PageContext) -> None:
        """Swap in the layout text, or leave the content untouched.

        Args:
            ctx (PageContext): The context for the current page.
        """
        layout_path: Path = resolve_layout_path(ctx.root_directory, ctx.layout_name)
        if not layout_path.is_file():
            ctx.add_warning(f"Layout not found: {ctx.layout_name} (using page content as-is)")
            return
        ctx.content = layout_path.read_text(encoding="utf-8")
        ctx.add_info(f"Applied layout: {ctx.layout_name}")
