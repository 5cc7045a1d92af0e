# topmark:header:start
#
#   project      : Genny
#   file         : placeholders.py
#   file_relpath : src/genny/pipeline/steps/placeholders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Placeholder substitution.

Recognized tokens (case-insensitive, any whitespace inside the braces):

    {{ content }}  {{ title }}  {{ site.name }}  {{ site.description }}
    {{ year }}     {{ epoch }}  {{ permalink }}

Each token class is replaced in one linear pass over the current text, in the
order above. Values are inserted literally: the replacement is a callable, so
backslashes and group references in a value are never interpreted, and the
text inserted for a class is not scanned again for that class.

Anything else between double braces, including ``{{ partial: ... }}``, is left
for later steps.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from genny.config.logging import get_logger
from genny.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger
    from genny.pipeline.context import PageContext

logger: GennyLogger = get_logger(__name__)


def _token(name: str) -> re.Pattern[str]:
    return re.compile(r"\{\{\s*" + re.escape(name) + r"\s*\}\}", re.IGNORECASE)


CONTENT_RE: Final[re.Pattern[str]] = _token("content")
TITLE_RE: Final[re.Pattern[str]] = _token("title")
SITE_NAME_RE: Final[re.Pattern[str]] = _token("site.name")
SITE_DESCRIPTION_RE: Final[re.Pattern[str]] = _token("site.description")
YEAR_RE: Final[re.Pattern[str]] = _token("year")
EPOCH_RE: Final[re.Pattern[str]] = _token("epoch")
PERMALINK_RE: Final[re.Pattern[str]] = _token("permalink")


@dataclass(frozen=True)
class PlaceholderValues:
    """Resolved values for every placeholder class."""

    content: str = ""
    title: str = ""
    site_name: str = ""
    site_description: str = ""
    year: str = ""
    epoch: str = ""
    permalink: str = ""

    @classmethod
    def from_context(cls, ctx: PageContext) -> PlaceholderValues:
        """Collect the values for ``ctx`` (its page body fills ``{{ content }}``)."""
        return cls(
            content=ctx.page_body,
            title=ctx.title,
            site_name=ctx.site.name,
            site_description=ctx.site.description,
            year=ctx.year,
            epoch=ctx.epoch,
            permalink=ctx.permalink,
        )

    def ordered(self) -> tuple[tuple[re.Pattern[str], str], ...]:
        """Return ``(pattern, value)`` pairs in substitution order."""
        return (
            (CONTENT_RE, self.content),
            (TITLE_RE, self.title),
            (SITE_NAME_RE, self.site_name),
            (SITE_DESCRIPTION_RE, self.site_description),
            (YEAR_RE, self.year),
            (EPOCH_RE, self.epoch),
            (PERMALINK_RE, self.permalink),
        )


def substitute_placeholders(text: str, values: PlaceholderValues) -> tuple[str, int]:
    """Replace every recognized placeholder in ``text``.

    Args:
        text (str): The text to substitute into.
        values (PlaceholderValues): Values for each placeholder class.

    Returns:
        tuple[str, int]: The substituted text and the number of replacements made.
    """
    total: int = 0
    for pattern, value in values.ordered():
        text, count = pattern.subn(lambda _m, v=value: v, text)
        total += count
    return text, total


class PlaceholderStep(BaseStep):
    """Substitute placeholders into the working content.

    Sets:
      - ``ctx.content``
      - ``ctx.substitutions``: replacements made in this pass
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: PageContext) -> None:
        """Substitute placeholders using the values carried by ``ctx``.

        Args:
            ctx (PageContext): The context for the current page (or partial).
        """
        ctx.content, ctx.substitutions = substitute_placeholders(
            ctx.content, PlaceholderValues.from_context(ctx)
        )
        logger.debug("placeholders: %d replacement(s)", ctx.substitutions)
        if ctx.substitutions:
            ctx.add_info(f"Replaced {ctx.substitutions} placeholder(s)")
