# topmark:header:start
#
#   project      : Genny
#   file         : pipelines.py
#   file_relpath : src/genny/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named page pipelines (immutable, typed step sequences).

Overview
--------
- ``BUILD``: metadata → permalink → stripper → layout → placeholders → partials
- ``BUILD_MINIFY``: BUILD + minifier

Order is load-bearing:
* the stripper runs before the layout so directive comments never reach the
  page body;
* placeholders run after the layout so they are substituted into the chosen
  layout rather than into the page's own pre-layout text;
* partials run after placeholders and reuse the placeholder helper for each
  included fragment.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from genny.pipeline.contracts import Step

from .steps import layout, metadata, minifier, partials, permalink, placeholders, stripper

BUILD_PIPELINE: Final[tuple[Step, ...]] = (
    metadata.MetadataStep(),  # Title, layout name, year, epoch
    permalink.PermalinkStep(),  # Public URL
    stripper.StripperStep(),  # Drop directive comments, fix the page body
    layout.LayoutStep(),  # Swap in the layout template
    placeholders.PlaceholderStep(),  # {{ content }}, {{ title }}, ...
    partials.PartialStep(),  # {{ partial: name }}
)

BUILD_MINIFY_PIPELINE: Final[tuple[Step, ...]] = BUILD_PIPELINE + (
    minifier.MinifierStep(),  # Collapse whitespace
)


class Pipeline(tuple[Step, ...], Enum):
    """Available page pipelines, mapped to their step sequences."""

    BUILD = BUILD_PIPELINE
    BUILD_MINIFY = BUILD_MINIFY_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the ordered step instances of this pipeline."""
        return self.value

    @classmethod
    def for_site(cls, minify_output: bool) -> Pipeline:
        """Return the pipeline matching the site's ``minify_output`` setting."""
        return cls.BUILD_MINIFY if minify_output else cls.BUILD
