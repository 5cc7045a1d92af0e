# topmark:header:start
#
#   project      : Genny
#   file         : pipelines.py
#   file_relpath : src/genny/site/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The site generation pipeline.

Cleanup runs before assets are copied and pages are written, so every build
starts from an empty output directory. The sitemap is written last so it
reflects the pages actually discovered.
"""

from __future__ import annotations

from typing import Final

from .steps import assets, discovery, output, pages, reporting, sitemap
from .steps.base import SiteStep

SITE_PIPELINE: Final[tuple[SiteStep, ...]] = (
    reporting.ConfigurationLoggingStep(),
    output.CleanupStep(),
    output.CreateOutputStep(),
    assets.PublicAssetsStep(),
    discovery.DiscoveryStep(),
    pages.PageWriterStep(),
    sitemap.SitemapStep(),
    reporting.CompletionStep(),
)
