# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : src/genny/site/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Site assembly: assets, page discovery, page writing and the sitemap."""

from __future__ import annotations

from genny.site.context import SiteContext
from genny.site.generator import generate_site

__all__ = ["SiteContext", "generate_site"]
