# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : src/genny/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny package.

Genny is a small static site generator. Each page under ``pages/`` is wrapped
in a layout, has its ``{{ ... }}`` placeholders and ``{{ partial: name }}``
inclusions resolved, and is optionally minified. The site pipeline copies
``public/`` assets and writes a ``sitemap.xml`` next to the rendered pages.
"""

from __future__ import annotations

from genny.builder import build_page
from genny.config.model import MutableSiteConfig, SiteConfig, load_site_config
from genny.constants import GENNY_VERSION
from genny.errors import ConfigError, GennyError, PageReadError
from genny.site.generator import generate_site
from genny.sitemap import generate_sitemap

__version__: str = GENNY_VERSION

__all__ = [
    "ConfigError",
    "GennyError",
    "MutableSiteConfig",
    "PageReadError",
    "SiteConfig",
    "build_page",
    "generate_site",
    "generate_sitemap",
    "load_site_config",
]
