# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : src/genny/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration package: ``genny.toml`` loading, the site config model and logging."""

from __future__ import annotations

from genny.config.model import MutableSiteConfig, SiteConfig, load_site_config

__all__: list[str] = [
    "MutableSiteConfig",
    "SiteConfig",
    "load_site_config",
]
