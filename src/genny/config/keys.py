# topmark:header:start
#
#   project      : Genny
#   file         : keys.py
#   file_relpath : src/genny/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for ``genny.toml``.

Keys defined here are the external configuration API: renaming or removing
one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Top-level keys understood in ``genny.toml``."""

    KEY_NAME: Final[str] = "name"
    KEY_DESCRIPTION: Final[str] = "description"
    KEY_BASE_URL: Final[str] = "base_url"
    KEY_GENERATE_SITEMAP: Final[str] = "generate_sitemap"
    KEY_MINIFY_OUTPUT: Final[str] = "minify_output"
