# topmark:header:start
#
#   project      : Genny
#   file         : constants.py
#   file_relpath : src/genny/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    GENNY_VERSION: str = get_version("genny")
except PackageNotFoundError:  # running from a source checkout
    GENNY_VERSION = "0.0.0"

CONFIG_FILE_NAME: Final[str] = "genny.toml"

# Site directory layout, relative to the site root:
PAGES_DIR: Final[str] = "pages"
LAYOUTS_DIR: Final[str] = "layouts"
PARTIALS_DIR: Final[str] = "partials"
PUBLIC_DIR: Final[str] = "public"
BUILD_DIR: Final[str] = "build"

DEFAULT_LAYOUT_NAME: Final[str] = "default.html"
HTML_SUFFIX: Final[str] = ".html"
INDEX_PAGE_NAME: Final[str] = "index.html"
SITEMAP_FILE_NAME: Final[str] = "sitemap.xml"

# Files skipped when copying public assets (case-insensitive):
IGNORED_FILES: Final[frozenset[str]] = frozenset(
    name.lower()
    for name in (
        ".gitignore",
        ".env",
        ".env.local",
        ".env.production",
        "package.json",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        ".git",
        ".gitattributes",
        ".gitkeep",
        ".DS_Store",
        "Thumbs.db",
    )
)

# Directories skipped during page discovery and asset copying (case-insensitive):
IGNORED_DIRECTORIES: Final[frozenset[str]] = frozenset(
    name.lower()
    for name in (
        "node_modules",
        ".git",
        ".vscode",
        ".idea",
        ".vs",
        ".next",
        ".nuxt",
        "dist",
        BUILD_DIR,
        ".cache",
        LAYOUTS_DIR,
    )
)

VALUE_NOT_SET: Final[str] = "<not set>"
