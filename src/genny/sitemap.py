# topmark:header:start
#
#   project      : Genny
#   file         : sitemap.py
#   file_relpath : src/genny/sitemap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render ``sitemap.xml`` for the discovered pages (sitemaps.org 0.9 schema)."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Final

from genny.urls import calculate_page_url, relative_url_path

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

SITEMAP_NAMESPACE: Final[str] = "http://www.sitemaps.org/schemas/sitemap/0.9"
CHANGE_FREQUENCY: Final[str] = "monthly"
ROOT_PRIORITY: Final[str] = "1.0"
PAGE_PRIORITY: Final[str] = "0.8"
LASTMOD_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%SZ"


def generate_sitemap(
    pages: Sequence[Path],
    pages_directory: Path,
    base_url: str | None = None,
) -> str | None:
    """Return the sitemap XML for ``pages``, or ``None`` when there are none.

    Args:
        pages (Sequence[Path]): Page source files.
        pages_directory (Path): The pages directory.
        base_url (str | None): Optional base URL used for absolute ``<loc>`` values.

    Returns:
        str | None: The XML document text, indented with two spaces.
    """
    if not pages:
        return None

    ET.register_namespace("", SITEMAP_NAMESPACE)
    urlset = ET.Element(f"{{{SITEMAP_NAMESPACE}}}urlset")
    for page in pages:
        url_path: str = relative_url_path(page, pages_directory)
        modified = datetime.fromtimestamp(page.stat().st_mtime, tz=timezone.utc)

        url = ET.SubElement(urlset, f"{{{SITEMAP_NAMESPACE}}}url")
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}loc").text = calculate_page_url(
            page, pages_directory, base_url
        )
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}lastmod").text = modified.strftime(
            LASTMOD_FORMAT
        )
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}changefreq").text = CHANGE_FREQUENCY
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}priority").text = (
            ROOT_PRIORITY if url_path == "" else PAGE_PRIORITY
        )

    ET.indent(urlset, space="  ")
    body: str = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'
