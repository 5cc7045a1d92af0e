# topmark:header:start
#
#   project      : Genny
#   file         : urls.py
#   file_relpath : src/genny/urls.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Page URL and output path helpers.

Root-level pages are flattened to their file name (``pages/index.html``
collapses to the site root); pages in subdirectories keep their relative path,
including a nested ``index.html``. The permalink step, the page writer and the
sitemap all share these helpers so the three never disagree.

A page that lives outside the pages directory still gets a URL: its path is
taken relative to the pages directory with ``..`` segments, so
``{root}/page.html`` maps to ``/../page.html``.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from genny.constants import INDEX_PAGE_NAME


def relative_url_path(page_path: Path, pages_directory: Path) -> str:
    """Return the URL path of a page relative to the site root (no leading slash).

    Args:
        page_path (Path): Path to the page file.
        pages_directory (Path): Path to the pages directory. The page does not
            have to live below it.

    Returns:
        str: ``""`` for the root index page, the file name for other root-level
        pages, else the forward-slash relative path (which starts with ``..``
        for pages outside the pages directory).
    """
    relative: PurePath = PurePath(os.path.relpath(page_path, pages_directory))
    if relative.parent == PurePath("."):
        return "" if relative.name == INDEX_PAGE_NAME else relative.name
    return relative.as_posix()


def calculate_page_url(page_path: Path, pages_directory: Path, base_url: str | None = None) -> str:
    """Return the public URL (permalink) for a page.

    Args:
        page_path (Path): Path to the page file.
        pages_directory (Path): Path to the pages directory.
        base_url (str | None): Optional absolute base URL such as ``https://example.com``.

    Returns:
        str: ``/about.html`` style URLs without a base URL, or
        ``https://example.com/about.html`` with one. The root index page maps
        to ``/`` or to the bare base URL.
    """
    url_path: str = relative_url_path(page_path, pages_directory)
    if base_url is not None:
        base: str = base_url.rstrip("/")
        return base if url_path == "" else f"{base}/{url_path}"
    return "/" if url_path == "" else f"/{url_path}"


def output_path_for(page_path: Path, pages_directory: Path, output_directory: Path) -> Path:
    """Return where a built page is written inside the output directory.

    Root-level pages (including ``index.html``) land directly in the output
    root; subdirectory structure is otherwise preserved.
    """
    relative: Path = Path(page_path).relative_to(pages_directory)
    if len(relative.parts) <= 1:
        return output_directory / relative.name
    return output_directory / relative
