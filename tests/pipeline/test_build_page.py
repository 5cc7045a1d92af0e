# topmark:header:start
#
#   project      : Genny
#   file         : test_build_page.py
#   file_relpath : tests/pipeline/test_build_page.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for `genny.build_page`."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from genny import PageReadError, build_page
from genny.builder import build_page_context

if TYPE_CHECKING:
    from pathlib import Path

    from genny.pipeline.context import PageContext
    from tests.conftest import SiteTree


def test_scenario_layout_wraps_page(site: SiteTree) -> None:
    site.layout("default.html", "<html><body>{{ content }}</body></html>")
    page: Path = site.page("index.html", "<!-- title: My Page --><body>Hi</body>")
    out: str = build_page(page, site.root, site.config())
    assert "Hi" in out
    assert "{{ content }}" not in out
    assert "<!-- title:" not in out


def test_full_page_without_minification(site: SiteTree) -> None:
    site.layout(
        "post.html",
        "<title>{{ title }} | {{ site.name }}</title>\n"
        "{{ partial: header.html }}\n"
        "<main>{{ content }}</main>\n"
        "<footer>{{ year }} {{ permalink }}</footer>",
    )
    site.partial("header.html", "<h1>{{ site.description }}</h1>")
    page: Path = site.page(
        "blog/post.html",
        "<!-- layout: post -->\n<!-- title: Hello -->\n<p>Body of {{ title }}</p>",
    )
    cfg = site.config(name="Blog", description="Notes", minify_output=False)

    out: str = build_page(page, site.root, cfg)

    year: str = str(datetime.now().year)
    assert out == (
        "<title>Hello | Blog</title>\n"
        "<h1>Notes</h1>\n"
        "<main><p>Body of Hello</p></main>\n"
        f"<footer>{year} /blog/post.html</footer>"
    )


def test_full_page_with_minification(site: SiteTree) -> None:
    site.layout("default.html", "<html>\n  <body>\n    {{ content }}\n  </body>\n</html>\n")
    page: Path = site.page("about.html", "<p>\n  About   us\n</p>\n")
    out: str = build_page(page, site.root, site.config(minify_output=True))
    assert out == "<html><body><p>About us</p></body></html>"


def test_missing_layout_renders_page_as_is(site: SiteTree) -> None:
    page: Path = site.page("index.html", "<!-- layout: gone -->\n<p>{{ title }}</p>")
    out: str = build_page(page, site.root, site.config(minify_output=False))
    assert out == "<p></p>"


def test_page_outside_pages_directory_still_renders(site: SiteTree) -> None:
    """A page file next to ``genny.toml`` builds; its permalink climbs out of ``pages/``."""
    site.layout("default.html", '<main>{{ content }}</main><a href="{{ permalink }}"></a>')
    page: Path = site.root / "page.html"
    page.write_text("<!-- title: Loose -->\n<p>{{ title }}</p>", encoding="utf-8")

    out: str = build_page(page, site.root, site.config(minify_output=False))

    assert out == '<main><p>Loose</p></main><a href="/../page.html"></a>'


def test_unreadable_page_raises(site: SiteTree) -> None:
    with pytest.raises(PageReadError) as exc_info:
        build_page(site.root / "pages" / "missing.html", site.root, site.config())
    assert "missing.html" in str(exc_info.value)


def test_verbose_build_collects_diagnostics_without_changing_output(site: SiteTree) -> None:
    site.layout("default.html", "<div>{{ content }}{{ partial: f.html }}</div>")
    site.partial("f.html", "<i>f</i>")
    page: Path = site.page("index.html", "<b>x</b>")

    quiet: PageContext = build_page_context(page, site.root, site.config(), verbose=False)
    loud: PageContext = build_page_context(page, site.root, site.config(), verbose=True)

    assert quiet.content == loud.content == "<div><b>x</b><i>f</i></div>"
    assert quiet.diagnostics == []
    assert [d.message for d in loud.diagnostics] == [
        "Applied layout: default.html",
        "Replaced 1 placeholder(s)",
        "Including partial: f.html",
        "Included 1 partial(s)",
    ]
    assert str(loud.diagnostics[0]) == "[info] Applied layout: default.html"
