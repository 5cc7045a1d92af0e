# topmark:header:start
#
#   project      : Genny
#   file         : test_layout.py
#   file_relpath : tests/pipeline/steps/test_layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the `layout` pipeline step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genny.core.diagnostics import DiagnosticLevel
from genny.pipeline.steps.layout import LayoutStep, resolve_layout_path
from genny.pipeline.steps.metadata import MetadataStep
from genny.pipeline.steps.stripper import StripperStep
from tests.pipeline.conftest import make_context, run_steps

if TYPE_CHECKING:
    from pathlib import Path

    from genny.pipeline.context import PageContext
    from tests.conftest import SiteTree


def test_resolve_layout_path_appends_html(tmp_path: Path) -> None:
    assert resolve_layout_path(tmp_path, "post") == tmp_path / "layouts" / "post.html"
    assert resolve_layout_path(tmp_path, "post.html") == tmp_path / "layouts" / "post.html"


def test_named_layout_replaces_content(site: SiteTree) -> None:
    site.layout("post.html", "<article>{{ content }}</article>")
    ctx: PageContext = make_context("<!-- layout: post -->\n<p>hi</p>", site.config())
    ctx = run_steps(ctx, MetadataStep(), StripperStep(), LayoutStep())
    assert ctx.content == "<article>{{ content }}</article>"
    assert ctx.page_body == "<p>hi</p>"


def test_default_layout_is_used_without_directive(site: SiteTree) -> None:
    site.layout("default.html", "<body>{{ content }}</body>")
    ctx: PageContext = make_context("<p>hi</p>", site.config())
    ctx = run_steps(ctx, MetadataStep(), StripperStep(), LayoutStep())
    assert ctx.content == "<body>{{ content }}</body>"


def test_missing_layout_keeps_stripped_page(site: SiteTree) -> None:
    """A missing layout is not an error: the page is rendered as-is."""
    ctx: PageContext = make_context(
        "<!-- layout: nope -->\n<p>hi</p>", site.config(), verbose=True
    )
    ctx = run_steps(ctx, MetadataStep(), StripperStep(), LayoutStep())
    assert ctx.content == "<p>hi</p>"
    assert [(d.level, d.message) for d in ctx.diagnostics] == [
        (DiagnosticLevel.WARNING, "Layout not found: nope (using page content as-is)")
    ]
    assert str(ctx.diagnostics[0]).startswith("[warning] Layout not found")


def test_diagnostics_only_recorded_when_verbose(site: SiteTree) -> None:
    site.layout("default.html", "{{ content }}")
    quiet: PageContext = run_steps(make_context("x", site.config()), MetadataStep(), LayoutStep())
    loud: PageContext = run_steps(
        make_context("x", site.config(), verbose=True), MetadataStep(), LayoutStep()
    )
    assert quiet.diagnostics == []
    assert [d.message for d in loud.diagnostics] == ["Applied layout: default.html"]
    assert quiet.content == loud.content
