# topmark:header:start
#
#   project      : Genny
#   file         : test_build_command.py
#   file_relpath : tests/cli/test_build_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``genny build``: exit codes and user-facing output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from genny.cli.exit_codes import ExitCode
from tests.cli.conftest import run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.conftest import SiteTree


@pytest.fixture
def tiny(site: SiteTree) -> SiteTree:
    site.write_config('name = "Tiny"\nbase_url = "https://tiny.example"\n')
    site.layout("default.html", "<main>{{ content }}</main><footer>{{ site.name }}</footer>")
    site.page("index.html", "<p>Hello</p>")
    return site


def test_build_success(tiny: SiteTree) -> None:
    result: Result = run_cli_in(tiny.root, ["build"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Found 1 page(s)" in result.output
    assert "Site generated to" in result.output
    assert (tiny.build / "index.html").read_text(encoding="utf-8") == (
        "<main><p>Hello</p></main><footer>Tiny</footer>"
    )
    assert "https://tiny.example" in (tiny.build / "sitemap.xml").read_text(encoding="utf-8")


def test_build_from_subdirectory(tiny: SiteTree) -> None:
    """The config is found by walking up from the working directory."""
    result: Result = run_cli_in(tiny.root / "pages", ["build"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert (tiny.build / "index.html").is_file()


def test_build_with_root_option(tiny: SiteTree, tmp_path: Path) -> None:
    elsewhere: Path = tmp_path / "elsewhere"
    elsewhere.mkdir()
    result: Result = run_cli_in(elsewhere, ["build", "--root", str(tiny.root)])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert (tiny.build / "index.html").is_file()


def test_build_verbose_reports_progress(tiny: SiteTree) -> None:
    result: Result = run_cli_in(tiny.root, ["--no-color", "build", "-v"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Building site..." in result.output
    assert "Copying index.html -> index.html" in result.output
    assert "Sitemap written to" in result.output


def test_build_quiet_prints_nothing(tiny: SiteTree) -> None:
    result: Result = run_cli_in(tiny.root, ["build", "-q"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == ""


def test_verbose_and_quiet_conflict(tiny: SiteTree) -> None:
    result: Result = run_cli_in(tiny.root, ["build", "-v", "-q"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


def test_missing_config(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["build"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Could not find genny.toml" in result.output


def test_malformed_config(site: SiteTree) -> None:
    site.write_config("name = [unclosed\n")
    result: Result = run_cli_in(site.root, ["build"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Error parsing config file" in result.output


def test_unreadable_page(tiny: SiteTree) -> None:
    (tiny.root / "pages" / "broken.html").write_bytes(b"\xff\xfe\xfa")
    result: Result = run_cli_in(tiny.root, ["build"])
    assert result.exit_code == ExitCode.IO_ERROR
    assert "Cannot read page" in result.output


def test_build_without_pages_warns(site: SiteTree) -> None:
    site.write_config("")
    result: Result = run_cli_in(site.root, ["--no-color", "build"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Found 0 page(s)" in result.output
    assert "No pages found under" in result.output
    assert not (site.build / "sitemap.xml").exists()
