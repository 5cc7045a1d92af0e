# topmark:header:start
#
#   project      : Genny
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Genny test suite.

Sets up TRACE-level logging for test runs, typed wrappers around the pytest
decorators, and a `SiteTree` helper that lays out a throwaway site on disk.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `genny.config.MutableSiteConfig` and `freeze()` them before
    passing them to the pipelines.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from genny.config import MutableSiteConfig
from genny.config import logging as genny_logging
from genny.constants import CONFIG_FILE_NAME, LAYOUTS_DIR, PAGES_DIR, PARTIALS_DIR, PUBLIC_DIR

if TYPE_CHECKING:
    from pathlib import Path

    from genny.config import SiteConfig

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a callable and returns the same callable type.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_genny_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ``GENNY_LOG_LEVEL`` exported in the developer's shell does not leak in.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(genny_logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level for all tests so failures come with full detail.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    genny_logging.setup_logging(level=genny_logging.TRACE_LEVEL)


@dataclass
class SiteTree:
    """A site laid out under a temporary root directory.

    Attributes:
        root (Path): The site root (holds ``genny.toml``, ``pages/`` and friends).
    """

    root: Path

    def _write(self, path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def page(self, relpath: str, text: str) -> Path:
        """Write ``pages/{relpath}`` and return its path."""
        return self._write(self.root / PAGES_DIR / relpath, text)

    def layout(self, name: str, text: str) -> Path:
        """Write ``layouts/{name}`` and return its path."""
        return self._write(self.root / LAYOUTS_DIR / name, text)

    def partial(self, name: str, text: str) -> Path:
        """Write ``partials/{name}`` and return its path."""
        return self._write(self.root / PARTIALS_DIR / name, text)

    def public(self, relpath: str, text: str) -> Path:
        """Write ``public/{relpath}`` and return its path."""
        return self._write(self.root / PUBLIC_DIR / relpath, text)

    def write_config(self, text: str) -> Path:
        """Write ``genny.toml`` and return its path."""
        return self._write(self.root / CONFIG_FILE_NAME, text)

    @property
    def build(self) -> Path:
        """The default output directory."""
        return self.root / "build"

    def config(self, **overrides: Any) -> SiteConfig:
        """Return a frozen config rooted at this site, with ``overrides`` applied."""
        return make_site_config(root_directory=self.root, **overrides)


def make_site_config(**overrides: Any) -> SiteConfig:
    """Return a frozen `SiteConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable draft.

    Returns:
        SiteConfig: An immutable configuration snapshot for use in tests.
    """
    draft: MutableSiteConfig = MutableSiteConfig()
    for k, v in overrides.items():
        setattr(draft, k, v)
    return draft.freeze()


@pytest.fixture
def site(tmp_path: Path) -> SiteTree:
    """Return an empty `SiteTree` rooted at ``tmp_path / "site"``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        SiteTree: The site helper; nothing is written until a method is called.
    """
    root: Path = tmp_path / "site"
    root.mkdir()
    return SiteTree(root=root)
