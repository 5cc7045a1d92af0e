# topmark:header:start
#
#   project      : Genny
#   file         : errors.py
#   file_relpath : src/genny/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions for Genny.

Missing layouts, partials and directives are *not* errors: each has a defined
fallback. Only conditions that leave nothing meaningful to render are raised.
The CLI maps these onto Click exceptions with exit codes
(see `genny.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class GennyError(Exception):
    """Base class for all Genny library errors."""


class ConfigError(GennyError):
    """The site configuration file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error parsing config file {path}: {reason}")
        self.path = path
        self.reason = reason


class PageReadError(GennyError):
    """A discovered page source file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read page {path}: {reason}")
        self.path = path
        self.reason = reason
