# topmark:header:start
#
#   project      : Genny
#   file         : diagnostics.py
#   file_relpath : src/genny/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support.

Diagnostics are recorded on a page context in verbose mode only and never
change the rendered output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while building a page."""

    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message with its severity."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.message}"
