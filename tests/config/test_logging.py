# topmark:header:start
#
#   project      : Genny
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for Genny's logging helpers."""

from __future__ import annotations

import logging

import pytest

from genny.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    GennyLogger,
    get_logger,
    resolve_env_log_level,
    resolve_log_level_name,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("30", 30),
        ("bogus", None),
        ("", None),
        (None, None),
    ],
)
def test_resolve_log_level_name(value: str | None, expected: int | None) -> None:
    assert resolve_log_level_name(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert resolve_env_log_level() == logging.DEBUG
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
    assert resolve_env_log_level() is None


def test_trace_level_is_emitted(caplog: pytest.LogCaptureFixture) -> None:
    logger: GennyLogger = get_logger("genny.tests.trace")
    assert isinstance(logger, GennyLogger)
    with caplog.at_level(TRACE_LEVEL, logger="genny.tests.trace"):
        logger.trace("deep %s", "detail")
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "deep detail")]


def test_chalk_formatter_keeps_message_text() -> None:
    formatter = ChalkFormatter("%(message)s")
    for level in (TRACE_LEVEL, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
        record = logging.LogRecord("genny", level, __file__, 1, "hello %s", ("there",), None)
        assert "hello there" in formatter.format(record)
