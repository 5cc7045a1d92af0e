# topmark:header:start
#
#   project      : Genny
#   file         : logging.py
#   file_relpath : src/genny/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny logging with a TRACE level and chalk-colored console output.

Genny keeps *program output* (the console) separate from *diagnostics*
(logging). This module extends the standard `logging` module with a TRACE level
below DEBUG, a `GennyLogger` class exposing ``logger.trace(...)``, and a
formatter that colors records by severity using `yachalk`.

Records carry an ``HH:MM:SS`` timestamp, matching the build progress lines a
site author sees when running ``genny build -v``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "GENNY_LOG_LEVEL"


class GennyLogger(logging.Logger):
    """Logger class with a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(GennyLogger)


LOG_FORMAT = "[%(asctime)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%H:%M:%S"

_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and apply a chalk color based on its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        level: int = record.levelno
        message: str = super().format(record)

        if level >= logging.ERROR:
            return chalk.red_bright(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return message
        if level >= logging.DEBUG:
            return chalk.gray(message)
        return chalk.blue(message)


def resolve_log_level_name(value: str | None) -> int | None:
    """Map a level name or number (``"TRACE"``, ``"debug"``, ``"10"``) to a level.

    Args:
        value (str | None): Raw level text.

    Returns:
        int | None: The numeric level, or ``None`` when unset or unknown.
    """
    if not value:
        return None
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level requested via ``GENNY_LOG_LEVEL``, or ``None`` if unset."""
    return resolve_log_level_name(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a single chalk-colored stdout handler.

    If ``level`` is None, ``GENNY_LOG_LEVEL`` is consulted. The default is
    WARNING, so a plain build only prints its console summary.

    Args:
        level (int | None): Explicit logging level.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> GennyLogger:
    """Retrieve a `GennyLogger` with the given name.

    Args:
        name (str): The logger name, usually ``__name__``.

    Returns:
        GennyLogger: The logger instance.
    """
    return cast("GennyLogger", logging.getLogger(name))
