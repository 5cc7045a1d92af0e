# topmark:header:start
#
#   project      : Genny
#   file         : io.py
#   file_relpath : src/genny/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate and read ``genny.toml``.

Parsing is done with `tomlkit` and returned as a plain `dict`. The value
getters follow the *checked* style: a value of the wrong type is logged as a
warning and the caller's default is kept, so a typo never aborts a build.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from genny.config.logging import get_logger
from genny.constants import CONFIG_FILE_NAME
from genny.errors import ConfigError

if TYPE_CHECKING:
    from genny.config.logging import GennyLogger

TomlTable = dict[str, Any]

logger: GennyLogger = get_logger(__name__)


def find_root_directory(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` until a directory containing ``genny.toml`` is found.

    Args:
        start (Path | None): Directory to start from (defaults to the CWD).

    Returns:
        Path | None: The site root directory, or ``None`` if no config exists.
    """
    current: Path = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / CONFIG_FILE_NAME).is_file():
            logger.debug("Found %s in %s", CONFIG_FILE_NAME, directory)
            return directory
    logger.info("Could not find root directory with %s", CONFIG_FILE_NAME)
    return None


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(path, str(exc)) from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(path, str(exc)) from exc


def get_string_value(table: TomlTable, key: str, default: str = "") -> str:
    """Return ``table[key]`` when it is a string, else ``default``."""
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    logger.warning("Ignoring '%s': expected a string, got %r", key, value)
    return default


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return ``table[key]`` when it is a string, else ``None``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring '%s': expected a string, got %r", key, value)
    return None


def get_bool_value(table: TomlTable, key: str, default: bool) -> bool:
    """Return ``table[key]`` when it is a boolean, else ``default``."""
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    logger.warning("Ignoring '%s': expected a boolean, got %r", key, value)
    return default
