# topmark:header:start
#
#   project      : Genny
#   file         : exit_codes.py
#   file_relpath : src/genny/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Genny CLI.

Genny aligns with the BSD `sysexits` convention so that scripts and CI jobs can
tell a broken config from an unreadable page.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Genny CLI.

    Attributes:
        SUCCESS: The site was built.
        FAILURE: Generic failure.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: A page or output file could not be read or written.
            Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: ``genny.toml`` not found or malformed. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
