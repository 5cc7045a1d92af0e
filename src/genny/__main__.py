# topmark:header:start
#
#   project      : Genny
#   file         : __main__.py
#   file_relpath : src/genny/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Genny via ``python -m genny``.

Delegates to `genny.cli.main.cli`, the same entry point as the ``genny``
console script.

Examples:
    Build the site in the current directory::

        python -m genny build -v
"""

from __future__ import annotations

from genny.cli.main import cli

if __name__ == "__main__":
    cli()
