# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : src/genny/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core helpers: diagnostics recorded while building pages."""
