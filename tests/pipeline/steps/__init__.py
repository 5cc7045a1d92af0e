# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : tests/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
