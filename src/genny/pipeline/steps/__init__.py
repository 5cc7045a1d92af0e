# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : src/genny/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class-based page pipeline steps.

Each module defines one step (a `genny.pipeline.steps.base.BaseStep`
subclass) and the pure helper it is built on, so the helper can be reused or
tested without a context.
"""
