# topmark:header:start
#
#   project      : Genny
#   file         : __init__.py
#   file_relpath : src/genny/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genny page processing pipeline package.

This package turns one page's raw text into rendered HTML:

- the shared per-page context ([`genny.pipeline.context`][genny.pipeline.context])
- the step implementations (metadata, permalink, stripper, layout,
  placeholders, partials, minifier)
- the named pipelines ([`genny.pipeline.pipelines`][genny.pipeline.pipelines])
  and the execution helper ([`genny.pipeline.runner`][genny.pipeline.runner])
"""
