# tintmark:header:start
#
#   project      : TintMark
#   file         : __init__.py
#   file_relpath : src/tintmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Click-based command line interface for TintMark."""

from __future__ import annotations
