# tintmark:header:start
#
#   project      : TintMark
#   file         : __init__.py
#   file_relpath : src/tintmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Configuration layer for TintMark: logging setup and TOML rule files."""

from __future__ import annotations
