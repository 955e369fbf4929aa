# tintmark:header:start
#
#   project      : TintMark
#   file         : keys.py
#   file_relpath : src/tintmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Canonical TOML section and key names for TintMark rule files.

Rule files are standalone TOML documents (``tintmark.toml``) or the
``[tool.tintmark]`` table of a ``pyproject.toml``. Keys defined here are the
external rule-file schema; renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TintMark rule files."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TINTMARK: Final[str] = "tintmark"

    # [options]
    SECTION_OPTIONS: Final[str] = "options"

    KEY_AFTER: Final[str] = "after"

    # [options.symbols]
    SECTION_SYMBOLS: Final[str] = "symbols"

    # [rules.<name>]
    SECTION_RULES: Final[str] = "rules"
