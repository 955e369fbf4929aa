# tintmark:header:start
#
#   project      : TintMark
#   file         : __init__.py
#   file_relpath : src/tintmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""TintMark package.

TintMark expands lightweight markup tags embedded in plain text into ANSI
terminal escape sequences. Named rules are compiled once into code lists and
a rule set renders text by scanning for rule markers and driving a small
stack machine. The stable surface lives in `tintmark.api`; a Click CLI is
available as the ``tintmark`` console script.
"""

from __future__ import annotations
