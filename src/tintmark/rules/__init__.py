# tintmark:header:start
#
#   project      : TintMark
#   file         : __init__.py
#   file_relpath : src/tintmark/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Rule engine for TintMark.

Modules, leaves first:
    - tintmark.rules.codes: SGR code resolution for colors, styles and resets
    - tintmark.rules.definition: validated rule definitions
    - tintmark.rules.compiler: rule compilation and after-part inference
    - tintmark.rules.symbols: markup delimiters
    - tintmark.rules.scanner: marker scanning
    - tintmark.rules.renderer: stack rendering of scanned tokens
    - tintmark.rules.rule_set: the `RuleSet` tying it all together
"""

from __future__ import annotations
