# tintmark:header:start
#
#   project      : TintMark
#   file         : __init__.py
#   file_relpath : src/tintmark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Public TintMark API (stable surface).

This module exposes a **small, typed API** for embedding TintMark markup in
applications. Internal modules remain private.

Versioning policy
-----------------
- The signatures and dataclass shapes exported here follow semver.
- Adding optional parameters with defaults is allowed in minor releases.

Example:
```python
from tintmark import api

rules = api.create_rule_set({"red": {"fg": "red"}})
rules.apply("a{%redB%}c")  # 'a\\x1b[31mB\\x1b[39mc'

api.colorize("{%okdone%}", {"ok": {"fg": "green", "enable": "bold"}})
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tintmark.config.io import load_rule_set
from tintmark.constants import TINTMARK_VERSION
from tintmark.core.errors import (
    InvalidOptionError,
    InvalidRuleError,
    InvalidSymbolsError,
    RuleFileError,
    TintmarkError,
)
from tintmark.rules.compiler import AfterPolicy, CompiledRule, compile_rule
from tintmark.rules.definition import RuleDefinition
from tintmark.rules.rule_set import RuleSet, create_rule_set
from tintmark.rules.symbols import SymbolConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "AfterPolicy",
    "CompiledRule",
    "InvalidOptionError",
    "InvalidRuleError",
    "InvalidSymbolsError",
    "RuleDefinition",
    "RuleFileError",
    "RuleSet",
    "SymbolConfig",
    "TintmarkError",
    "colorize",
    "compile_rule",
    "create_rule_set",
    "load_rule_set",
    "version",
]


def colorize(text: str, rules: Mapping[str, object] | None = None, **options: Any) -> str:
    """Build a throwaway rule set and apply it to ``text``.

    Prefer keeping a `RuleSet` around when rendering more than once; building
    one compiles every rule.
    """
    return RuleSet(rules, **options).apply(text)


def version() -> str:
    """Return the installed TintMark version string."""
    return TINTMARK_VERSION
