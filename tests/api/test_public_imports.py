# tintmark:header:start
#
#   project      : TintMark
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Smoke tests for public imports and __all__ (Google-style)."""

from __future__ import annotations

import inspect


def test_api_all_contains_expected_symbols() -> None:
    """__all__ exposes the expected stable symbols (at least this subset)."""
    from tintmark import api

    expected: set[str] = {
        "RuleSet",
        "RuleDefinition",
        "AfterPolicy",
        "create_rule_set",
        "colorize",
        "load_rule_set",
        "version",
    }
    exported: set[str] = set(api.__all__)
    missing: set[str] = expected - exported
    assert not missing, f"Missing from api.__all__: {sorted(missing)}; have: {sorted(exported)}"


def test_api_symbols_are_callable_or_types() -> None:
    """Every exported symbol is either callable or a type/class."""
    from tintmark import api

    for name in api.__all__:
        obj = getattr(api, name)
        assert callable(obj) or inspect.isclass(obj)
