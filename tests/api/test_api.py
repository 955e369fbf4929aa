# tintmark:header:start
#
#   project      : TintMark
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Tests for the public facade in `tintmark.api`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import sgr
from tintmark import api
from tintmark.constants import TINTMARK_VERSION

if TYPE_CHECKING:
    from pathlib import Path


def test_create_rule_set_and_apply() -> None:
    """The documented quick start works."""
    rules = api.create_rule_set({"red": {"fg": "red"}})
    assert isinstance(rules, api.RuleSet)
    assert rules.apply("a{%redB%}c") == "a\x1b[31mB\x1b[39mc"


def test_colorize_one_shot() -> None:
    """``colorize`` builds a rule set and applies it once."""
    out = api.colorize("{%okdone%}", {"ok": {"fg": "green", "enable": "bold"}})
    assert out == sgr(32, 1) + "done" + sgr(21, 39)


def test_colorize_forwards_options() -> None:
    """Construction options are passed through."""
    out = api.colorize(
        "[okx]", {"ok": {"fg": "green"}}, after="keep", symbols={"open": "[", "close": "]"}
    )
    assert out == sgr(32) + "x"


def test_colorize_without_rules() -> None:
    """Without rules only the reset marker is known."""
    assert api.colorize("plain%@") == "plain" + sgr(0)


def test_errors_share_a_base_class() -> None:
    """All library errors derive from TintmarkError."""
    with pytest.raises(api.TintmarkError):
        api.colorize("x", {"bad": 1})
    with pytest.raises(api.TintmarkError):
        api.colorize("x", {}, after="maybe")
    with pytest.raises(api.TintmarkError):
        api.colorize("x", {}, symbols={"open": ""})


def test_load_rule_set(tmp_path: Path) -> None:
    """Rule files load through the facade."""
    path = tmp_path / "tintmark.toml"
    path.write_text('[rules.em]\nenable = "italic"\n', encoding="utf-8")
    assert api.load_rule_set(path).apply("{%emx%}") == sgr(3) + "x" + sgr(23)


def test_compile_rule_is_exposed() -> None:
    """Single rules can be compiled for inspection."""
    compiled = api.compile_rule("r", api.RuleDefinition.of(bg=[1, 2, 3]))
    assert compiled.inside_codes == ("48;2;1;2;3",)
    assert compiled.after_codes == (49,)


def test_version() -> None:
    """``version()`` returns the installed version."""
    assert api.version() == TINTMARK_VERSION
