# tintmark:header:start
#
#   project      : TintMark
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Tests for TOML rule files in `tintmark.config.io`.

Rule files are parsed with tomlkit and turned into `RuleSet` instances; the
same tables are accepted at the document root or under ``[tool.tintmark]``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.conftest import sgr
from tintmark.config.io import (
    extract_rule_tables,
    load_rule_set,
    load_toml_dict,
    parse_toml_text,
    rule_set_from_dict,
)
from tintmark.core.errors import InvalidOptionError, InvalidRuleError, RuleFileError
from tintmark.rules.compiler import AfterPolicy

if TYPE_CHECKING:
    from pathlib import Path

RULES_TOML = """\
[options]
after = "auto"

[options.symbols]
open = "<"
close = ">"

[rules.red]
fg = "red"

[rules.warn.inside]
fg = [208]
enable = ["bold", "underline"]

[rules.warn.after]
keep = "style"
"""


def test_parse_toml_text_returns_plain_dicts() -> None:
    """Parsed documents are unwrapped into builtin types."""
    data = parse_toml_text(RULES_TOML)
    assert type(data) is dict
    assert type(data["rules"]["warn"]["inside"]["fg"]) is list
    assert data["rules"]["red"] == {"fg": "red"}


def test_parse_toml_text_rejects_invalid_toml() -> None:
    """Malformed TOML raises RuleFileError naming the source."""
    with pytest.raises(RuleFileError, match="broken.toml"):
        parse_toml_text("[rules\nfg = ", source="broken.toml")


def test_load_rule_set_from_file(tmp_path: Path) -> None:
    """A rule file yields a ready rule set with its options applied."""
    path = tmp_path / "tintmark.toml"
    path.write_text(RULES_TOML, encoding="utf-8")
    rules = load_rule_set(path)
    assert rules.names == ("red", "warn", "reset")
    assert rules.symbols.open == "<"
    assert rules.default_after is AfterPolicy.AUTO
    assert rules.apply("<redx>") == sgr(31) + "x" + sgr(39)
    assert rules.apply("<warnx>") == sgr("38;5;208", 1, 4) + "x" + sgr(39)


def test_load_rule_set_from_pyproject(tmp_path: Path) -> None:
    """Tables under ``[tool.tintmark]`` take precedence in pyproject.toml."""
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n'
        '[tool.tintmark.options]\nafter = "keep"\n\n'
        '[tool.tintmark.rules.ok]\nfg = "green"\nenable = "bold"\n',
        encoding="utf-8",
    )
    rules = load_rule_set(path)
    assert rules.default_after is AfterPolicy.KEEP
    assert rules.apply("{%okdone%}") == sgr(32, 1) + "done"


def test_inline_table_after_option(tmp_path: Path) -> None:
    """``after`` may be an inline after record."""
    path = tmp_path / "rules.toml"
    path.write_text('[options]\nafter = { reset = "all" }\n\n[rules.b]\nenable = "bold"\n')
    rules = load_rule_set(path)
    assert rules["b"].after_codes == (39, 49, 21)


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """An unreadable file raises RuleFileError."""
    with pytest.raises(RuleFileError):
        load_toml_dict(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "data",
    [
        {"rules": ["red"]},
        {"rules": {}, "options": "auto"},
    ],
)
def test_extract_rule_tables_rejects_non_tables(data: dict[str, object]) -> None:
    """``rules`` and ``options`` must be tables."""
    with pytest.raises(RuleFileError):
        extract_rule_tables(data, source="x.toml")


def test_extract_rule_tables_warns_without_rules(caplog: pytest.LogCaptureFixture) -> None:
    """A document without rules is accepted with a warning."""
    with caplog.at_level(logging.WARNING):
        tables = extract_rule_tables({"options": {"after": "keep"}}, source="empty.toml")
    assert tables == {"rules": {}, "options": {"after": "keep"}}
    assert "empty.toml" in caplog.text


def test_rule_errors_propagate_from_dict() -> None:
    """Rule and option errors keep their library types."""
    with pytest.raises(InvalidRuleError):
        rule_set_from_dict({"rules": {"red": "fg=red"}})
    with pytest.raises(InvalidOptionError):
        rule_set_from_dict({"rules": {}, "options": {"after": "never"}})
