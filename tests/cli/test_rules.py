# tintmark:header:start
#
#   project      : TintMark
#   file         : test_rules.py
#   file_relpath : tests/cli/test_rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""CLI tests: `tintmark rules`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import sgr

if TYPE_CHECKING:
    from pathlib import Path


def _write_rules(tmp_path: Path) -> Path:
    path = tmp_path / "rules.toml"
    path.write_text(
        '[rules.red]\nfg = "red"\n\n[rules.note.inside]\nfg = [208]\nenable = "bold"\n',
        encoding="utf-8",
    )
    return path


def test_rules_text_listing(tmp_path: Path) -> None:
    """Each rule is listed with its inside and after codes."""
    result = run_cli(["--no-color", "rules", "--rules", str(_write_rules(tmp_path))])
    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("red")
    assert "inside: 31  after: 39" in lines[0]
    assert "inside: 38;5;208, 1  after: 21, 39" in lines[1]
    assert lines[2].startswith("reset")
    assert "inside: -  after: 0" in lines[2]
    assert "\x1b[" not in result.stdout


def test_rules_text_listing_with_preview(tmp_path: Path) -> None:
    """With color enabled each rule name is rendered with its own codes."""
    result = run_cli(["--color", "always", "rules", "--rules", str(_write_rules(tmp_path))])
    assert_SUCCESS(result)
    assert sgr(31) + "red" + sgr(39) in result.stdout


def test_rules_verbose_listing_shows_symbols(tmp_path: Path) -> None:
    """``-v`` adds a heading and the active delimiters."""
    result = run_cli(["-v", "--no-color", "rules", "--rules", str(_write_rules(tmp_path))])
    assert_SUCCESS(result)
    assert "Rules:" in result.stdout
    assert "Symbols: open='{%' close='%}' reset='%@'" in result.stdout


def test_rules_json_listing(tmp_path: Path) -> None:
    """JSON output carries code lists and the evaluated definitions."""
    result = run_cli(
        ["rules", "--rules", str(_write_rules(tmp_path)), "--format", "json", "--after", "reset"]
    )
    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["symbols"] == {"open": "{%", "close": "%}", "reset": "%@"}
    assert list(payload["rules"]) == ["red", "note", "reset"]
    assert payload["rules"]["red"]["inside"] == [31]
    assert payload["rules"]["red"]["after"] == [39, 49]
    assert payload["rules"]["note"]["inside"] == ["38;5;208", 1]
    assert payload["rules"]["reset"]["after"] == [0]
    assert payload["rules"]["red"]["definition"] == {
        "inside": {"fg": "red"},
        "after": {"reset": ["fg", "bg", "style"]},
    }
