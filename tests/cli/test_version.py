# tintmark:header:start
#
#   project      : TintMark
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli
from tintmark.constants import TINTMARK_VERSION


def test_version_outputs_installed_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == TINTMARK_VERSION


def test_version_json() -> None:
    """It should emit a JSON object with the version."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": TINTMARK_VERSION}


def test_version_verbose_adds_heading() -> None:
    """With ``-v`` a heading precedes the version."""
    result = run_cli(["-v", "--no-color", "version"])

    assert_SUCCESS(result)
    assert "TintMark version:" in result.stdout
    assert TINTMARK_VERSION in result.stdout
