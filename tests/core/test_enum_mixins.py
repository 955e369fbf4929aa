# tintmark:header:start
#
#   project      : TintMark
#   file         : test_enum_mixins.py
#   file_relpath : tests/core/test_enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Tests for the keyed enum helpers in `tintmark.core.enum_mixins`."""

from __future__ import annotations

from tests.conftest import parametrize
from tintmark.core.enum_mixins import CodedStrEnum, KeyedStrEnum


class Mode(KeyedStrEnum):
    FAST = ("fast", "Go fast", ("quick",))
    SAFE_MODE = ("safe", "Go safe")


class Shade(CodedStrEnum):
    DARK = ("dark", 2, ("dim",))
    LIGHT = ("light", 7)


@parametrize(
    "raw, expected",
    [
        ("fast", Mode.FAST),
        ("FAST", Mode.FAST),
        ("quick", Mode.FAST),
        ("safe", Mode.SAFE_MODE),
        ("safe-mode", Mode.SAFE_MODE),
        (" Safe Mode ", Mode.SAFE_MODE),
        (Mode.FAST, Mode.FAST),
        ("slow", None),
        (1, None),
        (None, None),
    ],
)
def test_keyed_parse(raw: object, expected: Mode | None) -> None:
    """Keys, names and aliases match case-insensitively."""
    assert Mode.parse(raw) is expected


def test_keyed_metadata() -> None:
    """Members expose key, label and aliases; the value is the key."""
    assert Mode.FAST.key == "fast"
    assert Mode.FAST.value == "fast"
    assert Mode.FAST.label == "Go fast"
    assert Mode.FAST.aliases == ("quick",)
    assert Mode.FAST == "fast"


def test_coded_members() -> None:
    """Coded members carry their numeric code."""
    assert Shade.parse("DIM") is Shade.DARK
    assert Shade.DARK.code == 2
    assert Shade.LIGHT.aliases == ()


def test_coded_tokens() -> None:
    """``tokens()`` lists keys first, then aliases."""
    assert Shade.tokens() == ("dark", "light", "dim")
