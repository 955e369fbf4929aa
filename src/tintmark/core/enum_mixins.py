# tintmark:header:start
#
#   project      : TintMark
#   file         : enum_mixins.py
#   file_relpath : src/tintmark/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Generic Enum utilities for TintMark (typing-friendly, UI-agnostic).

Rule definitions name colors, styles and reset targets with short tokens
(``"red"``, ``"intense"``, ``"all"``), either in Python mappings or in TOML
rule files. The enums in `tintmark.rules.codes` are built on the keyed enums
below so that every token is parsed the same way.

Provided:
    - ``KeyedStrEnum``: `.value` is a stable machine key; carries a human
      label and aliases accepted by ``parse()``.
    - ``CodedStrEnum``: like ``KeyedStrEnum`` but carries a numeric SGR
      ``code`` instead of a label.

Design:
    - Keep the functions *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk) into this module.

Example:
    ```python
    class Shade(CodedStrEnum):
        DARK = ("dark", 2, ("dim",))

    assert Shade.parse("DIM") is Shade.DARK
    assert Shade.DARK.code == 2
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")
_CS = TypeVar("_CS", bound="CodedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


def _match_member(cls: type[Enum], raw: object) -> Enum | None:
    """Return the member of ``cls`` whose key, name or alias matches ``raw``."""
    if isinstance(raw, cls):
        return raw
    if not isinstance(raw, str):
        return None
    token: str = _norm_token(raw)
    for m in cls:
        if token == _norm_token(m.value) or token == _norm_token(m.name):
            return m
        for a in getattr(m, "aliases", ()):
            if token == _norm_token(a):
                return m
    return None


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.

    Example:
        class AfterPolicy(KeyedStrEnum):
            AUTO = ("auto", "Infer after codes")
            KEEP = ("keep", "Only explicit after codes")
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: object) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases. Matching is case-insensitive and
        normalizes '-', ' ' to '_'. Members are returned unchanged.
        """
        return _match_member(cls, raw)  # type: ignore[return-value]


class CodedStrEnum(str, Enum):
    """Enum keyed by a token string that carries a fixed numeric code.

    Attributes:
        code (int): Numeric SGR value associated with the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    code: int
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_CS],
        key: str,
        code: int,
        aliases: Iterable[str] = (),
    ) -> _CS:
        """Create a new CodedStrEnum member.

        Args:
            key (str): The stable machine key (stored as `.value`).
            code (int): The numeric code for the member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _CS: The newly created enum member.
        """
        obj: _CS = str.__new__(cls, key)
        obj._value_ = key
        obj.code = code
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_CS], raw: object) -> _CS | None:
        """Parse a token (key, name or alias) into an enum member, or ``None``."""
        return _match_member(cls, raw)  # type: ignore[return-value]

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """Return every accepted token (keys first, then aliases)."""
        keys: list[str] = [m.key for m in cls]
        aliases: list[str] = [a for m in cls for a in m.aliases]
        return tuple(keys + aliases)
