# tintmark:header:start
#
#   project      : TintMark
#   file         : scanner.py
#   file_relpath : src/tintmark/rules/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Markup scanner: split text into literal spans and rule events.

The scanner knows one marker per rule name (the open delimiter immediately
followed by the name) plus the close and reset delimiters. All markers are
compiled into a single alternation, longest first, so that `re.finditer`
yields the leftmost, non-overlapping occurrences in text order. When two
markers start at the same position the longer one wins (``{%redish`` over
``{%red``).

Example:
    ```python
    scanner = MarkupScanner(["red"], SymbolConfig())
    scanner.scan("a{%redB%}c")
    # [Token(TEXT, 'a'), Token(OPEN, 'red'), Token(TEXT, 'B'),
    #  Token(CLOSE, '%}'), Token(TEXT, 'c')]
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from tintmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tintmark.config.logging import TintmarkLogger
    from tintmark.rules.symbols import SymbolConfig

logger: TintmarkLogger = get_logger(__name__)


class TokenKind(Enum):
    """Kinds of scanned tokens."""

    TEXT = "text"
    OPEN = "open"
    CLOSE = "close"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class Token:
    """A literal span (``TEXT``) or a rule event.

    For ``OPEN`` tokens `value` is the rule name; for ``CLOSE``/``RESET`` it
    is the delimiter text.
    """

    kind: TokenKind
    value: str


@dataclass(frozen=True, slots=True)
class Location:
    """A located marker.

    Attributes:
        token (Token): The event the marker stands for.
        start (int): Index of the first marker character.
        end (int): Index of the last marker character (inclusive).
        resume (int): Index where literal text resumes.
    """

    token: Token
    start: int
    end: int
    resume: int


class MarkupScanner:
    """Locates rule markers in text.

    Args:
        names (Iterable[str]): Rule names to recognize.
        symbols (SymbolConfig): Delimiters.
    """

    def __init__(self, names: Iterable[str], symbols: SymbolConfig) -> None:
        lookup: dict[str, Token] = {}
        for name in names:
            lookup[f"{symbols.open}{name}"] = Token(TokenKind.OPEN, name)
        for kind, marker in ((TokenKind.CLOSE, symbols.close), (TokenKind.RESET, symbols.reset)):
            if marker in lookup:
                logger.warning(
                    "Marker %r of rule %r is shadowed by the %s delimiter",
                    marker,
                    lookup[marker].value,
                    kind.value,
                )
            lookup[marker] = Token(kind, marker)

        self._lookup: dict[str, Token] = lookup
        alternation: str = "|".join(
            re.escape(marker) for marker in sorted(lookup, key=len, reverse=True)
        )
        self._pattern: re.Pattern[str] = re.compile(alternation)

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled marker pattern."""
        return self._pattern

    def locate(self, text: str) -> list[Location]:
        """Return every marker occurrence in ``text``, in position order."""
        locations: list[Location] = []
        for m in self._pattern.finditer(text):
            locations.append(
                Location(
                    token=self._lookup[m.group(0)],
                    start=m.start(),
                    end=m.end() - 1,
                    resume=m.end(),
                )
            )
        logger.trace("Located %d marker(s) in %d character(s)", len(locations), len(text))
        return locations

    def scan(self, text: str) -> list[Token]:
        """Split ``text`` into literal spans and rule events.

        Empty literal spans between adjacent markers are omitted. Text
        without markers comes back as a single ``TEXT`` token.
        """
        tokens: list[Token] = []
        pos: int = 0
        for loc in self.locate(text):
            if loc.start > pos:
                tokens.append(Token(TokenKind.TEXT, text[pos : loc.start]))
            tokens.append(loc.token)
            pos = loc.resume
        if pos < len(text) or not tokens:
            tokens.append(Token(TokenKind.TEXT, text[pos:]))
        return tokens
