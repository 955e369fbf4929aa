# tintmark:header:start
#
#   project      : TintMark
#   file         : symbols.py
#   file_relpath : src/tintmark/rules/symbols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Markup delimiters used by a rule set."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from tintmark.core.errors import InvalidSymbolsError

DEFAULT_OPEN: Final[str] = "{%"
DEFAULT_CLOSE: Final[str] = "%}"
DEFAULT_RESET: Final[str] = "%@"

SYMBOL_KEYS: Final[tuple[str, ...]] = ("open", "close", "reset")


@dataclass(frozen=True, slots=True)
class SymbolConfig:
    """The three markup delimiters.

    Attributes:
        open (str): Prefix immediately followed by a rule name; opens that rule.
        close (str): Closes the innermost open rule.
        reset (str): Unconditional reset marker.
    """

    open: str = DEFAULT_OPEN
    close: str = DEFAULT_CLOSE
    reset: str = DEFAULT_RESET

    def __post_init__(self) -> None:
        values: list[object] = [self.open, self.close, self.reset]
        for key, value in zip(SYMBOL_KEYS, values):
            if not isinstance(value, str) or not value:
                raise InvalidSymbolsError(f"Symbol {key!r} must be a non-empty string")
        if len(set(values)) != len(values):
            raise InvalidSymbolsError(
                f"Symbols must be distinct (open={self.open!r}, "
                f"close={self.close!r}, reset={self.reset!r})"
            )

    @classmethod
    def coerce(cls, value: SymbolConfig | Mapping[str, object] | None) -> SymbolConfig:
        """Build a `SymbolConfig` from ``None``, an instance, or a partial mapping.

        Raises:
            InvalidSymbolsError: On unknown keys or invalid delimiter values.
        """
        if value is None:
            return cls()
        if isinstance(value, SymbolConfig):
            return value
        if not isinstance(value, Mapping):
            raise InvalidSymbolsError(f"Expected a mapping of symbols, got {type(value).__name__}")
        unknown: list[str] = [str(k) for k in value if k not in SYMBOL_KEYS]
        if unknown:
            raise InvalidSymbolsError(f"Unknown symbol key(s): {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in value.items() if v is not None})  # type: ignore[arg-type]

    def as_dict(self) -> dict[str, str]:
        """Return the delimiters as a plain mapping."""
        return {"open": self.open, "close": self.close, "reset": self.reset}
