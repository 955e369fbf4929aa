# tintmark:header:start
#
#   project      : TintMark
#   file         : definition.py
#   file_relpath : src/tintmark/rules/definition.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Rule definitions: the author-facing description of a style rule.

A rule definition carries optional operands (``fg``, ``bg``, ``enable``,
``disable``, ``reset``, ``keep``) and may be partitioned into an explicit
``inside`` part (applied when the rule opens) and ``after`` part (applied when
it closes). Without a partition every operand belongs to ``inside`` and the
``after`` part is derived by the compiler.

Definitions are usually written as plain mappings (Python dicts or TOML
tables) and validated once by `RuleDefinition.from_mapping`:

```python
RuleDefinition.from_mapping({"fg": "green", "enable": "underline"})
RuleDefinition.from_mapping(
    {"inside": {"fg": "red", "enable": "italic"}, "after": {"reset": "fg"}}
)
```

Shape errors (a rule or part that is not a mapping) raise `InvalidRuleError`.
Unknown operand keys and unrecognized tokens are dropped with a warning.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Final, TypeVar

from tintmark.config.logging import get_logger
from tintmark.core.errors import InvalidRuleError
from tintmark.core.enum_mixins import KeyedStrEnum
from tintmark.rules.codes import (
    IndexedColor,
    NamedColor,
    TrueColor,
    parse_color,
    parse_reset,
    parse_style,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from tintmark.config.logging import TintmarkLogger
    from tintmark.rules.codes import ColorSpec, ResetSpec, Style

logger: TintmarkLogger = get_logger(__name__)

_T = TypeVar("_T")

# Operand keys, in the order the compiler resolves them.
KEY_RESET: Final[str] = "reset"
KEY_KEEP: Final[str] = "keep"
KEY_FG: Final[str] = "fg"
KEY_BG: Final[str] = "bg"
KEY_ENABLE: Final[str] = "enable"
KEY_DISABLE: Final[str] = "disable"
OPERAND_KEYS: Final[tuple[str, ...]] = (
    KEY_RESET,
    KEY_KEEP,
    KEY_FG,
    KEY_BG,
    KEY_ENABLE,
    KEY_DISABLE,
)


class Part(KeyedStrEnum):
    """The two parts of a rule."""

    INSIDE = ("inside", "Codes applied when the rule opens")
    AFTER = ("after", "Codes applied when the rule closes")


def _as_list(value: object) -> list[object]:
    """Wrap a scalar in a list; sequences (except strings) are copied as-is."""
    if value is None:
        return []
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return [value]


def _parse_many(
    value: object,
    parser: Callable[[object], _T | None],
    *,
    key: str,
    rule_name: str | None,
) -> tuple[_T, ...]:
    """Parse one-or-many tokens, dropping (and logging) unrecognized ones."""
    out: list[_T] = []
    for raw in _as_list(value):
        parsed: _T | None = parser(raw)
        if parsed is None:
            logger.warning("Rule %r: ignoring unrecognized %s value %r", rule_name, key, raw)
            continue
        if parsed not in out:
            out.append(parsed)
    return tuple(out)


def _parse_color_value(value: object, *, key: str, rule_name: str | None) -> ColorSpec | None:
    if value is None:
        return None
    spec: ColorSpec | None = parse_color(value)
    if spec is None:
        logger.warning("Rule %r: ignoring unrecognized %s color %r", rule_name, key, value)
    return spec


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """Validated rule definition.

    Attributes:
        fg (ColorSpec | None): Foreground color.
        bg (ColorSpec | None): Background color.
        enable (tuple[Style, ...]): Styles to turn on.
        disable (tuple[Style, ...]): Styles to turn off.
        reset (tuple[ResetSpec, ...]): Reset targets (or style names to disable).
        keep (tuple[ResetSpec, ...]): Targets that must not be reset on close.
        inside (RuleDefinition | None): Explicit open-time part.
        after (RuleDefinition | None): Explicit close-time part.
        source (Any): The value the definition was built from, kept for introspection.
    """

    fg: ColorSpec | None = None
    bg: ColorSpec | None = None
    enable: tuple[Style, ...] = ()
    disable: tuple[Style, ...] = ()
    reset: tuple[ResetSpec, ...] = ()
    keep: tuple[ResetSpec, ...] = ()
    inside: RuleDefinition | None = None
    after: RuleDefinition | None = None
    source: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_mapping(
        cls,
        data: object,
        *,
        rule_name: str | None = None,
        allow_parts: bool = True,
    ) -> RuleDefinition:
        """Build a definition from a mapping (dict or TOML table).

        Args:
            data (object): The raw rule. Must be a mapping.
            rule_name (str | None): Rule name, used in errors and log messages.
            allow_parts (bool): Whether ``inside``/``after`` sub-records are accepted.
                Parts themselves cannot be partitioned again.

        Returns:
            RuleDefinition: The validated definition.

        Raises:
            InvalidRuleError: If ``data`` (or one of its parts) is not a mapping.
        """
        if isinstance(data, RuleDefinition):
            return data
        if not isinstance(data, Mapping):
            raise InvalidRuleError(
                f"expected a mapping, got {type(data).__name__}", rule_name=rule_name
            )

        fields: dict[str, Any] = {}
        for raw_key, value in data.items():
            key: str = str(raw_key).strip().lower()
            if key in (Part.INSIDE.key, Part.AFTER.key):
                if not allow_parts:
                    logger.warning(
                        "Rule %r: nested %r part is not allowed here; ignored", rule_name, key
                    )
                    continue
                if not isinstance(value, (Mapping, RuleDefinition)):
                    raise InvalidRuleError(
                        f"{key!r} must be a mapping, got {type(value).__name__}",
                        rule_name=rule_name,
                    )
                fields[key] = cls.from_mapping(value, rule_name=rule_name, allow_parts=False)
            elif key in (KEY_FG, KEY_BG):
                fields[key] = _parse_color_value(value, key=key, rule_name=rule_name)
            elif key in (KEY_ENABLE, KEY_DISABLE):
                fields[key] = _parse_many(value, parse_style, key=key, rule_name=rule_name)
            elif key in (KEY_RESET, KEY_KEEP):
                fields[key] = _parse_many(value, parse_reset, key=key, rule_name=rule_name)
            else:
                logger.warning("Rule %r: ignoring unrecognized key %r", rule_name, raw_key)

        return cls(**fields, source=data)

    @classmethod
    def of(cls, **operands: object) -> RuleDefinition:
        """Keyword builder: ``RuleDefinition.of(fg="red", enable=["bold"])``."""
        return cls.from_mapping(operands)

    @property
    def has_parts(self) -> bool:
        """True if the definition carries an explicit ``inside`` or ``after`` part."""
        return self.inside is not None or self.after is not None

    def operands(self) -> RuleDefinition:
        """Return a copy holding only the operands (no parts, no source)."""
        return replace(self, inside=None, after=None, source=None)

    def is_empty(self) -> bool:
        """True if no operand is set."""
        return not (
            self.fg or self.bg or self.enable or self.disable or self.reset or self.keep
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, TOML/JSON-friendly mapping of the set fields."""
        out: dict[str, Any] = {}
        for key in OPERAND_KEYS:
            value: Any = getattr(self, key)
            if not value:
                continue
            if key in (KEY_FG, KEY_BG):
                out[key] = color_to_plain(value)
            else:
                out[key] = [v.key for v in value]
        if self.inside is not None:
            out[Part.INSIDE.key] = self.inside.to_dict()
        if self.after is not None:
            out[Part.AFTER.key] = self.after.to_dict()
        return out


def color_to_plain(spec: ColorSpec) -> str | list[int]:
    """Return the rule-file spelling of a color spec."""
    match spec:
        case NamedColor(color=color):
            return color.key
        case IndexedColor(index=index):
            return [index]
        case TrueColor(r=r, g=g, b=b):
            return [r, g, b]
    raise TypeError(f"Not a color spec: {spec!r}")
