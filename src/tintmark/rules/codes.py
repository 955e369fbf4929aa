# tintmark:header:start
#
#   project      : TintMark
#   file         : codes.py
#   file_relpath : src/tintmark/rules/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""SGR code resolution for colors, styles and resets.

This module maps the tokens used in rule definitions to numeric "Select
Graphic Rendition" fragments. It holds no state: every function is a pure
mapping of its inputs.

Key types:
    - `Color`: the eight named base colors (value ``0``..``7``).
    - `Style`: text attributes; ``intense`` is an alias of ``bold`` and
      ``dark`` an alias of ``dim``.
    - `ResetTarget`: ``all``, ``fg``, ``bg`` and the blanket ``style`` target.
    - `ColorSpec`: closed union of `NamedColor`, `IndexedColor` and
      `TrueColor`, decided once by `parse_color` from the shape of the input.

Codes are either plain integers (``31``) or compound strings for extended
colors (``"38;5;208"``, ``"48;2;30;80;128"``). `escape` turns a code list into
the ``ESC [ <code> m`` sequences written to the terminal.

Example:
    ```python
    resolve_color(parse_color("red"), ColorTarget.FG)      # 31
    resolve_color(parse_color([208]), ColorTarget.BG)      # "48;5;208"
    resolve_style(Style.ITALIC, StyleAction.DISABLE)       # 23
    resolve_reset("italic")                                # 23
    ```
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Final, Union

from tintmark.core.enum_mixins import CodedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable


# A single SGR fragment: a plain integer or a ';'-joined compound code.
Code = Union[int, str]

ESC: Final[str] = "\x1b"

# Added to the color target offset to select the extended color modes.
EXTENDED_COLOR_OFFSET: Final[int] = 8
# Extended color mode selectors.
EXTENDED_MODE_256: Final[int] = 5
EXTENDED_MODE_TRUECOLOR: Final[int] = 2

CHANNEL_MIN: Final[int] = 0
CHANNEL_MAX: Final[int] = 255


class Color(CodedStrEnum):
    """Named standard ANSI colors."""

    BLACK = ("black", 0)
    RED = ("red", 1)
    GREEN = ("green", 2)
    YELLOW = ("yellow", 3)
    BLUE = ("blue", 4)
    MAGENTA = ("magenta", 5)
    CYAN = ("cyan", 6)
    WHITE = ("white", 7)


class Style(CodedStrEnum):
    """Text style attributes (values added to a `StyleAction` offset)."""

    BOLD = ("bold", 1, ("intense",))
    DIM = ("dim", 2, ("dark",))
    ITALIC = ("italic", 3)
    UNDERLINE = ("underline", 4)
    INVERSE = ("inverse", 7)
    HIDDEN = ("hidden", 8)
    STRIKETHROUGH = ("strikethrough", 9)


class ResetTarget(CodedStrEnum):
    """Reset targets accepted by ``reset`` and ``keep``.

    ``STYLE`` is a blanket marker: it has no code of its own and resolves to
    the disable codes of the styles a rule enables (see
    `tintmark.rules.compiler.resolve_part_codes`).
    """

    ALL = ("all", 0)
    FG = ("fg", 39)
    BG = ("bg", 49)
    STYLE = ("style", 20)

    @classmethod
    def concrete(cls) -> tuple[ResetTarget, ...]:
        """Return every target except `ALL`, in declaration order."""
        return tuple(t for t in cls if t is not cls.ALL)


class ColorTarget(IntEnum):
    """Base offsets for foreground and background colors."""

    FG = 30
    BG = 40


class StyleAction(IntEnum):
    """Offsets that turn a style value into an enable or disable code."""

    ENABLE = 0
    DISABLE = 20


@dataclass(frozen=True, slots=True)
class NamedColor:
    """One of the eight base colors."""

    color: Color


@dataclass(frozen=True, slots=True)
class IndexedColor:
    """A 256-color palette index (``0``..``255``)."""

    index: int


@dataclass(frozen=True, slots=True)
class TrueColor:
    """A 24-bit color."""

    r: int
    g: int
    b: int


ColorSpec = Union[NamedColor, IndexedColor, TrueColor]

# A reset/keep entry: a reset target, or a style name meaning "disable it".
ResetSpec = Union[ResetTarget, Style]


def _is_channel(value: object) -> bool:
    # bool is an int subclass; `fg = true` in TOML is not a color.
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and CHANNEL_MIN <= value <= CHANNEL_MAX
    )


def parse_color(value: object) -> ColorSpec | None:
    """Parse a ``fg``/``bg`` value into a `ColorSpec`.

    Accepted shapes:
        - a color name (``"red"``) or `Color` member → `NamedColor`
        - a bare integer → `IndexedColor`
        - a 1-element sequence ``[i]`` → `IndexedColor`
        - a 3-element sequence ``[r, g, b]`` → `TrueColor`
        - an existing `ColorSpec` is returned unchanged

    Args:
        value (object): Raw value from a rule definition.

    Returns:
        ColorSpec | None: The parsed color, or ``None`` when the value is not a
        recognizable color (the caller drops it).
    """
    if isinstance(value, (NamedColor, IndexedColor, TrueColor)):
        return value
    if isinstance(value, str):
        color: Color | None = Color.parse(value)
        return NamedColor(color) if color is not None else None
    if _is_channel(value):
        return IndexedColor(int(value))  # type: ignore[arg-type]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        items: list[object] = list(value)
        if not all(_is_channel(v) for v in items):
            return None
        if len(items) == 1:
            return IndexedColor(int(items[0]))  # type: ignore[arg-type]
        if len(items) == 3:
            r, g, b = (int(v) for v in items)  # type: ignore[arg-type]
            return TrueColor(r, g, b)
    return None


def parse_style(value: object) -> Style | None:
    """Parse a style token (name or alias) into a `Style`, or ``None``."""
    return Style.parse(value)


def parse_reset(value: object) -> ResetSpec | None:
    """Parse a reset/keep token into a `ResetTarget` or, failing that, a `Style`."""
    target: ResetTarget | None = ResetTarget.parse(value)
    if target is not None:
        return target
    return Style.parse(value)


def resolve_color(spec: ColorSpec, target: ColorTarget) -> Code:
    """Return the SGR fragment selecting ``spec`` for ``target``.

    Args:
        spec (ColorSpec): The color to select.
        target (ColorTarget): Foreground or background.

    Returns:
        Code: ``offset + value`` for named colors; a compound
        ``"<offset+8>;5;<i>"`` or ``"<offset+8>;2;<r>;<g>;<b>"`` string for
        extended colors.
    """
    match spec:
        case NamedColor(color=color):
            return int(target) + color.code
        case IndexedColor(index=index):
            return f"{int(target) + EXTENDED_COLOR_OFFSET};{EXTENDED_MODE_256};{index}"
        case TrueColor(r=r, g=g, b=b):
            return (
                f"{int(target) + EXTENDED_COLOR_OFFSET};{EXTENDED_MODE_TRUECOLOR};{r};{g};{b}"
            )
    raise TypeError(f"Not a color spec: {spec!r}")


def resolve_style(style: Style, action: StyleAction = StyleAction.ENABLE) -> int:
    """Return the code enabling or disabling ``style``."""
    return int(action) + style.code


def resolve_reset(target: object) -> Code | None:
    """Return the code for a reset request.

    A reset-target name resolves to its fixed code (``all`` → 0, ``fg`` → 39,
    ``bg`` → 49). A style name resolves to that style's disable code, so
    ``reset: italic`` means "turn italic off". Anything else resolves to
    ``None`` and emits no code.

    The blanket ``style`` target is not resolved here: it depends on which
    styles the rule enables (see `tintmark.rules.compiler.resolve_part_codes`).
    """
    reset: ResetSpec | None = parse_reset(target)
    if reset is None or reset is ResetTarget.STYLE:
        return None
    if isinstance(reset, Style):
        return resolve_style(reset, StyleAction.DISABLE)
    return reset.code


def dedupe_codes(codes: Iterable[Code]) -> list[Code]:
    """Drop repeated codes while preserving first-seen order."""
    return list(dict.fromkeys(codes))


def escape(codes: Iterable[Code]) -> str:
    """Join codes into ANSI escape sequences (one ``ESC[<code>m`` per code)."""
    return "".join(f"{ESC}[{code}m" for code in codes)
