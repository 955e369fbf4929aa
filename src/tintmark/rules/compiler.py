# tintmark:header:start
#
#   project      : TintMark
#   file         : compiler.py
#   file_relpath : src/tintmark/rules/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Rule compilation: from a `RuleDefinition` to ready-to-emit code lists.

Compiling a rule happens once, when its rule set is built:

1. The *inside* operands are the explicit ``inside`` part, or the whole
   definition minus its ``after`` part.
2. The *after* operands are derived from the explicit ``after`` part and the
   rule set's default-after policy (`AfterPolicy` or an explicit record):

   - ``keep``: the explicit after part only;
   - ``reset``: the explicit after part merged over "reset everything";
   - ``auto``: the explicit after part merged over an inferred part that
     undoes what the inside part changed (`build_auto_after`);
   - explicit record: the explicit after part merged over that record.

3. Both parts are resolved to deduplicated SGR code lists, and each list is
   joined once into its escape-sequence string.

The merge itself (`override_after`) lets an explicit ``after`` part win over
the baseline: ``keep`` removes targets from the reset set, explicit disables
replace the blanket style reset, and a style is never both enabled and
disabled in the same part.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from tintmark.config.logging import get_logger
from tintmark.core.enum_mixins import KeyedStrEnum
from tintmark.core.errors import InvalidOptionError, InvalidRuleError
from tintmark.rules.codes import (
    ColorTarget,
    ResetTarget,
    Style,
    StyleAction,
    dedupe_codes,
    escape,
    resolve_color,
    resolve_reset,
    resolve_style,
)
from tintmark.rules.definition import Part, RuleDefinition

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tintmark.config.logging import TintmarkLogger
    from tintmark.rules.codes import Code, ResetSpec

logger: TintmarkLogger = get_logger(__name__)


class AfterPolicy(KeyedStrEnum):
    """How a rule set derives the close-time codes of its rules."""

    AUTO = ("auto", "Undo whatever the rule's inside part changed")
    RESET = ("reset", "Reset colors and styles when a rule closes")
    KEEP = ("keep", "Emit only the rule's explicit after part")


# Resolved default-after policy of a rule set.
DefaultAfter = Union[AfterPolicy, RuleDefinition]

RESET_EVERYTHING: RuleDefinition = RuleDefinition(reset=(ResetTarget.ALL,))


def resolve_after_option(value: object) -> DefaultAfter:
    """Resolve the ``after`` construction option.

    Args:
        value (object): ``None`` (→ `AfterPolicy.AUTO`), an `AfterPolicy`, its
            key (case-insensitive), or an explicit after record (mapping or
            `RuleDefinition`).

    Returns:
        DefaultAfter: The resolved policy.

    Raises:
        InvalidOptionError: If ``value`` is an unknown policy token or of an
            unsupported type.
    """
    if value is None:
        return AfterPolicy.AUTO
    if isinstance(value, RuleDefinition):
        return value
    if isinstance(value, str):
        policy: AfterPolicy | None = AfterPolicy.parse(value)
        if policy is None:
            choices: str = ", ".join(p.key for p in AfterPolicy)
            raise InvalidOptionError(f"Unknown after policy {value!r} (expected one of {choices})")
        return policy
    try:
        return RuleDefinition.from_mapping(value, rule_name="<after option>", allow_parts=False)
    except InvalidRuleError as exc:
        raise InvalidOptionError(str(exc)) from exc


def _expand_all(targets: Iterable[ResetSpec]) -> list[ResetSpec]:
    """Replace `ResetTarget.ALL` with the concrete targets, keeping order."""
    out: list[ResetSpec] = []
    for target in targets:
        expanded: Sequence[ResetSpec] = (
            ResetTarget.concrete() if target is ResetTarget.ALL else (target,)
        )
        for t in expanded:
            if t not in out:
                out.append(t)
    return out


def _union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    out: list[Any] = []
    for item in (*first, *second):
        if item not in out:
            out.append(item)
    return out


def override_after(override: RuleDefinition, base: RuleDefinition) -> RuleDefinition:
    """Merge an explicit after part (``override``) onto a baseline (``base``).

    Args:
        override (RuleDefinition): The author's explicit after operands.
        base (RuleDefinition): The inferred or preset baseline.

    Returns:
        RuleDefinition: The merged after operands. Only kept style names are
        carried in ``keep``; they are left out when the blanket style reset
        is resolved.
    """
    o_keep: list[ResetSpec] = _expand_all(override.keep)

    reset: list[ResetSpec] = [
        t for t in _union(_expand_all(base.reset), _expand_all(override.reset)) if t not in o_keep
    ]

    kept_styles: tuple[Style, ...] = tuple(t for t in o_keep if isinstance(t, Style))
    base_disable: Sequence[Style] = (
        () if ResetTarget.STYLE in o_keep else [s for s in base.disable if s not in kept_styles]
    )

    # Explicit disables replace the blanket style reset.
    if override.disable:
        reset = [t for t in reset if t is not ResetTarget.STYLE]

    enable: list[Style] = [
        s for s in _union(base.enable, override.enable) if s not in override.disable
    ]
    disable: list[Style] = [
        s for s in _union(base_disable, override.disable) if s not in override.enable
    ]
    # Disable wins on conflict.
    enable = [s for s in enable if s not in disable]

    return RuleDefinition(
        fg=override.fg if override.fg is not None else base.fg,
        bg=override.bg if override.bg is not None else base.bg,
        enable=tuple(enable),
        disable=tuple(disable),
        reset=tuple(reset),
        keep=kept_styles,
    )


def build_auto_after(inside: RuleDefinition, explicit_after: RuleDefinition) -> RuleDefinition:
    """Infer the after part undoing ``inside``, then merge ``explicit_after`` over it.

    Only ``enable``, ``fg`` and ``bg`` of the inside part are undone; a
    ``disable`` in the inside part is never reversed.
    """
    candidate: list[ResetSpec] = []
    if inside.enable:
        candidate.append(ResetTarget.STYLE)
    if inside.fg is not None:
        candidate.append(ResetTarget.FG)
    if inside.bg is not None:
        candidate.append(ResetTarget.BG)
    return override_after(explicit_after, RuleDefinition(reset=tuple(candidate)))


def resolve_part_codes(part: RuleDefinition, *, enabled: Sequence[Style] = ()) -> list[Code]:
    """Resolve one rule part to a deduplicated, ordered code list.

    Resets come first so they never clobber what the same part sets; then
    colors, then style enables and disables.

    Args:
        part (RuleDefinition): The operands of the part.
        enabled (Sequence[Style]): Styles enabled by the rule's inside part; the
            blanket `ResetTarget.STYLE` resolves to their disable codes,
            except for styles listed in the part's ``keep``.

    Returns:
        list[Code]: The code list.
    """
    codes: list[Code] = []
    for target in part.reset:
        if target is ResetTarget.STYLE:
            codes.extend(
                resolve_style(s, StyleAction.DISABLE) for s in enabled if s not in part.keep
            )
            continue
        code: Code | None = resolve_reset(target)
        if code is not None:
            codes.append(code)
    if part.fg is not None:
        codes.append(resolve_color(part.fg, ColorTarget.FG))
    if part.bg is not None:
        codes.append(resolve_color(part.bg, ColorTarget.BG))
    codes.extend(resolve_style(s, StyleAction.ENABLE) for s in part.enable)
    codes.extend(resolve_style(s, StyleAction.DISABLE) for s in part.disable)
    return dedupe_codes(codes)


def evaluate(
    definition: RuleDefinition,
    default_after: DefaultAfter,
    *,
    is_reset: bool = False,
) -> tuple[RuleDefinition, RuleDefinition]:
    """Return the final ``(inside, after)`` operands of a rule.

    Args:
        definition (RuleDefinition): The validated rule definition.
        default_after (DefaultAfter): The owning rule set's default-after policy.
        is_reset (bool): True when compiling the reset rule; its after part is
            the explicit after part only.

    Returns:
        tuple[RuleDefinition, RuleDefinition]: Inside and after operands.
    """
    inside: RuleDefinition = (
        definition.inside if definition.inside is not None else definition.operands()
    )
    explicit_after: RuleDefinition = (
        definition.after if definition.after is not None else RuleDefinition()
    )

    if is_reset or default_after is AfterPolicy.KEEP:
        after: RuleDefinition = explicit_after.operands()
    elif default_after is AfterPolicy.RESET:
        after = override_after(explicit_after, RESET_EVERYTHING)
    elif default_after is AfterPolicy.AUTO:
        after = build_auto_after(inside, explicit_after)
    else:
        after = override_after(explicit_after, default_after)

    return inside, after


@dataclass(frozen=True, slots=True)
class CompiledRule:
    """Immutable result of compiling one rule.

    Attributes:
        name (str): Rule name.
        original (Any): The definition as supplied by the caller.
        inside (RuleDefinition): Evaluated inside operands.
        after (RuleDefinition): Evaluated after operands.
        inside_codes (tuple[Code, ...]): Codes emitted when the rule opens.
        after_codes (tuple[Code, ...]): Codes emitted when the rule closes.
        inside_sequence (str): Escape sequence for `inside_codes`.
        after_sequence (str): Escape sequence for `after_codes`.
    """

    name: str
    original: Any
    inside: RuleDefinition
    after: RuleDefinition
    inside_codes: tuple[Code, ...]
    after_codes: tuple[Code, ...]
    inside_sequence: str
    after_sequence: str

    def codes(self, part: Part | str) -> str:
        """Return the escape sequence for ``part`` (``"inside"`` or ``"after"``)."""
        return self.inside_sequence if _part(part) is Part.INSIDE else self.after_sequence

    def code_list(self, part: Part | str) -> tuple[Code, ...]:
        """Return the code list for ``part``."""
        return self.inside_codes if _part(part) is Part.INSIDE else self.after_codes


def _part(part: Part | str) -> Part:
    resolved: Part | None = Part.parse(part)
    if resolved is None:
        raise KeyError(part)
    return resolved


def compile_rule(
    name: str,
    rule: object,
    default_after: DefaultAfter = AfterPolicy.AUTO,
    *,
    is_reset: bool = False,
) -> CompiledRule:
    """Compile one rule.

    Args:
        name (str): Rule name.
        rule (object): A `RuleDefinition` or a rule mapping.
        default_after (DefaultAfter): The owning rule set's default-after policy.
        is_reset (bool): True when compiling the rule set's reset rule.

    Returns:
        CompiledRule: The compiled rule.

    Raises:
        InvalidRuleError: If ``rule`` is not record-shaped.
    """
    definition: RuleDefinition = RuleDefinition.from_mapping(rule, rule_name=name)
    inside, after = evaluate(definition, default_after, is_reset=is_reset)

    inside_codes: tuple[Code, ...] = tuple(resolve_part_codes(inside))
    after_codes: tuple[Code, ...] = tuple(resolve_part_codes(after, enabled=inside.enable))
    logger.debug("Compiled rule %r: inside=%s after=%s", name, inside_codes, after_codes)

    return CompiledRule(
        name=name,
        original=rule,
        inside=inside,
        after=after,
        inside_codes=inside_codes,
        after_codes=after_codes,
        inside_sequence=escape(inside_codes),
        after_sequence=escape(after_codes),
    )
