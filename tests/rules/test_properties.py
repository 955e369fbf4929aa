# tintmark:header:start
#
#   project      : TintMark
#   file         : test_properties.py
#   file_relpath : tests/rules/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

# pyright: strict

"""Property tests for code resolution, the override merge and rendering."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies_tintmark import (
    CHANNELS,
    PLAIN_TEXT,
    marked_up_text,
    operand_records,
    rule_maps,
)
from tintmark.rules.codes import (
    Color,
    ColorTarget,
    IndexedColor,
    NamedColor,
    ResetTarget,
    Style,
    StyleAction,
    TrueColor,
    resolve_color,
    resolve_reset,
    resolve_style,
)
from tintmark.rules.compiler import compile_rule, override_after
from tintmark.rules.definition import RuleDefinition
from tintmark.rules.rule_set import RuleSet

TARGETS = st.sampled_from(list(ColorTarget))


@given(color=st.sampled_from(list(Color)), target=TARGETS)
def test_named_color_is_offset_plus_value(color: Color, target: ColorTarget) -> None:
    """Named colors resolve to the target offset plus the color value."""
    assert resolve_color(NamedColor(color), target) == int(target) + color.code


@given(index=CHANNELS, target=TARGETS)
def test_indexed_color_fragment(index: int, target: ColorTarget) -> None:
    """Indexed colors resolve to ``<offset+8>;5;<i>``."""
    assert resolve_color(IndexedColor(index), target) == f"{int(target) + 8};5;{index}"


@given(r=CHANNELS, g=CHANNELS, b=CHANNELS, target=TARGETS)
def test_truecolor_fragment(r: int, g: int, b: int, target: ColorTarget) -> None:
    """Truecolors resolve to ``<offset+8>;2;<r>;<g>;<b>``."""
    assert resolve_color(TrueColor(r, g, b), target) == f"{int(target) + 8};2;{r};{g};{b}"


@given(
    color=st.sampled_from(list(Color)),
    styles=st.lists(st.sampled_from(list(Style)), min_size=1, max_size=4, unique=True),
)
def test_auto_after_is_fg_reset_plus_style_disables(color: Color, styles: list[Style]) -> None:
    """``{fg: X, enable: S}`` closes with the fg reset and a disable for each style."""
    compiled = compile_rule("r", {"fg": color.key, "enable": [s.key for s in styles]})
    expected = {resolve_reset(ResetTarget.FG)} | {
        resolve_style(s, StyleAction.DISABLE) for s in styles
    }
    assert set(compiled.after_codes) == expected
    assert len(compiled.after_codes) == len(expected)


@given(override=operand_records(), base=operand_records())
def test_override_merge_never_enables_and_disables_a_style(
    override: dict[str, object], base: dict[str, object]
) -> None:
    """A merged after part never both enables and disables a style."""
    merged = override_after(
        RuleDefinition.from_mapping(override), RuleDefinition.from_mapping(base)
    )
    assert not set(merged.enable) & set(merged.disable)


@given(styles=st.lists(st.sampled_from(list(Style)), min_size=1, unique=True))
def test_override_disable_is_never_enabled(styles: list[Style]) -> None:
    """Styles disabled by the override never appear in the merged enable set."""
    base = RuleDefinition(enable=tuple(Style))
    merged = override_after(RuleDefinition(disable=tuple(styles)), base)
    assert not set(styles) & set(merged.enable)
    assert set(merged.enable) == set(Style) - set(styles)


@settings(max_examples=75)
@given(data=st.data(), rules=rule_maps())
def test_apply_leaves_no_delimiters(
    data: st.DataObject, rules: dict[str, dict[str, object]]
) -> None:
    """When every marker is covered by the rule set, no delimiter survives rendering."""
    rule_set = RuleSet(rules)
    text: str = data.draw(marked_up_text(list(rules)))
    out = rule_set.apply(text)
    for delimiter in ("{%", "%}", "%@"):
        assert delimiter not in out


@given(text=PLAIN_TEXT, rules=rule_maps())
def test_text_without_markers_is_unchanged(text: str, rules: dict[str, dict[str, object]]) -> None:
    """Text without any delimiter passes through unchanged."""
    assert RuleSet(rules).apply(text) == text
