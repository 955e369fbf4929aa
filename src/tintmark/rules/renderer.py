# tintmark:header:start
#
#   project      : TintMark
#   file         : renderer.py
#   file_relpath : src/tintmark/rules/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Stack renderer: turn scanned tokens into text with escape sequences.

Rendering is a bracket-matching stack machine over the token stream:

- literal text is copied verbatim;
- opening a known rule pushes it and emits its inside sequence;
- a close pops the innermost rule, emits its after sequence and then
  re-emits the inside sequence of every rule still open (outermost first), so
  outer styling survives the inner rule's resets;
- a reset closes every open rule at once and emits the reset rule's after
  sequence.

Unbalanced closes are ignored and unclosed rules simply stay in effect for
the rest of the string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from tintmark.rules.scanner import TokenKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tintmark.rules.compiler import CompiledRule
    from tintmark.rules.scanner import Token

RESET_RULE_NAME: Final[str] = "reset"


class StackRenderer:
    """Renders token streams against a fixed set of compiled rules.

    The renderer holds no per-call state, so one instance can serve
    concurrent callers.

    Args:
        rules (Mapping[str, CompiledRule]): Compiled rules by name; must contain
            the reset rule.
        reset_rule (str): Name of the rule whose after sequence a reset marker emits.
    """

    def __init__(self, rules: Mapping[str, CompiledRule], reset_rule: str = RESET_RULE_NAME):
        self._rules: Mapping[str, CompiledRule] = rules
        self._reset_rule: str = reset_rule

    def render(self, tokens: Iterable[Token]) -> str:
        """Render ``tokens`` into a string."""
        stack: list[CompiledRule] = []
        out: list[str] = []

        for token in tokens:
            match token.kind:
                case TokenKind.TEXT:
                    out.append(token.value)
                case TokenKind.OPEN:
                    rule: CompiledRule | None = self._rules.get(token.value)
                    if rule is None:
                        continue
                    stack.append(rule)
                    out.append(rule.inside_sequence)
                case TokenKind.CLOSE:
                    if not stack:
                        continue
                    out.append(stack.pop().after_sequence)
                    out.extend(r.inside_sequence for r in stack)
                case TokenKind.RESET:
                    stack.clear()
                    out.append(self._rules[self._reset_rule].after_sequence)

        return "".join(out)
