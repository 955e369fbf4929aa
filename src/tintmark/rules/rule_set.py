# tintmark:header:start
#
#   project      : TintMark
#   file         : rule_set.py
#   file_relpath : src/tintmark/rules/rule_set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Rule sets: named compiled rules plus the markup that invokes them.

A `RuleSet` is built once from a mapping of rule names to rule definitions.
Every rule is compiled eagerly; afterwards the rule set is read-only and can
be shared between threads.

Example:
    ```python
    rules = RuleSet(
        {
            # Green underlined text; closes by resetting fg and underline
            "name": {"fg": "green", "enable": "underline"},
            # Italic text; closes by disabling italic
            "quote": {"enable": "italic"},
            # Red inside, blue after the rule closes
            "weird": {"inside": {"fg": "red"}, "after": {"fg": "blue"}},
        }
    )
    rules.apply("{%nameJohn%}: {%quoteRoses are {%weirdRed%} (blue)%}.")
    ```

A rule named ``reset`` always exists. Unless the caller supplies one, it
resets everything (``ESC[0m``) when closed, and its after sequence is what a
bare reset marker (``%@`` by default) emits.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from types import MappingProxyType
from typing import IO, TYPE_CHECKING, Any, Final

from tintmark.config.logging import get_logger
from tintmark.core.errors import InvalidRuleError
from tintmark.rules.compiler import AfterPolicy, compile_rule, resolve_after_option
from tintmark.rules.renderer import RESET_RULE_NAME, StackRenderer
from tintmark.rules.scanner import MarkupScanner, TokenKind
from tintmark.rules.symbols import SymbolConfig

if TYPE_CHECKING:
    from tintmark.config.logging import TintmarkLogger
    from tintmark.rules.compiler import CompiledRule, DefaultAfter
    from tintmark.rules.scanner import Location, Token

logger: TintmarkLogger = get_logger(__name__)

DEFAULT_RESET_RULE: Final[Mapping[str, Any]] = MappingProxyType({"after": {"reset": "all"}})

# Private-use characters bracketing marker placeholders while %-formatting.
_PLACEHOLDER_OPEN: Final[str] = "\ue000"
_PLACEHOLDER_CLOSE: Final[str] = "\ue001"
_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(
    f"{_PLACEHOLDER_OPEN}(\\d+){_PLACEHOLDER_CLOSE}"
)


class RuleSet:
    """A compiled, immutable set of named style rules.

    Args:
        rules (Mapping[str, object] | None): Rule names mapped to rule definitions
            (mappings or `RuleDefinition` instances).
        after (object): Default-after policy: ``"auto"`` (default), ``"reset"``,
            ``"keep"``, an `AfterPolicy`, or an explicit after record.
        symbols (SymbolConfig | Mapping[str, object] | None): Delimiters; missing
            keys default to ``{%``, ``%}`` and ``%@``.

    Raises:
        InvalidRuleError: If a rule name is not a non-empty string or a rule is
            not record-shaped.
        InvalidOptionError: If ``after`` is not a recognized policy.
        InvalidSymbolsError: If the delimiters are invalid.
    """

    def __init__(
        self,
        rules: Mapping[str, object] | None = None,
        *,
        after: object = AfterPolicy.AUTO,
        symbols: SymbolConfig | Mapping[str, object] | None = None,
    ) -> None:
        self._symbols: SymbolConfig = SymbolConfig.coerce(symbols)
        self._default_after: DefaultAfter = resolve_after_option(after)

        source: Mapping[str, object] = rules if rules is not None else {}
        if not isinstance(source, Mapping):
            raise InvalidRuleError(f"Rules must be a mapping, got {type(source).__name__}")

        compiled: dict[str, CompiledRule] = {}
        for name, rule in source.items():
            if not isinstance(name, str) or not name:
                raise InvalidRuleError(f"Rule names must be non-empty strings, got {name!r}")
            compiled[name] = compile_rule(
                name, rule, self._default_after, is_reset=name == RESET_RULE_NAME
            )
        if RESET_RULE_NAME not in compiled:
            compiled[RESET_RULE_NAME] = compile_rule(
                RESET_RULE_NAME, DEFAULT_RESET_RULE, self._default_after, is_reset=True
            )

        self._rules: Mapping[str, CompiledRule] = MappingProxyType(compiled)
        self._scanner = MarkupScanner(compiled, self._symbols)
        self._renderer = StackRenderer(self._rules)
        logger.debug(
            "Built rule set with %d rule(s), after=%s, symbols=%s",
            len(compiled),
            self._default_after,
            self._symbols.as_dict(),
        )

    def __repr__(self) -> str:
        return f"RuleSet(rules={list(self._rules)!r}, symbols={self._symbols!r})"

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __getitem__(self, name: str) -> CompiledRule:
        return self._rules[name]

    @property
    def rules(self) -> Mapping[str, CompiledRule]:
        """Read-only mapping of rule name to compiled rule (includes ``reset``)."""
        return self._rules

    @property
    def names(self) -> tuple[str, ...]:
        """Rule names, in definition order."""
        return tuple(self._rules)

    @property
    def symbols(self) -> SymbolConfig:
        """The active delimiters."""
        return self._symbols

    @property
    def default_after(self) -> DefaultAfter:
        """The resolved default-after policy."""
        return self._default_after

    @property
    def scanner(self) -> MarkupScanner:
        """The markup scanner built for this rule set."""
        return self._scanner

    def tokens(self, text: str) -> list[Token]:
        """Scan ``text`` into literal spans and rule events."""
        return self._scanner.scan(text)

    def apply(self, text: str) -> str:
        """Return ``text`` with every recognized marker replaced by escape sequences.

        Text without markers is returned unchanged.
        """
        return self._renderer.render(self._scanner.scan(text))

    def strip(self, text: str) -> str:
        """Return ``text`` with every recognized marker removed and no escape codes."""
        return "".join(t.value for t in self._scanner.scan(text) if t.kind is TokenKind.TEXT)

    def format(self, template: str, *args: object) -> str:
        """%-format ``template`` with ``args`` and apply the rule set.

        The delimiters contain ``%``; markers are set aside before formatting
        so ``%`` interpolation only sees the template's own conversion specs.
        A single mapping argument enables ``%(name)s`` style templates.
        """
        protected, markers = self._protect(template)
        values: object = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
        formatted: str = protected % values
        restored: str = _PLACEHOLDER_RE.sub(lambda m: markers[int(m.group(1))], formatted)
        return self.apply(restored)

    def print(
        self,
        *texts: str,
        out: IO[str] | None = None,
        sep: str = "",
        end: str = "",
    ) -> None:
        """Apply the rule set to each of ``texts`` and write them to ``out``.

        Args:
            *texts (str): Marked-up texts.
            out (IO[str] | None): Destination stream; ``sys.stdout`` when omitted.
            sep (str): Separator written between texts.
            end (str): Written after the last text.
        """
        stream: IO[str] = out if out is not None else sys.stdout
        stream.write(sep.join(self.apply(t) for t in texts) + end)

    def printf(self, template: str, *args: object, out: IO[str] | None = None) -> None:
        """Write ``self.format(template, *args)`` to ``out`` (``sys.stdout`` when omitted)."""
        stream: IO[str] = out if out is not None else sys.stdout
        stream.write(self.format(template, *args))

    def _protect(self, template: str) -> tuple[str, list[str]]:
        """Replace every marker with a numbered placeholder."""
        pieces: list[str] = []
        markers: list[str] = []
        pos: int = 0
        locations: list[Location] = self._scanner.locate(template)
        for loc in locations:
            pieces.append(template[pos : loc.start])
            pieces.append(f"{_PLACEHOLDER_OPEN}{len(markers)}{_PLACEHOLDER_CLOSE}")
            markers.append(template[loc.start : loc.resume])
            pos = loc.resume
        pieces.append(template[pos:])
        return "".join(pieces), markers


def create_rule_set(rules: Mapping[str, object] | None = None, **options: Any) -> RuleSet:
    """Alias for ``RuleSet(rules, **options)``."""
    return RuleSet(rules, **options)
