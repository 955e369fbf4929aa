# tintmark:header:start
#
#   project      : TintMark
#   file         : rules.py
#   file_relpath : src/tintmark/cli/commands/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""TintMark `rules` command.

Lists the compiled rules of a rule set with their inside and after code
lists. Useful for checking what a rule file actually emits, including the
inferred after codes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from tintmark.cli.cmd_common import build_rule_set, get_effective_verbosity
from tintmark.cli.console import ClickConsole
from tintmark.cli.options import OutputFormat, common_rule_set_options

if TYPE_CHECKING:
    from pathlib import Path

    from tintmark.rules.compiler import CompiledRule
    from tintmark.rules.rule_set import RuleSet


def _format_codes(codes: tuple[int | str, ...]) -> str:
    return ", ".join(str(c) for c in codes) if codes else "-"


def _rule_to_json(rule: CompiledRule) -> dict[str, Any]:
    return {
        "inside": list(rule.inside_codes),
        "after": list(rule.after_codes),
        "definition": {
            "inside": rule.inside.to_dict(),
            "after": rule.after.to_dict(),
        },
    }


@click.command(
    name="rules",
    help="List the compiled rules of a rule set.",
    epilog="""
Shows the SGR codes each rule emits when it opens (inside) and closes (after).
With color enabled, a sample of each rule is rendered as a preview.
""",
)
@common_rule_set_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice([v.value for v in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def rules_command(
    *,
    rules_file: Path | None,
    after_policy: str | None,
    open_symbol: str | None,
    close_symbol: str | None,
    reset_symbol: str | None,
    output_format: str = OutputFormat.TEXT.value,
) -> None:
    """List compiled rules.

    Args:
        rules_file (Path | None): TOML rule file.
        after_policy (str | None): Default after policy override.
        open_symbol (str | None): Open delimiter override.
        close_symbol (str | None): Close delimiter override.
        reset_symbol (str | None): Reset delimiter override.
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj.get("console") or ClickConsole()
    color_enabled: bool = bool(ctx.obj.get("color_enabled", True))

    rule_set: RuleSet = build_rule_set(
        rules_file,
        after_policy=after_policy,
        open_symbol=open_symbol,
        close_symbol=close_symbol,
        reset_symbol=reset_symbol,
    )

    if output_format == OutputFormat.JSON.value:
        payload: dict[str, Any] = {
            "symbols": rule_set.symbols.as_dict(),
            "rules": {name: _rule_to_json(rule) for name, rule in rule_set.rules.items()},
        }
        console.print(json.dumps(payload, indent=2))
        return

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel > 0:
        console.print(console.styled("Rules:\n", bold=True, underline=True))

    width: int = max(len(name) for name in rule_set.names)
    for name, rule in rule_set.rules.items():
        line: str = (
            f"{name:<{width}}  inside: {_format_codes(rule.inside_codes)}"
            f"  after: {_format_codes(rule.after_codes)}"
        )
        if color_enabled:
            line += f"  {rule.inside_sequence}{name}{rule.after_sequence}"
        console.print(line)

    if vlevel > 0:
        symbols = rule_set.symbols
        console.print()
        console.print(
            f"Symbols: open={symbols.open!r} close={symbols.close!r} reset={symbols.reset!r}"
        )
