# tintmark:header:start
#
#   project      : TintMark
#   file         : render.py
#   file_relpath : src/tintmark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""TintMark `render` command.

Renders marked-up text through a rule set and writes the result to stdout.
Texts come from the command line, or from STDIN when none is given or a
text is ``-``. When color output is disabled (``--no-color``, ``NO_COLOR``,
or stdout is not a terminal) the markup is stripped instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tintmark.cli.cmd_common import build_rule_set, collect_texts
from tintmark.cli.console import ClickConsole
from tintmark.cli.options import common_rule_set_options
from tintmark.config.logging import get_logger
from tintmark.rules.renderer import RESET_RULE_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from tintmark.rules.rule_set import RuleSet

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render marked-up TEXT as ANSI escape sequences.",
    epilog="""
Example:

    tintmark render --rules tintmark.toml "{%redError:%} file not found"

Reads STDIN when no TEXT is given or TEXT is '-'.
""",
)
@click.argument("texts", nargs=-1, metavar="[TEXT]...")
@common_rule_set_options
@click.option(
    "--sep",
    default="\n",
    show_default=repr("\n"),
    help="Separator written between texts.",
)
@click.option(
    "--no-newline",
    "-n",
    "no_newline",
    is_flag=True,
    help="Do not write a trailing newline.",
)
def render_command(
    *,
    texts: tuple[str, ...],
    rules_file: Path | None,
    after_policy: str | None,
    open_symbol: str | None,
    close_symbol: str | None,
    reset_symbol: str | None,
    sep: str,
    no_newline: bool,
) -> None:
    """Render each text through the rule set.

    Args:
        texts (tuple[str, ...]): Marked-up texts (``-`` reads STDIN).
        rules_file (Path | None): TOML rule file.
        after_policy (str | None): Default after policy override.
        open_symbol (str | None): Open delimiter override.
        close_symbol (str | None): Close delimiter override.
        reset_symbol (str | None): Reset delimiter override.
        sep (str): Separator written between texts.
        no_newline (bool): Suppress the trailing newline.
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
    if rule_set.names == (RESET_RULE_NAME,):
        console.warn("No rules defined; only the reset marker is recognized.")
    inputs: list[str] = collect_texts(texts)
    logger.debug("Rendering %d text(s), color=%s", len(inputs), color_enabled)

    render = rule_set.apply if color_enabled else rule_set.strip
    output: str = sep.join(render(text) for text in inputs)
    console.print(output, nl=not no_newline and not output.endswith("\n"))
