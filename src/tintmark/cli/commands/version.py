# tintmark:header:start
#
#   project      : TintMark
#   file         : version.py
#   file_relpath : src/tintmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""TintMark `version` command.

Prints the current TintMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from tintmark.cli.cmd_common import get_effective_verbosity
from tintmark.cli.console import ClickConsole
from tintmark.cli.options import OutputFormat
from tintmark.constants import TINTMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of TintMark.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([v.value for v in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: str = OutputFormat.TEXT.value) -> None:
    """Show the current version of TintMark.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj.get("console") or ClickConsole()

    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps({"version": TINTMARK_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("TintMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TINTMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(TINTMARK_VERSION, bold=True))
