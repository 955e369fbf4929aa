# tintmark:header:start
#
#   project      : TintMark
#   file         : options.py
#   file_relpath : src/tintmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Common CLI option utilities for the TintMark CLI.

This module centralizes reusable options (verbosity, color, rule file) and
their resolution logic, so commands and groups can stay thin. The helpers
here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from tintmark.cli.errors import TintmarkUsageError
from tintmark.config.logging import TRACE_LEVEL, get_logger
from tintmark.rules.compiler import AfterPolicy

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        TintmarkUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TintmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """Color output modes for the CLI."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputFormat(str, Enum):
    """Output formats for listing commands."""

    TEXT = "text"
    JSON = "json"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. "json".
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_rule_set_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the rule file, after policy and delimiter options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.

    Behavior:
        ``--rules`` names a TOML rule file (``tintmark.toml`` in the working
        directory is used when present). ``--after`` and the delimiter
        options override the file's ``[options]`` table.
    """
    f = click.option(
        "--rules",
        "rules_file",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="TOML rule file (default: ./tintmark.toml if it exists).",
    )(f)
    f = click.option(
        "--after",
        "after_policy",
        type=click.Choice([p.key for p in AfterPolicy], case_sensitive=False),
        default=None,
        help="Default after policy for rules without explicit close codes.",
    )(f)
    f = click.option(
        "--open",
        "open_symbol",
        default=None,
        help="Delimiter that opens a rule (default '{%').",
    )(f)
    f = click.option(
        "--close",
        "close_symbol",
        default=None,
        help="Delimiter that closes the innermost rule (default '%}').",
    )(f)
    f = click.option(
        "--reset-symbol",
        "reset_symbol",
        default=None,
        help="Delimiter that resets all styling (default '%@').",
    )(f)
    return f
