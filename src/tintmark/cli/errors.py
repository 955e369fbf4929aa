# tintmark:header:start
#
#   project      : TintMark
#   file         : errors.py
#   file_relpath : src/tintmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Exceptions for the TintMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`tintmark.core.errors`) are
    translated into these at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tintmark.cli.exit_codes import ExitCode


class TintmarkCliError(click.ClickException):
    """Base class for all TintMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class TintmarkUsageError(TintmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TintmarkConfigError(TintmarkCliError):
    """Error for invalid rule files, rule definitions or options."""

    exit_code = ExitCode.CONFIG_ERROR


class TintmarkFileNotFoundError(TintmarkCliError):
    """Error when the rule file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TintmarkEncodingError(TintmarkCliError):
    """Error for text decoding errors on input."""

    exit_code = ExitCode.ENCODING_ERROR
