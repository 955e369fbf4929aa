# tintmark:header:start
#
#   project      : TintMark
#   file         : errors.py
#   file_relpath : src/tintmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""TintMark exception hierarchy.

Keep this module small and dependency-free: it is imported by the rule
compiler, the TOML loader and the CLI alike. CLI-facing errors (with exit
codes) live in `tintmark.cli.errors` and wrap these.
"""

from __future__ import annotations


class TintmarkError(Exception):
    """Base exception for all TintMark library errors."""


class InvalidRuleError(TintmarkError, ValueError):
    """Raised when a rule definition (or one of its parts) is not record-shaped.

    Attributes:
        rule_name (str | None): Name of the offending rule, when known.
    """

    def __init__(self, message: str, *, rule_name: str | None = None) -> None:
        self.rule_name = rule_name
        if rule_name is not None:
            message = f"Invalid rule {rule_name!r}: {message}"
        super().__init__(message)


class InvalidSymbolsError(TintmarkError, ValueError):
    """Raised when markup delimiters are empty, not strings, or collide."""


class InvalidOptionError(TintmarkError, ValueError):
    """Raised for unrecognized rule set construction options."""


class RuleFileError(TintmarkError):
    """Raised when a TOML rule file cannot be read or has the wrong shape."""
