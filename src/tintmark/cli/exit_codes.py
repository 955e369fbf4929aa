# tintmark:header:start
#
#   project      : TintMark
#   file         : exit_codes.py
#   file_relpath : src/tintmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Standardized exit codes used by the TintMark CLI.

TintMark follows the BSD `sysexits` convention where practical so other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TintMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input could not be decoded. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Rule file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid rule file, rule definition or option. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
