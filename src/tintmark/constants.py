# tintmark:header:start
#
#   project      : TintMark
#   file         : constants.py
#   file_relpath : src/tintmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""TintMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TINTMARK_VERSION: str = get_version("tintmark")

# Rule file looked up by the CLI when --rules is not given.
DEFAULT_RULES_FILE_NAME: str = "tintmark.toml"
