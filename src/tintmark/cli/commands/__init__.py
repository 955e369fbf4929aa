# tintmark:header:start
#
#   project      : TintMark
#   file         : __init__.py
#   file_relpath : src/tintmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Click subcommands of the TintMark CLI."""
