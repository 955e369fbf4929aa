# tintmark:header:start
#
#   project      : TintMark
#   file         : cmd_common.py
#   file_relpath : src/tintmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
resolving verbosity, building a rule set from CLI options, and collecting
the texts to render. Library errors are translated into CLI errors here so
command bodies stay free of try/except blocks.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tintmark.cli.errors import (
    TintmarkConfigError,
    TintmarkEncodingError,
    TintmarkFileNotFoundError,
)
from tintmark.config.io import extract_rule_tables, load_toml_dict
from tintmark.config.keys import Toml
from tintmark.config.logging import get_logger
from tintmark.constants import DEFAULT_RULES_FILE_NAME
from tintmark.core.errors import TintmarkError
from tintmark.rules.rule_set import RuleSet

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tintmark.config.io import TomlTable

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order:
        1. ctx.obj["verbosity_level"] if present
        2. 0 (terse)
    """
    return int((ctx.obj or {}).get("verbosity_level", 0))


def resolve_rules_path(rules_file: Path | None) -> Path | None:
    """Return the rule file to load, if any.

    An explicit ``--rules`` path must exist. Without one, ``tintmark.toml`` in
    the working directory is used when present.

    Raises:
        TintmarkFileNotFoundError: If an explicit rule file does not exist.
    """
    if rules_file is not None:
        if not rules_file.is_file():
            raise TintmarkFileNotFoundError(f"Rule file not found: {rules_file}")
        return rules_file
    default: Path = Path.cwd() / DEFAULT_RULES_FILE_NAME
    if default.is_file():
        logger.info("Using rule file %s", default)
        return default
    return None


def build_rule_set(
    rules_file: Path | None,
    *,
    after_policy: str | None = None,
    open_symbol: str | None = None,
    close_symbol: str | None = None,
    reset_symbol: str | None = None,
) -> RuleSet:
    """Build a `RuleSet` from a rule file and CLI overrides.

    CLI values win over the file's ``[options]`` table; symbols are merged
    key by key.

    Raises:
        TintmarkFileNotFoundError: If an explicit rule file does not exist.
        TintmarkConfigError: If the rule file, a rule or an option is invalid.
    """
    path: Path | None = resolve_rules_path(rules_file)
    source: str = str(path) if path is not None else "<cli>"
    try:
        tables: TomlTable = (
            extract_rule_tables(load_toml_dict(path), source=source)
            if path is not None
            else {Toml.SECTION_RULES: {}, Toml.SECTION_OPTIONS: {}}
        )
        options: TomlTable = dict(tables[Toml.SECTION_OPTIONS])
        if after_policy is not None:
            options[Toml.KEY_AFTER] = after_policy
        symbol_overrides: dict[str, str] = {
            key: value
            for key, value in (
                ("open", open_symbol),
                ("close", close_symbol),
                ("reset", reset_symbol),
            )
            if value is not None
        }
        if symbol_overrides:
            symbols: TomlTable = dict(options.get(Toml.SECTION_SYMBOLS) or {})
            symbols.update(symbol_overrides)
            options[Toml.SECTION_SYMBOLS] = symbols
        return RuleSet(
            tables[Toml.SECTION_RULES],
            after=options.get(Toml.KEY_AFTER),
            symbols=options.get(Toml.SECTION_SYMBOLS),
        )
    except TintmarkError as exc:
        raise TintmarkConfigError(str(exc)) from exc
    except (TypeError, ValueError) as exc:
        # e.g. `symbols = "x"` in the rule file
        raise TintmarkConfigError(f"{source}: invalid [options]: {exc}") from exc


def collect_texts(texts: Sequence[str]) -> list[str]:
    """Return the texts to render: CLI arguments, or STDIN for ``-`` / none.

    Raises:
        TintmarkEncodingError: If STDIN cannot be decoded.
    """
    if texts and STDIN_SENTINEL not in texts:
        return list(texts)
    try:
        stdin_text: str = click.get_text_stream("stdin").read()
    except UnicodeDecodeError as exc:
        raise TintmarkEncodingError(f"Cannot decode STDIN: {exc}") from exc
    if not texts:
        return [stdin_text]
    return [stdin_text if t == STDIN_SENTINEL else t for t in texts]
