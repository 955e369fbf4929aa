# tintmark:header:start
#
#   project      : TintMark
#   file         : io.py
#   file_relpath : src/tintmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tintmark:header:end

"""Load rule sets from TOML.

A rule file looks like:

```toml
[options]
after = "auto"

[options.symbols]
open = "<"
close = ">"

[rules.red]
fg = "red"

[rules.warn.inside]
fg = [208]
enable = ["bold", "underline"]
```

The same tables may live under ``[tool.tintmark]`` in ``pyproject.toml``.
Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tintmark.config.keys import Toml
from tintmark.config.logging import get_logger
from tintmark.core.errors import RuleFileError
from tintmark.rules.rule_set import RuleSet

if TYPE_CHECKING:
    from pathlib import Path

    from tintmark.config.logging import TintmarkLogger

logger: TintmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        RuleFileError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise RuleFileError(f"Error decoding TOML from {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem (UTF-8).

    Raises:
        RuleFileError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuleFileError(f"Error loading TOML from {path}: {exc}") from exc
    return parse_toml_text(text, source=str(path))


def extract_rule_tables(data: TomlTable, *, source: str = "<string>") -> TomlTable:
    """Return the TintMark tables of a parsed document.

    Looks under ``[tool.tintmark]`` first (``pyproject.toml``), then at the
    document root.

    Raises:
        RuleFileError: If ``rules`` or ``options`` is present but not a table.
    """
    tool: object = data.get(Toml.SECTION_TOOL)
    if is_toml_table(tool) and is_toml_table(tool.get(Toml.SECTION_TINTMARK)):
        data = cast("TomlTable", tool[Toml.SECTION_TINTMARK])

    rules: object = data.get(Toml.SECTION_RULES, {})
    options: object = data.get(Toml.SECTION_OPTIONS, {})
    if not is_toml_table(rules):
        raise RuleFileError(f"{source}: [{Toml.SECTION_RULES}] must be a table")
    if not is_toml_table(options):
        raise RuleFileError(f"{source}: [{Toml.SECTION_OPTIONS}] must be a table")
    if not rules:
        logger.warning("%s: no [%s] table found", source, Toml.SECTION_RULES)
    return {Toml.SECTION_RULES: rules, Toml.SECTION_OPTIONS: options}


def rule_set_from_dict(data: TomlTable, *, source: str = "<string>") -> RuleSet:
    """Build a `RuleSet` from a parsed rule document."""
    tables: TomlTable = extract_rule_tables(data, source=source)
    options: TomlTable = tables[Toml.SECTION_OPTIONS]
    return RuleSet(
        tables[Toml.SECTION_RULES],
        after=options.get(Toml.KEY_AFTER),
        symbols=options.get(Toml.SECTION_SYMBOLS),
    )


def load_rule_set(path: Path) -> RuleSet:
    """Load a rule file (``tintmark.toml`` or ``pyproject.toml``) into a `RuleSet`."""
    logger.debug("Loading rule set from %s", path)
    return rule_set_from_dict(load_toml_dict(path), source=str(path))
