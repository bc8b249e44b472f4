# topmark:header:start
#
#   project      : HeaderStamp
#   file         : io.py
#   file_relpath : src/headerstamp/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""TOML I/O and value getters for HeaderStamp configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Getters come in two flavors:
- *Unchecked* getters (``get_*_value_or_none``) return ``None`` for missing keys
  and only emit **debug** logs for values of the wrong type.
- The *checked* getter `get_str_list_value` logs a **warning** for malformed
  lists so user mistakes are surfaced without crashing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from headerstamp.config.keys import Toml
from headerstamp.config.logging import get_logger
from headerstamp.constants import CONFIG_SECTION
from headerstamp.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from headerstamp.config.logging import HeaderStampLogger

TomlTable = dict[str, Any]

logger: HeaderStampLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigurationError: When the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigurationError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigurationError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def extract_section(data: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the HeaderStamp table of a parsed document.

    ``pyproject.toml`` keeps the settings under ``[tool.headerstamp]``; a
    dedicated ``headerstamp.toml`` keeps them either at the top level or under
    a ``[headerstamp]`` table.

    Returns:
        TomlTable | None: The settings table, or ``None`` when a pyproject file
        has no ``[tool.headerstamp]`` table.
    """
    if not is_pyproject:
        nested: Any = data.get(CONFIG_SECTION)
        return nested if is_toml_table(nested) else data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not is_toml_table(tool):
        return None
    section: Any = tool.get(CONFIG_SECTION)
    return section if is_toml_table(section) else None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value, coercing scalars with ``str(...)``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value, coercing integers with ``bool(...)``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def get_str_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings; a bare string is accepted as a one-item list.

    Non-string entries are dropped with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected a list of strings for '%s', got %r; ignoring", key, value)
        return []
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string entry %r in '%s'", item, key)
    return out


def get_table_list(table: TomlTable, key: str) -> list[TomlTable]:
    """Extract an array of tables (e.g. ``[[fileset]]``); a single table is accepted."""
    value: Any | None = table.get(key)
    if value is None:
        return []
    if is_toml_table(value):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected an array of tables for '%s', got %r; ignoring", key, value)
        return []
    out: list[TomlTable] = []
    for item in cast("list[Any]", value):
        if is_toml_table(item):
            out.append(item)
        else:
            logger.warning("Ignoring non-table entry %r in '%s'", item, key)
    return out


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists (TOML has no `null`)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return tomlkit.dumps(cast("Mapping[str, Any]", cleaned))
