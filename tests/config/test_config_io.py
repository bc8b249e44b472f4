# topmark:header:start
#
#   project      : HeaderStamp
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""TOML I/O helpers and value getters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from headerstamp.config.io import (
    extract_section,
    get_bool_value_or_none,
    get_str_list_value,
    get_string_value_or_none,
    get_table_list,
    load_toml_dict,
    to_toml,
)
from headerstamp.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """An unreadable file is a configuration error."""
    with pytest.raises(ConfigurationError, match="Error loading TOML"):
        load_toml_dict(tmp_path / "missing.toml")


def test_load_toml_dict_returns_plain_types(tmp_path: Path) -> None:
    """Parsed documents are unwrapped into builtin containers."""
    path: Path = tmp_path / "x.toml"
    path.write_text('a = "b"\n[t]\nn = [1, 2]\n', encoding="utf-8")
    data: dict[str, Any] = load_toml_dict(path)
    assert data == {"a": "b", "t": {"n": [1, 2]}}
    assert type(data["t"]) is dict


def test_extract_section() -> None:
    """Only pyproject documents are nested under [tool.headerstamp]."""
    doc: dict[str, Any] = {"tool": {"headerstamp": {"eol": "lf"}}, "eol": "cr"}
    assert extract_section(doc, is_pyproject=True) == {"eol": "lf"}
    assert extract_section(doc, is_pyproject=False) is doc
    assert extract_section({"tool": {}}, is_pyproject=True) is None


def test_extract_section_dedicated_file_table() -> None:
    """A dedicated file may wrap its settings in a [headerstamp] table."""
    doc: dict[str, Any] = {"headerstamp": {"eol": "lf"}}
    assert extract_section(doc, is_pyproject=False) == {"eol": "lf"}


def test_scalar_getters() -> None:
    """Scalars are coerced where sensible; other types read as unset."""
    table: dict[str, Any] = {"s": "x", "n": 3, "b": True, "l": [1]}
    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "n") == "3"
    assert get_string_value_or_none(table, "l") is None
    assert get_string_value_or_none(table, "missing") is None
    assert get_bool_value_or_none(table, "b") is True
    assert get_bool_value_or_none(table, "n") is True
    assert get_bool_value_or_none(table, "s") is None


def test_get_str_list_value_warns_on_bad_entries(caplog: pytest.LogCaptureFixture) -> None:
    """Non-string entries are dropped with a warning."""
    caplog.set_level(logging.WARNING)
    assert get_str_list_value({"k": ["a", 1, "b"]}, "k") == ["a", "b"]
    assert get_str_list_value({"k": "solo"}, "k") == ["solo"]
    assert get_str_list_value({"k": 5}, "k") == []
    assert "Ignoring non-string entry" in caplog.text


def test_get_table_list() -> None:
    """A single table is accepted as a one-element array."""
    assert get_table_list({"fs": {"dir": "a"}}, "fs") == [{"dir": "a"}]
    assert get_table_list({"fs": [{"dir": "a"}, "junk"]}, "fs") == [{"dir": "a"}]
    assert get_table_list({}, "fs") == []


def test_to_toml_drops_none() -> None:
    """TOML has no null; unset values are omitted from the rendering."""
    rendered: str = to_toml({"file": None, "eol": "lf", "fileset": [{"dir": "src"}]})
    parsed: dict[str, Any] = tomlkit.parse(rendered).unwrap()
    assert parsed == {"eol": "lf", "fileset": [{"dir": "src"}]}
