# topmark:header:start
#
#   project      : HeaderStamp
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Configuration layering: defaults, TOML files, discovery and CLI overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from headerstamp.config import Config, MutableConfig
from headerstamp.errors import ConfigurationError
from headerstamp.targets import FileSetSpec

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """Freezing an empty builder applies the runtime defaults."""
    config: Config = MutableConfig().freeze()
    assert config.encoding == "utf-8"
    assert config.to_encoding == "utf-8"
    assert config.fail_on_error is True
    assert config.preserve_last_modified is False
    assert config.verbose is False
    assert config.open_tag == "<?php"
    assert config.eol is None
    assert config.header_file is None
    assert config.file_sets == ()


def test_from_toml_file_resolves_paths_against_config_dir(tmp_path: Path) -> None:
    """Relative paths in a config file are anchored at that file's directory."""
    cfg: Path = _write(
        tmp_path / "proj" / "headerstamp.toml",
        """
file = "LICENSE"
eol = "unix"
encoding = "latin-1"
fail_on_error = false

[[fileset]]
dir = "src"
include = ["*.php"]
exclude = ["vendor/"]
default_excludes = false

[[fileset]]
dir = "lib"
""",
    )
    layer = MutableConfig.from_toml_file(cfg)
    assert layer is not None
    base: Path = cfg.parent.resolve()
    assert layer.header_file == base / "LICENSE"
    assert layer.eol == "unix"
    assert layer.encoding == "latin-1"
    assert layer.fail_on_error is False
    assert layer.to_encoding is None
    assert layer.file_sets == [
        FileSetSpec(
            base_dir=base / "src",
            includes=("*.php",),
            excludes=("vendor/",),
            default_excludes=False,
        ),
        FileSetSpec(base_dir=base / "lib"),
    ]
    assert layer.config_files == [cfg.resolve()]


def test_fileset_without_dir_is_rejected(tmp_path: Path) -> None:
    """Every file set needs a base directory."""
    cfg: Path = _write(tmp_path / "headerstamp.toml", '[[fileset]]\ninclude = ["*"]\n')
    with pytest.raises(ConfigurationError, match="needs a 'dir'"):
        MutableConfig.from_toml_file(cfg)


def test_malformed_toml_is_configuration_error(tmp_path: Path) -> None:
    """Parse errors surface as configuration errors."""
    cfg: Path = _write(tmp_path / "headerstamp.toml", "file = \n")
    with pytest.raises(ConfigurationError, match="Error decoding TOML"):
        MutableConfig.from_toml_file(cfg)


def test_pyproject_section(tmp_path: Path) -> None:
    """``[tool.headerstamp]`` is read from pyproject.toml."""
    cfg: Path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.headerstamp]\nfile = "H"\nto_file = "a.txt"\n',
    )
    layer = MutableConfig.from_toml_file(cfg)
    assert layer is not None
    assert layer.header_file == tmp_path.resolve() / "H"
    assert layer.to_file == tmp_path.resolve() / "a.txt"


def test_pyproject_without_section(tmp_path: Path) -> None:
    """A pyproject.toml without our table contributes nothing."""
    cfg: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableConfig.from_toml_file(cfg) is None
    assert MutableConfig.discover(tmp_path) == []


def test_discover_prefers_dedicated_file(tmp_path: Path) -> None:
    """headerstamp.toml wins over pyproject.toml."""
    _write(tmp_path / "pyproject.toml", '[tool.headerstamp]\nfile = "A"\n')
    dedicated: Path = _write(tmp_path / "headerstamp.toml", 'file = "B"\n')
    assert MutableConfig.discover(tmp_path) == [dedicated]


def test_load_merged_applies_files_in_order(tmp_path: Path) -> None:
    """Later config files override earlier ones key by key."""
    first: Path = _write(tmp_path / "a.toml", 'file = "A"\neol = "cr"\n')
    second: Path = _write(tmp_path / "b.toml", 'eol = "crlf"\nverbose = true\n')
    merged: Config = MutableConfig.load_merged(config_paths=[first, second]).freeze()
    assert merged.header_file == tmp_path.resolve() / "A"
    assert merged.eol == "crlf"
    assert merged.verbose is True
    assert merged.config_files == (first.resolve(), second.resolve())


def test_apply_args_override_config(tmp_path: Path) -> None:
    """CLI values override configured ones; unset values inherit."""
    base = MutableConfig.from_defaults()
    base.eol = "cr"
    base.encoding = "latin-1"
    merged: Config = base.apply_args(
        {"eol": "lf", "file": "H", "to_file": "t.txt", "preserve_last_modified": True},
        cwd=tmp_path,
    ).freeze()
    assert merged.eol == "lf"
    assert merged.encoding == "latin-1"
    assert merged.header_file == (tmp_path / "H").resolve()
    assert merged.to_file == (tmp_path / "t.txt").resolve()
    assert merged.preserve_last_modified is True


def test_cli_target_replaces_configured_file_sets(tmp_path: Path) -> None:
    """A --to-file on the command line replaces configured file sets."""
    base = MutableConfig.from_defaults()
    base.file_sets = [FileSetSpec(base_dir=tmp_path)]
    merged: Config = base.apply_args({"to_file": "t.txt"}, cwd=tmp_path).freeze()
    assert merged.file_sets == ()
    assert merged.to_file == (tmp_path / "t.txt").resolve()


def test_cli_dirs_replace_configured_file(tmp_path: Path) -> None:
    """--dir on the command line replaces a configured destination file."""
    base = MutableConfig.from_defaults()
    base.to_file = tmp_path / "t.txt"
    merged: Config = base.apply_args(
        {"dirs": ["src", "lib"], "include": ["*.php"], "default_excludes": False},
        cwd=tmp_path,
    ).freeze()
    assert merged.to_file is None
    assert merged.file_sets == (
        FileSetSpec(
            base_dir=(tmp_path / "src").resolve(), includes=("*.php",), default_excludes=False
        ),
        FileSetSpec(
            base_dir=(tmp_path / "lib").resolve(), includes=("*.php",), default_excludes=False
        ),
    )


def test_thaw_freeze_roundtrip(tmp_path: Path) -> None:
    """Thawing and re-freezing yields an equal snapshot."""
    config: Config = MutableConfig(
        header_file=tmp_path / "H", eol="dos", fail_on_error=False
    ).freeze()
    assert config.thaw().freeze() == config


def test_to_toml_dict_exports_effective_values(tmp_path: Path) -> None:
    """The export lists the resolved EOL policy and the file sets."""
    config: Config = MutableConfig(
        header_file=tmp_path / "H",
        eol="DOS",
        file_sets=[FileSetSpec(base_dir=tmp_path, includes=("*.php",))],
    ).freeze()
    data = config.to_toml_dict()
    assert data["file"] == str(tmp_path / "H")
    assert data["eol"] == "crlf"
    assert data["to_file"] is None
    assert data["fileset"] == [
        {"dir": str(tmp_path), "include": ["*.php"], "exclude": [], "default_excludes": True}
    ]
