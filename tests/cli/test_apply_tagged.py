# topmark:header:start
#
#   project      : HeaderStamp
#   file         : test_apply_tagged.py
#   file_relpath : tests/cli/test_apply_tagged.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""CLI test: `apply-tagged` command end to end."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli_in
from tests.conftest import write_bytes

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_apply_tagged_php_files(tmp_path: Path) -> None:
    """The open tag is moved above the header in every PHP file."""
    write_bytes(tmp_path / "HEADER", b"/* (c) ACME */")
    index: Path = write_bytes(tmp_path / "www" / "index.php", b"<?php\nfoo();\n")
    lib: Path = write_bytes(tmp_path / "www" / "lib" / "util.php", b"<?php\r\nbar();")
    readme: Path = write_bytes(tmp_path / "www" / "README", b"docs")

    result: Result = run_cli_in(
        tmp_path,
        ["apply-tagged", "-f", "HEADER", "--dir", "www", "-i", "*.php", "--eol", "lf"],
    )

    assert_SUCCESS(result)
    assert index.read_bytes() == b"<?php\n/* (c) ACME */\nfoo();\n"
    assert lib.read_bytes() == b"<?php\n/* (c) ACME */\nbar();"
    assert readme.read_bytes() == b"docs"
    assert "2 file(s) updated, 0 failed" in result.output


def test_apply_tagged_custom_open_tag(tmp_path: Path) -> None:
    """--open-tag selects another marker."""
    write_bytes(tmp_path / "HEADER", b"H")
    target: Path = write_bytes(tmp_path / "page.asp", b"<%\nx")
    result: Result = run_cli_in(
        tmp_path,
        ["apply-tagged", "-f", "HEADER", "--to-file", "page.asp", "--open-tag", "<%", "--eol", "lf"],
    )
    assert_SUCCESS(result)
    assert target.read_bytes() == b"<%\nH\nx"


def test_apply_tagged_open_tag_from_config(tmp_path: Path) -> None:
    """The marker can be configured in headerstamp.toml."""
    write_bytes(tmp_path / "HEADER", b"H")
    target: Path = write_bytes(tmp_path / "t.tpl", b"{{\nbody")
    write_bytes(
        tmp_path / "headerstamp.toml",
        b'file = "HEADER"\nto_file = "t.tpl"\nopen_tag = "{{"\neol = "lf"\n',
    )
    result: Result = run_cli_in(tmp_path, ["apply-tagged"])
    assert_SUCCESS(result)
    assert target.read_bytes() == b"{{\nH\nbody"


def test_apply_tagged_requires_header(tmp_path: Path) -> None:
    """Without a header file the command fails before touching targets."""
    target: Path = write_bytes(tmp_path / "index.php", b"<?php\n")
    result: Result = run_cli_in(tmp_path, ["apply-tagged", "--to-file", "index.php"])
    assert_CONFIG_ERROR(result)
    assert "You must specify a header file to load." in result.output
    assert target.read_bytes() == b"<?php\n"
