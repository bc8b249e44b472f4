# topmark:header:start
#
#   project      : HeaderStamp
#   file         : show_config.py
#   file_relpath : src/headerstamp/cli/commands/show_config.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp `show-config` command.

Emits the effective configuration as TOML after applying defaults, the
discovered or explicit config files, and any CLI overrides. The output is
wrapped between `# === BEGIN ===` and `# === END ===` markers for easy parsing
in tests or tooling. Nothing is validated and no file is touched.
"""

from __future__ import annotations

from typing import Any

import click

from headerstamp.cli.cmd_common import build_config_common
from headerstamp.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_injection_options,
)
from headerstamp.config.io import to_toml
from headerstamp.config.logging import get_logger
from headerstamp.constants import VALUE_NOT_SET

logger = get_logger(__name__)


@click.command(
    name="show-config",
    help="Show the merged HeaderStamp configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_injection_options
@click.option("--to-encoding", "to_encoding", metavar="CODEC", help="Encoding of the targets.")
@click.option("--open-tag", "open_tag", metavar="TAG", help="Open tag for apply-tagged.")
def show_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    header_file: str | None,
    encoding: str | None,
    to_file: str | None,
    dirs: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    default_excludes: bool | None,
    eol: str | None,
    fail_on_error: bool | None,
    preserve_last_modified: bool | None,
    to_encoding: str | None,
    open_tag: str | None,
) -> None:
    """Print the merged configuration as TOML."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    overrides: dict[str, Any] = {
        "file": header_file,
        "encoding": encoding,
        "to_file": to_file,
        "dirs": list(dirs),
        "include": list(include_patterns),
        "exclude": list(exclude_patterns),
        "default_excludes": default_excludes,
        "eol": eol,
        "fail_on_error": fail_on_error,
        "preserve_last_modified": preserve_last_modified,
        "to_encoding": to_encoding,
        "open_tag": open_tag,
    }
    config = build_config_common(
        ctx=ctx, no_config=no_config, config_paths=config_paths, overrides=overrides
    )

    sources: str = ", ".join(str(p) for p in config.config_files) or VALUE_NOT_SET
    click.echo(f"# Config files: {sources}")
    click.echo("# === BEGIN ===")
    click.echo(to_toml(config.to_toml_dict()).rstrip("\n"))
    click.echo("# === END ===")
