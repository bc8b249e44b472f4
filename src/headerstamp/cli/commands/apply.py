# topmark:header:start
#
#   project      : HeaderStamp
#   file         : apply.py
#   file_relpath : src/headerstamp/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp `apply` and `apply-tagged` commands.

``apply`` prepends the header file to each selected target, transcoding the
header to ``--to-encoding``. ``apply-tagged`` is meant for files that start with
a language-open marker (``<?php`` by default): the first marker line is removed
and re-emitted above the header.

Both commands build the effective configuration from defaults, the discovered
or explicit config files, and the CLI overrides, then run the injector once.
"""

from __future__ import annotations

from typing import Any

import click

from headerstamp.cli.cmd_common import build_config_common, run_injector
from headerstamp.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_injection_options,
)
from headerstamp.config.logging import get_logger
from headerstamp.injector import HeaderInjector
from headerstamp.tagged import TagStrippingInjector

logger = get_logger(__name__)


def _overrides(
    *,
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
) -> dict[str, Any]:
    return {
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
    }


@click.command(
    name="apply",
    help="Prepend the header file to the target file or file sets.",
    epilog=(
        "Examples:\n\n"
        "  headerstamp apply -f LICENSE --to-file src/app.py\n\n"
        "  headerstamp apply -f LICENSE --dir src -i '*.py' --eol lf"
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_injection_options
@click.option(
    "--to-encoding",
    "to_encoding",
    metavar="CODEC",
    help="Encoding of the targets; the header is transcoded to it (default: utf-8).",
)
def apply_command(
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
) -> None:
    """Prepend the header file to every selected target."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    overrides: dict[str, Any] = _overrides(
        header_file=header_file,
        encoding=encoding,
        to_file=to_file,
        dirs=dirs,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        default_excludes=default_excludes,
        eol=eol,
        fail_on_error=fail_on_error,
        preserve_last_modified=preserve_last_modified,
    )
    overrides["to_encoding"] = to_encoding

    config = build_config_common(
        ctx=ctx, no_config=no_config, config_paths=config_paths, overrides=overrides
    )
    run_injector(HeaderInjector(config))


@click.command(
    name="apply-tagged",
    help=(
        "Prepend the header file below the open tag of each target. "
        "The first line containing the tag is removed and the tag is re-emitted "
        "in front of the header."
    ),
    epilog=(
        "Warning: any code sharing the tag's line is removed along with it.\n\n"
        "Example:\n\n"
        "  headerstamp apply-tagged -f LICENSE --dir www -i '*.php'"
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_injection_options
@click.option(
    "--open-tag",
    "open_tag",
    metavar="TAG",
    help="Open tag to move above the header (default: <?php).",
)
def apply_tagged_command(
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
    open_tag: str | None,
) -> None:
    """Prepend the header file below the open tag of every selected target."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    overrides: dict[str, Any] = _overrides(
        header_file=header_file,
        encoding=encoding,
        to_file=to_file,
        dirs=dirs,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        default_excludes=default_excludes,
        eol=eol,
        fail_on_error=fail_on_error,
        preserve_last_modified=preserve_last_modified,
    )
    overrides["open_tag"] = open_tag

    config = build_config_common(
        ctx=ctx, no_config=no_config, config_paths=config_paths, overrides=overrides
    )
    if config.to_encoding != config.encoding:
        logger.debug(
            "apply-tagged does not transcode; to_encoding=%s is ignored", config.to_encoding
        )
    run_injector(TagStrippingInjector(config))
