# topmark:header:start
#
#   project      : HeaderStamp
#   file         : options.py
#   file_relpath : src/headerstamp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Common CLI option utilities for the HeaderStamp command line.

This module centralizes reusable options (verbosity, config discovery, header
resource, targets) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from headerstamp.cli.errors import HeaderStampUsageError
from headerstamp.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        HeaderStampUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HeaderStampUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def trap_underscored_option(ctx: click.Context, param: click.Option, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --to_file).

    Runs during option parsing (is_eager=True) so we can show a friendly hint
    instead of the generic "No such option" error.
    """
    name = param.name
    src = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return

    bad = param.opts[0] if param.opts else "--?"
    suggestion = bad.replace("_", "-")
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {suggestion}?")


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so Click's parameter
    source tracking never overlaps with the real option's destination.

    Args:
        *names: One or more underscored long option names to trap,
            e.g. "--to_file".

    Returns:
        A decorator compatible with Click's option stacking.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    dest = f"_trap_{names[0].lstrip('-').replace('-', '_')}"

    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v lists processed files, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore headerstamp.toml / pyproject.toml in the current directory.",
    )(f)
    f = underscored_trap_option("--no_config")(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Config file(s) to load and merge (replaces discovery).",
    )(f)

    return f


def common_injection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the header, target and behavior options shared by both variants.

    Unset flags default to ``None`` so configured values survive.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--file",
        "-f",
        "header_file",
        metavar="PATH",
        help="Header file to prepend.",
    )(f)
    f = click.option(
        "--encoding",
        metavar="CODEC",
        help="Encoding of the header file (default: utf-8).",
    )(f)
    f = click.option(
        "--to-file",
        "to_file",
        metavar="PATH",
        help="Single target file (exclusive with --dir).",
    )(f)
    f = underscored_trap_option("--to_file")(f)
    f = click.option(
        "--dir",
        "dirs",
        multiple=True,
        metavar="DIR",
        help="Base directory of a file set (repeatable).",
    )(f)
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="File set filter: keep only files matching these glob patterns.",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="File set filter: remove files matching these glob patterns.",
    )(f)
    f = click.option(
        "--default-excludes/--no-default-excludes",
        "default_excludes",
        default=None,
        help="Skip VCS and editor files in file sets (default: on).",
    )(f)
    f = underscored_trap_option("--default_excludes", "--no_default_excludes")(f)
    f = click.option(
        "--eol",
        metavar="TOKEN",
        help="Line separator: cr/mac, lf/unix, crlf/dos; anything else is the platform default.",
    )(f)
    f = click.option(
        "--fail-on-error/--no-fail-on-error",
        "fail_on_error",
        default=None,
        help="Abort at the first failing target (default) or report and continue.",
    )(f)
    f = underscored_trap_option("--fail_on_error", "--no_fail_on_error")(f)
    f = click.option(
        "--preserve-last-modified/--no-preserve-last-modified",
        "preserve_last_modified",
        default=None,
        help="Restore each target's modification time after writing.",
    )(f)
    f = underscored_trap_option("--preserve_last_modified")(f)

    return f
