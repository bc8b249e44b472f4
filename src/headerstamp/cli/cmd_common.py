# topmark:header:start
#
#   project      : HeaderStamp
#   file         : cmd_common.py
#   file_relpath : src/headerstamp/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
building the effective configuration and running an injector with core
errors mapped onto CLI exit codes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource

from headerstamp.cli.errors import to_cli_error
from headerstamp.config.logging import get_logger
from headerstamp.config.model import MutableConfig
from headerstamp.errors import HeaderStampError

if TYPE_CHECKING:
    from headerstamp.config.model import Config
    from headerstamp.injector import HeaderInjector
    from headerstamp.outcomes import RunReport

logger = get_logger(__name__)

# On/off flags whose unset state must inherit the configured value
TRI_STATE_FLAGS: tuple[str, ...] = ("default_excludes", "fail_on_error", "preserve_last_modified")


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity level resolved by the group."""
    obj: dict[str, Any] = ctx.obj or {}
    return int(obj.get("verbosity_level", logging.WARNING))


def build_config_common(
    *,
    ctx: click.Context,
    no_config: bool,
    config_paths: list[str] | tuple[str, ...],
    overrides: dict[str, Any],
) -> Config:
    """Build the effective `Config` for a command.

    Layers: defaults, then ``--config`` files (or the file discovered in the
    CWD unless ``--no-config``), then the CLI ``overrides``. A group-level
    ``-v`` switches the task to verbose unless ``verbose`` is overridden.

    Raises:
        click.ClickException: When configuration loading fails.
    """
    overrides = {
        key: (
            None
            if key in TRI_STATE_FLAGS
            and ctx.get_parameter_source(key) is not ParameterSource.COMMANDLINE
            else value
        )
        for key, value in overrides.items()
    }
    cwd: Path = Path.cwd()
    if get_effective_verbosity(ctx) <= logging.INFO and overrides.get("verbose") is None:
        overrides = {**overrides, "verbose": True}
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_paths=[Path(p) for p in config_paths],
            discover_in=None if no_config else cwd,
        )
        draft = draft.apply_args(overrides, cwd=cwd)
    except HeaderStampError as e:
        raise to_cli_error(e) from e
    config: Config = draft.freeze()
    logger.trace("Effective config: %s", config)
    return config


def run_injector(injector: HeaderInjector) -> RunReport:
    """Run ``injector`` and echo the run summary.

    Raises:
        click.ClickException: Carrying the exit code matching the core error.
    """
    ctx = click.get_current_context()
    try:
        report: RunReport = injector.run()
    except HeaderStampError as e:
        raise to_cli_error(e) from e
    if get_effective_verbosity(ctx) < logging.ERROR:
        click.echo(report.summary())
    return report
