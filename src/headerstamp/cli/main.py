# topmark:header:start
#
#   project      : HeaderStamp
#   file         : main.py
#   file_relpath : src/headerstamp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp command-line entry point.

Key ideas:
- Group-level options (verbosity) are initialized once and placed into ``ctx.obj``.
- Logging is configured from ``HEADERSTAMP_LOG_LEVEL`` when set, else from ``-v``/``-q``.
- Subcommands share option decorators and helpers from `headerstamp.cli.options`
  and `headerstamp.cli.cmd_common`.
"""

from __future__ import annotations

import click

from headerstamp.cli.commands.apply import apply_command, apply_tagged_command
from headerstamp.cli.commands.show_config import show_config_command
from headerstamp.cli.commands.version import version_command
from headerstamp.cli.options import (
    CONTEXT_SETTINGS,
    common_verbose_options,
    resolve_verbosity,
)
from headerstamp.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared verbosity state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="HeaderStamp: prepend a header file to source files.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the HeaderStamp CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'headerstamp apply -f HEADER --to-file FILE' to stamp a file.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_config_command)

cli.add_command(apply_command)

cli.add_command(apply_tagged_command)

if __name__ == "__main__":
    cli()
