# topmark:header:start
#
#   project      : HeaderStamp
#   file         : version.py
#   file_relpath : src/headerstamp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp `version` command.

Prints the current HeaderStamp version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from headerstamp.cli.cmd_common import get_effective_verbosity
from headerstamp.constants import HEADERSTAMP_VERSION


@click.command(
    name="version",
    help="Show the current version of HeaderStamp.",
)
def version_command() -> None:
    """Show the current version of HeaderStamp."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)

    if get_effective_verbosity(ctx) <= logging.INFO:
        click.secho("HeaderStamp version:", bold=True, underline=True)
        click.echo(f"    {click.style(HEADERSTAMP_VERSION, bold=True)}")
    else:
        click.secho(HEADERSTAMP_VERSION, bold=True)
