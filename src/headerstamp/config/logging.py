# topmark:header:start
#
#   project      : HeaderStamp
#   file         : logging.py
#   file_relpath : src/headerstamp/config/logging.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Logging for HeaderStamp: a TRACE level, colored stderr output, env override.

The injectors report per-file progress at INFO or DEBUG (depending on the
``verbose`` setting) and dump effective configuration at TRACE. The level is
chosen by the CLI from ``-v``/``-q`` unless ``HEADERSTAMP_LOG_LEVEL`` is set.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "HEADERSTAMP_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Name of the root handler installed by `setup_logging`
HANDLER_NAME: Final[str] = "headerstamp"

LEVELS_BY_NAME: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

logging.addLevelName(TRACE_LEVEL, "TRACE")


class HeaderStampLogger(logging.Logger):
    """`logging.Logger` with a `trace` method below DEBUG."""

    def trace(self, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(HeaderStampLogger)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record by the first style whose threshold it reaches."""

    STYLES: tuple[tuple[int, Callable[[str], str]], ...] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        text: str = super().format(record)
        for threshold, style in self.STYLES:
            if record.levelno >= threshold:
                return style(text)
        return chalk.dim(text)


def parse_log_level(text: str) -> int | None:
    """Parse a level name (case-insensitive) or a numeric level.

    Returns:
        int | None: The level, or ``None`` when ``text`` is not recognized.
    """
    token: str = text.strip().upper()
    if token.isdigit():
        return int(token)
    return LEVELS_BY_NAME.get(token)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``HEADERSTAMP_LOG_LEVEL``, if any."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    level: int | None = parse_log_level(raw)
    if level is None:
        logging.getLogger(__name__).warning(
            "Ignoring unknown %s value %r", LOG_LEVEL_ENV_VAR, raw
        )
    return level


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Install (or replace) HeaderStamp's colored handler on the root logger.

    Handlers installed by others are left alone; only a previous HeaderStamp
    handler is swapped out, so repeated calls never duplicate output.

    Args:
        level (int | None): Root level. ``None`` consults the environment and
            falls back to WARNING.
        stream (TextIO | None): Destination; the current ``sys.stderr`` by default.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> HeaderStampLogger:
    """Return the `HeaderStampLogger` called ``name``."""
    return cast("HeaderStampLogger", logging.getLogger(name))
