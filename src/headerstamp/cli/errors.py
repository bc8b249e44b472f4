# topmark:header:start
#
#   project      : HeaderStamp
#   file         : errors.py
#   file_relpath : src/headerstamp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Exceptions for HeaderStamp CLI.

Usage:
    Commands call `to_cli_error` on core exceptions (see `headerstamp.errors`)
    and raise the result, so Click prints the message and exits with the
    matching code from `ExitCode`.
"""

from __future__ import annotations

import click

from headerstamp.cli.exit_codes import ExitCode
from headerstamp.errors import (
    BatchError,
    ConfigurationError,
    HeaderStampError,
    ResourceLoadError,
)


class HeaderStampCliError(click.ClickException):
    """Base class for all HeaderStamp CLI errors."""

    exit_code = ExitCode.FAILURE


class HeaderStampUsageError(HeaderStampCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class HeaderStampConfigError(HeaderStampCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class HeaderStampFileNotFoundError(HeaderStampCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HeaderStampPermissionDeniedError(HeaderStampCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class HeaderStampIOError(HeaderStampCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class HeaderStampEncodingError(HeaderStampCliError):
    """Error for text decoding/encoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


def _for_cause(cause: BaseException | None, message: str) -> HeaderStampCliError:
    if isinstance(cause, UnicodeError):
        return HeaderStampEncodingError(message)
    if isinstance(cause, FileNotFoundError):
        return HeaderStampFileNotFoundError(message)
    if isinstance(cause, PermissionError):
        return HeaderStampPermissionDeniedError(message)
    return HeaderStampIOError(message)


def to_cli_error(exc: HeaderStampError) -> HeaderStampCliError:
    """Map a core exception onto the CLI error carrying the right exit code."""
    if isinstance(exc, ConfigurationError):
        return HeaderStampConfigError(exc.message)
    if isinstance(exc, BatchError):
        return _for_cause(exc.cause, exc.message)
    if isinstance(exc, ResourceLoadError):
        return _for_cause(exc.__cause__, exc.message)
    return HeaderStampCliError(exc.message)
