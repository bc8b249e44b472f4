# topmark:header:start
#
#   project      : HeaderStamp
#   file         : errors.py
#   file_relpath : src/headerstamp/errors.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Exceptions raised by the HeaderStamp core.

Usage:
    `ConfigurationError` and `ResourceLoadError` are always fatal and are raised
    before any target is touched. `TargetIOError` describes a single target
    failure; whether it ends the run depends on the failure policy. When the run
    aborts, the injector raises `BatchError` chained to the underlying cause.

The CLI layer translates these into Click exceptions with exit codes
(see `headerstamp.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class HeaderStampError(Exception):
    """Base class for all HeaderStamp errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class ConfigurationError(HeaderStampError):
    """Missing or invalid attributes, detected before any file I/O."""


class ResourceLoadError(HeaderStampError):
    """The header resource could not be read or decoded."""


class TargetIOError(HeaderStampError):
    """Reading, transforming or writing a single target failed.

    Attributes:
        path (Path): The offending target.
        cause (BaseException): The underlying I/O or codec error.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Cannot update file {path}: {cause}")
        self.path: Path = path
        self.cause: BaseException = cause


class BatchError(HeaderStampError):
    """The batch was aborted because a target failed under the abort policy.

    Attributes:
        path (Path): The target at which the batch stopped.
        cause (BaseException): The underlying I/O or codec error.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Cannot update file! {path}: {cause}")
        self.path: Path = path
        self.cause: BaseException = cause
