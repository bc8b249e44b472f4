# topmark:header:start
#
#   project      : HeaderStamp
#   file         : types.py
#   file_relpath : src/headerstamp/config/types.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `EolPolicy`: the end-of-line sequence used to join header and body text.
    - `FailurePolicy`: what the batch loop does when a single target fails.

Design notes:
    - Keep side effects out of this module; it should stay dependency-free
      (stdlib only) to remain safe for low-level imports.
"""

from __future__ import annotations

import os

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class EolPolicy(str, Enum):
    """End-of-line policy selected by a case-insensitive token.

    Tokens:
        - ``cr`` / ``mac``: carriage return only.
        - ``lf`` / ``unix``: line feed only.
        - ``crlf`` / ``dos``: carriage return + line feed.
        - anything else: the platform default (``os.linesep``).
    """

    CR = "cr"
    LF = "lf"
    CRLF = "crlf"
    PLATFORM = "platform"

    @classmethod
    def from_token(cls, token: str | None) -> EolPolicy:
        """Return the policy matching ``token``; unknown tokens map to `PLATFORM`."""
        key: str = (token or "").strip().lower()
        return _EOL_ALIASES.get(key, cls.PLATFORM)

    @property
    def sequence(self) -> str:
        """The line terminator string for this policy."""
        if self is EolPolicy.CR:
            return "\r"
        if self is EolPolicy.LF:
            return "\n"
        if self is EolPolicy.CRLF:
            return "\r\n"
        return os.linesep


_EOL_ALIASES: dict[str, EolPolicy] = {
    "cr": EolPolicy.CR,
    "mac": EolPolicy.CR,
    "lf": EolPolicy.LF,
    "unix": EolPolicy.LF,
    "crlf": EolPolicy.CRLF,
    "dos": EolPolicy.CRLF,
}


def resolve_eol(token: str | None) -> str:
    r"""Resolve an EOL token to its terminator string.

    Examples:
        >>> resolve_eol("dos")
        '\r\n'
        >>> resolve_eol("UNIX")
        '\n'
    """
    return EolPolicy.from_token(token).sequence


class FailurePolicy(str, Enum):
    """Per-target failure strategy for the batch loop.

    Attributes:
        ABORT: Stop the batch at the first failing target (``fail_on_error = true``).
        CONTINUE: Log the failure and proceed with the next target.
    """

    ABORT = "abort"
    CONTINUE = "continue"

    @classmethod
    def from_fail_on_error(cls, fail_on_error: bool) -> FailurePolicy:
        """Map the boolean ``fail_on_error`` option onto a policy."""
        return cls.ABORT if fail_on_error else cls.CONTINUE
