# topmark:header:start
#
#   project      : HeaderStamp
#   file         : test_eol.py
#   file_relpath : tests/core/test_eol.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""EOL token resolution and failure policy mapping."""

from __future__ import annotations

import os

from headerstamp.config.types import EolPolicy, FailurePolicy, resolve_eol
from tests.conftest import parametrize


@parametrize(
    "token, expected",
    [
        ("cr", "\r"),
        ("mac", "\r"),
        ("lf", "\n"),
        ("unix", "\n"),
        ("crlf", "\r\n"),
        ("dos", "\r\n"),
        ("CRLF", "\r\n"),
        (" Unix ", "\n"),
    ],
)
def test_known_tokens(token: str, expected: str) -> None:
    """Known tokens resolve case-insensitively."""
    assert resolve_eol(token) == expected


@parametrize("token", [None, "", "windows", "native", "lfcr"])
def test_unknown_tokens_use_platform_default(token: str | None) -> None:
    """Anything unrecognized selects the platform line separator."""
    assert EolPolicy.from_token(token) is EolPolicy.PLATFORM
    assert resolve_eol(token) == os.linesep


def test_failure_policy_from_flag() -> None:
    """``fail_on_error`` selects abort; its absence selects continue."""
    assert FailurePolicy.from_fail_on_error(True) is FailurePolicy.ABORT
    assert FailurePolicy.from_fail_on_error(False) is FailurePolicy.CONTINUE
