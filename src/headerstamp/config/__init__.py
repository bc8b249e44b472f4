# topmark:header:start
#
#   project      : HeaderStamp
#   file         : __init__.py
#   file_relpath : src/headerstamp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp configuration: runtime model, TOML loading, and logging setup.

Public re-exports:
    - `Config` / `MutableConfig`: frozen runtime snapshot and its builder.
    - `EolPolicy` / `FailurePolicy`: enums selected by configuration values.
    - `resolve_eol`: map an EOL token to its terminator string.
"""

from __future__ import annotations

from headerstamp.config import logging
from headerstamp.config.model import Config, MutableConfig
from headerstamp.config.types import EolPolicy, FailurePolicy, resolve_eol

__all__ = [
    "Config",
    "EolPolicy",
    "FailurePolicy",
    "MutableConfig",
    "logging",
    "resolve_eol",
]
