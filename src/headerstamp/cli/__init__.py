# topmark:header:start
#
#   project      : HeaderStamp
#   file         : __init__.py
#   file_relpath : src/headerstamp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp CLI package.

This package groups all Click command definitions and supporting utilities
for the HeaderStamp command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        headerstamp = "headerstamp.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
