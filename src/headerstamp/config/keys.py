# topmark:header:start
#
#   project      : HeaderStamp
#   file         : keys.py
#   file_relpath : src/headerstamp/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Canonical TOML key names for HeaderStamp configuration.

These constants are the external configuration schema as it appears in
``headerstamp.toml`` and in ``[tool.headerstamp]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.

Example:
    ```toml
    file = "LICENSE"
    eol = "lf"
    fail_on_error = true

    [[fileset]]
    dir = "src"
    include = ["**/*.php"]
    ```
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table and key names used by HeaderStamp configuration."""

    # Header resource
    KEY_FILE: Final[str] = "file"
    KEY_ENCODING: Final[str] = "encoding"

    # Targets
    KEY_TO_FILE: Final[str] = "to_file"
    KEY_TO_ENCODING: Final[str] = "to_encoding"

    # [[fileset]]
    SECTION_FILESET: Final[str] = "fileset"
    KEY_DIR: Final[str] = "dir"
    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"
    KEY_DEFAULT_EXCLUDES: Final[str] = "default_excludes"

    # Behavior
    KEY_EOL: Final[str] = "eol"
    KEY_FAIL_ON_ERROR: Final[str] = "fail_on_error"
    KEY_PRESERVE_LAST_MODIFIED: Final[str] = "preserve_last_modified"
    KEY_VERBOSE: Final[str] = "verbose"
    KEY_OPEN_TAG: Final[str] = "open_tag"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
