# topmark:header:start
#
#   project      : HeaderStamp
#   file         : constants.py
#   file_relpath : src/headerstamp/constants.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HEADERSTAMP_VERSION: str = get_version("headerstamp")

DEFAULT_ENCODING: str = "utf-8"

# Marker removed and re-emitted by the tag-stripping variant
DEFAULT_OPEN_TAG: str = "<?php"

# Config discovery
CONFIG_FILE_NAME: str = "headerstamp.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
CONFIG_SECTION: str = "headerstamp"

# Ant/Phing-style default excludes applied to every file set unless disabled
DEFAULT_EXCLUDES: tuple[str, ...] = (
    "*~",
    r"\#*#",
    ".#*",
    "%*%",
    "._*",
    "CVS/",
    ".cvsignore",
    "SCCS/",
    "vssver.scc",
    ".svn/",
    ".git/",
    ".gitattributes",
    ".gitignore",
    ".gitmodules",
    ".hg/",
    ".hgignore",
    ".hgtags",
    ".bzr/",
    ".bzrignore",
    "_darcs/",
    ".DS_Store",
)

VALUE_NOT_SET: str = "<not set>"
