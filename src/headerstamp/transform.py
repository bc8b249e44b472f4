# topmark:header:start
#
#   project      : HeaderStamp
#   file         : transform.py
#   file_relpath : src/headerstamp/transform.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

r"""Pure text transforms used by the injectors.

These helpers perform no I/O. They implement the concatenation rules:

* a body given as a sequence of lines is collapsed with the EOL separator
  (zero lines → empty body, one line → unchanged, more → joined);
* the plain result is ``header + eol + body``;
* the tagged result is ``open_tag + eol + header + eol + body``.

Example:
    ```python
    compose("H", "A\nB", eol="\n")  # "H\nA\nB"
    compose_tagged("H", ["foo();"], eol="\n", open_tag="<?php")  # "<?php\nH\nfoo();"
    ```
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from headerstamp.config.logging import HeaderStampLogger, get_logger

logger: HeaderStampLogger = get_logger(__name__)

_LINE_BREAK_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")

Body = str | Sequence[str]


def split_lines(content: str) -> list[str]:
    r"""Split ``content`` on any line terminator, dropping the terminators.

    An empty string has no lines. A trailing terminator yields a trailing
    empty element, so ``"a\n"`` splits into ``["a", ""]``.
    """
    if not content:
        return []
    return _LINE_BREAK_RE.split(content)


def join_body(body: Body, eol: str) -> str:
    """Collapse a body into a single string.

    Args:
        body (Body): Either the raw text or a sequence of lines.
        eol (str): Separator used when joining more than one line.

    Returns:
        str: The joined body.
    """
    if isinstance(body, str):
        return body
    if len(body) == 0:
        logger.warning("No content to write!")
        return ""
    if len(body) == 1:
        return body[0]
    return eol.join(body)


def compose(header: str, body: Body, *, eol: str) -> str:
    """Return ``header + eol + body``."""
    return f"{header}{eol}{join_body(body, eol)}"


def compose_tagged(header: str, body: Body, *, eol: str, open_tag: str) -> str:
    """Return ``open_tag + eol + header + eol + body``."""
    return f"{open_tag}{eol}{compose(header, body, eol=eol)}"


@dataclass(frozen=True)
class TagLocation:
    """Where the open-tag marker was found (both 1-based)."""

    line: int
    column: int


def strip_open_tag(lines: Sequence[str], open_tag: str) -> tuple[list[str], TagLocation | None]:
    """Remove the first line containing ``open_tag``.

    Lines after the match are left untouched, and if the marker never occurs
    the lines are returned unchanged.

    Args:
        lines (Sequence[str]): Lines without terminators.
        open_tag (str): Marker to look for (e.g. ``<?php``).

    Returns:
        tuple[list[str], TagLocation | None]: The remaining lines and the
        location of the removed marker (``None`` when not found). The column is
        the character offset of the marker within its line, plus one.
    """
    out: list[str] = list(lines)
    for index, line in enumerate(out):
        pos: int = line.find(open_tag)
        if pos != -1:
            del out[index]
            return out, TagLocation(line=index + 1, column=pos + 1)
    return out, None
