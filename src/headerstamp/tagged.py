# topmark:header:start
#
#   project      : HeaderStamp
#   file         : tagged.py
#   file_relpath : src/headerstamp/tagged.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Header injection for files that start with a language-open marker.

Warning: the first line containing the marker (``<?php`` by default) is deleted
as a whole; a fresh marker line is emitted in front of the header instead.

This variant does not transcode: the header and the targets are both handled in
the header's source encoding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from headerstamp.config.logging import get_logger
from headerstamp.injector import HeaderInjector
from headerstamp.transform import compose_tagged, split_lines, strip_open_tag

if TYPE_CHECKING:
    from pathlib import Path

    from headerstamp.config.logging import HeaderStampLogger
    from headerstamp.header import Header
    from headerstamp.transform import Body, TagLocation

logger: HeaderStampLogger = get_logger(__name__)


class TagStrippingInjector(HeaderInjector):
    """`HeaderInjector` that moves the open-tag marker above the header."""

    @property
    def open_tag(self) -> str:
        """The marker stripped from, and re-emitted into, each target."""
        return self.config.open_tag

    @property
    def target_encoding(self) -> str:
        """Targets share the header's source encoding (no transcoding)."""
        return self.config.encoding

    def read_target(self, path: Path) -> Body:
        """Return the lines of ``path`` without the first open-tag line."""
        content: str = self.access.read_text(path, self.target_encoding)
        lines: list[str]
        found: TagLocation | None
        lines, found = strip_open_tag(split_lines(content), self.open_tag)
        if found is not None:
            logger.log(
                self.log_level,
                "Open tag found at line %d column %d",
                found.line,
                found.column,
            )
        else:
            logger.debug("No open tag %r in %s", self.open_tag, path)
        return lines

    def concat(self, header: Header, body: Body) -> str:
        """Return ``open_tag + EOL + header + EOL + body``."""
        return compose_tagged(header.text, body, eol=self.eol, open_tag=self.open_tag)
