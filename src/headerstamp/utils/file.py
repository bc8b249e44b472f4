# topmark:header:start
#
#   file         : file.py
#   file_relpath : src/headerstamp/utils/file.py
#   project      : HeaderStamp
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Thin file-access helpers used by the header injector.

Every read and every write is a separate scoped acquisition: the file handle
is closed before the call returns, on success as well as on error. Nothing is
locked between reading a target and writing it back.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from headerstamp.config.logging import HeaderStampLogger, get_logger

logger: HeaderStampLogger = get_logger(__name__)


class FileAccess:
    """Blocking file primitives (read, write, modification time).

    The injector only talks to the filesystem through an instance of this class,
    so callers (and tests) can substitute their own implementation.
    """

    def read_bytes(self, path: Path) -> bytes:
        """Return the raw content of ``path``."""
        with path.open("rb") as f:
            return f.read()

    def read_text(self, path: Path, encoding: str) -> str:
        """Return the content of ``path`` decoded strictly with ``encoding``.

        Line endings are preserved as stored (``newline=""``).
        """
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            return f.read()

    def write_text(self, path: Path, text: str, encoding: str) -> int:
        """Replace the content of ``path`` with ``text`` encoded as ``encoding``.

        Returns:
            int: Number of bytes written.
        """
        data: bytes = text.encode(encoding, errors="strict")
        with path.open("wb") as f:
            f.write(data)
        logger.trace("wrote %d bytes to %s", len(data), path)
        return len(data)

    def get_mtime_ns(self, path: Path) -> tuple[int, int]:
        """Return ``(atime_ns, mtime_ns)`` for ``path``."""
        st: os.stat_result = path.stat()
        return st.st_atime_ns, st.st_mtime_ns

    def set_mtime_ns(self, path: Path, times: tuple[int, int]) -> None:
        """Apply ``(atime_ns, mtime_ns)`` to ``path``."""
        os.utime(path, ns=times)


@contextmanager
def preserved_mtime(
    path: Path,
    *,
    enabled: bool = True,
    access: FileAccess | None = None,
) -> Iterator[None]:
    """Restore the modification time of ``path`` when the block exits.

    The timestamp is captured on entry and re-applied on exit, whether the block
    completed or raised. When the block raised, a failure to restore is logged
    and the original exception propagates. With ``enabled=False`` this is a no-op.

    Args:
        path (Path): File whose timestamps should survive the block.
        enabled (bool): Whether to capture and restore at all.
        access (FileAccess | None): File primitives to use (defaults to `FileAccess`).

    Yields:
        None: Control to the wrapped block.
    """
    if not enabled:
        yield
        return

    fa: FileAccess = access or FileAccess()
    times: tuple[int, int] = fa.get_mtime_ns(path)
    try:
        yield
    except BaseException:
        try:
            fa.set_mtime_ns(path, times)
        except OSError as e:
            logger.warning("Could not restore modification time of %s: %s", path, e)
        raise
    fa.set_mtime_ns(path, times)
    logger.trace("restored mtime of %s to %d", path, times[1])

