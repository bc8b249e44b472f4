# topmark:header:start
#
#   project      : HeaderStamp
#   file         : header.py
#   file_relpath : src/headerstamp/header.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Header resource loading.

The header is the text block prepended to every target. It is loaded once per
run, decoded from its declared source encoding and kept read-only until the run
ends. Its own line endings are never normalized; only the join with the target
body uses the configured EOL.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from headerstamp.config.logging import get_logger
from headerstamp.constants import DEFAULT_ENCODING
from headerstamp.errors import ConfigurationError, ResourceLoadError
from headerstamp.utils.file import FileAccess

if TYPE_CHECKING:
    from pathlib import Path

    from headerstamp.config.logging import HeaderStampLogger

logger: HeaderStampLogger = get_logger(__name__)


@dataclass(frozen=True)
class Header:
    """Loaded header payload.

    Attributes:
        path (Path): Source of the header.
        encoding (str): Encoding the resource was decoded with.
        dest_encoding (str): Encoding the header is transcoded to on output.
        eol (str): Resolved line terminator joining header and body.
        text (str): Decoded header content, verbatim.
        size (int): Size of the resource on disk, in bytes.
    """

    path: Path
    encoding: str
    dest_encoding: str
    eol: str
    text: str
    size: int

    @property
    def is_empty(self) -> bool:
        """Whether the resource had no content."""
        return self.size == 0


def check_header_path(path: Path | None) -> Path:
    """Validate that ``path`` names an existing regular resource.

    Raises:
        ConfigurationError: When ``path`` is unset, missing, or a directory.

    Returns:
        Path: The validated path.
    """
    if path is None:
        raise ConfigurationError("You must specify a header file to load.")
    if not path.exists():
        raise ConfigurationError(f"{path} does not exist!")
    if path.is_dir():
        raise ConfigurationError(f"Cannot load a directory as a file: {path}")
    return path


def _check_codec(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError as e:
        raise ResourceLoadError(f"Unknown encoding: {name}") from e


def load_header(
    path: Path | None,
    *,
    eol: str,
    encoding: str = DEFAULT_ENCODING,
    dest_encoding: str = DEFAULT_ENCODING,
    log_level: int = logging.DEBUG,
    access: FileAccess | None = None,
) -> Header:
    """Load the header resource.

    Args:
        path (Path | None): Location of the header resource.
        eol (str): Resolved line terminator (see `headerstamp.config.types.resolve_eol`).
        encoding (str): Encoding of the resource.
        dest_encoding (str): Encoding the header will be written in.
        log_level (int): Level for the "loaded header" message.
        access (FileAccess | None): File primitives to use.

    Returns:
        Header: The loaded header.

    Raises:
        ConfigurationError: When the path is unset, missing, or a directory.
        ResourceLoadError: When the resource cannot be read, decoded, or
            represented in ``dest_encoding``.
    """
    path = check_header_path(path)
    _check_codec(encoding)
    _check_codec(dest_encoding)
    fa: FileAccess = access or FileAccess()

    try:
        raw: bytes = fa.read_bytes(path)
    except OSError as e:
        raise ResourceLoadError(f"Couldn't load the header file {path}: {e}") from e

    if not raw:
        logger.warning("The file %s is empty!", path)

    try:
        text: str = raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise ResourceLoadError(f"Cannot decode header file {path} as {encoding}: {e}") from e

    try:
        text.encode(dest_encoding)
    except UnicodeEncodeError as e:
        raise ResourceLoadError(
            f"Header file {path} cannot be represented in {dest_encoding}: {e}"
        ) from e

    header = Header(
        path=path,
        encoding=encoding,
        dest_encoding=dest_encoding,
        eol=eol,
        text=text,
        size=len(raw),
    )
    logger.log(log_level, "Load header: %s (%d Bytes)", path, header.size)
    return header
