# topmark:header:start
#
#   project      : HeaderStamp
#   file         : targets.py
#   file_relpath : src/headerstamp/targets.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Target selection: a single destination file, or one or more file sets.

A run addresses exactly one of the two modes. `select_targets` builds the
matching `TargetSelector` variant and rejects configurations where both or
neither are populated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Union

from headerstamp.config.logging import get_logger
from headerstamp.errors import ConfigurationError
from headerstamp.file_resolver import resolve_targets

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headerstamp.config.logging import HeaderStampLogger

logger: HeaderStampLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileSetSpec:
    """A base directory plus include/exclude patterns.

    Attributes:
        base_dir (Path): Directory the patterns are evaluated against.
        includes (tuple[str, ...]): gitwildmatch include patterns (empty = everything).
        excludes (tuple[str, ...]): gitwildmatch exclude patterns.
        default_excludes (bool): Whether VCS/editor files are excluded as well.
    """

    base_dir: Path
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    default_excludes: bool = True

    def resolve(self) -> list[Path]:
        """Return the ordered list of files selected by this file set."""
        return resolve_targets(
            self.base_dir,
            self.includes,
            self.excludes,
            default_excludes=self.default_excludes,
        )


@dataclass(frozen=True)
class SingleTarget:
    """Exactly one explicit destination file."""

    path: Path

    def iter_paths(self) -> Iterator[Path]:
        """Yield the single destination."""
        yield self.path


@dataclass(frozen=True)
class FileSetTargets:
    """One or more file sets, processed in declaration order."""

    file_sets: tuple[FileSetSpec, ...] = field(default_factory=tuple)

    def iter_paths(self) -> Iterator[Path]:
        """Yield every selected file, set by set, in discovery order."""
        for fs in self.file_sets:
            paths: list[Path] = fs.resolve()
            logger.debug("File set %s selected %d file(s)", fs.base_dir, len(paths))
            yield from paths


TargetSelector = Union[SingleTarget, FileSetTargets]


def select_targets(
    dest_file: Path | None,
    file_sets: Sequence[FileSetSpec],
) -> TargetSelector:
    """Build the target selector, enforcing that exactly one mode is configured.

    Args:
        dest_file (Path | None): Single destination file, if any.
        file_sets (Sequence[FileSetSpec]): File sets, if any.

    Returns:
        TargetSelector: `SingleTarget` or `FileSetTargets`.

    Raises:
        ConfigurationError: When neither or both modes are configured.
    """
    if dest_file is None and not file_sets:
        raise ConfigurationError("Specify at least one source - a file or a fileset.")
    if dest_file is not None and file_sets:
        raise ConfigurationError("Only one of destination file and fileset may be set.")
    if dest_file is not None:
        return SingleTarget(path=dest_file)
    return FileSetTargets(file_sets=tuple(file_sets))
