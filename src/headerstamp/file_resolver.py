# topmark:header:start
#
#   project      : HeaderStamp
#   file         : file_resolver.py
#   file_relpath : src/headerstamp/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Resolve the files selected by a file set.

This module walks a base directory recursively and applies gitignore-style
include/exclude patterns (via ``pathspec``) to each file's POSIX path relative
to that base. The result is a deterministic, sorted list of files to process.

Semantics:
  1. **Candidate set**: every regular file below ``base_dir``.
  2. **Include intersection**: with include patterns, keep only files matching
     *any* of them; without include patterns, keep everything.
  3. **Exclude subtraction**: drop files matching any exclude pattern, and the
     built-in default excludes unless disabled.
  4. Return a **sorted** list of absolute paths.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from headerstamp.config.logging import HeaderStampLogger, get_logger
from headerstamp.constants import DEFAULT_EXCLUDES
from headerstamp.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: HeaderStampLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_targets(
    base_dir: Path,
    include_patterns: Iterable[str] = (),
    exclude_patterns: Iterable[str] = (),
    *,
    default_excludes: bool = True,
) -> list[Path]:
    """Return the files below ``base_dir`` selected by the given patterns.

    Args:
        base_dir (Path): Directory to scan.
        include_patterns (Iterable[str]): Patterns to intersect with the candidates.
        exclude_patterns (Iterable[str]): Patterns to subtract from the candidates.
        default_excludes (bool): Also subtract `DEFAULT_EXCLUDES`.

    Returns:
        list[Path]: Sorted list of absolute file paths.

    Raises:
        ConfigurationError: When ``base_dir`` does not exist or is not a directory.
    """
    if not base_dir.is_dir():
        raise ConfigurationError(f"File set directory does not exist: {base_dir}")

    base: Path = base_dir.resolve()
    includes: list[str] = [p for p in include_patterns if p.strip()]
    excludes: list[str] = [p for p in exclude_patterns if p.strip()]
    if default_excludes:
        excludes.extend(DEFAULT_EXCLUDES)

    logger.trace(
        """\
    base_dir: %s
    include_patterns: %s
    exclude_patterns: %s
""",
        base,
        includes,
        excludes,
    )

    candidates: list[Path] = [p for p in base.rglob("*") if p.is_file()]

    # Include intersection filter (if any include patterns)
    if includes:
        include_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, includes)
        candidates = [p for p in candidates if include_spec.match_file(_rel_for_match(p, base))]

    # Exclude subtraction filter
    if excludes:
        exclude_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, excludes)
        candidates = [
            p for p in candidates if not exclude_spec.match_file(_rel_for_match(p, base))
        ]

    result: list[Path] = sorted(candidates)
    if not result:
        logger.warning("No files selected in %s", base)
    logger.trace("Files to process: %d -- %s", len(result), result)
    return result
