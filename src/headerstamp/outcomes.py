# topmark:header:start
#
#   project      : HeaderStamp
#   file         : outcomes.py
#   file_relpath : src/headerstamp/outcomes.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Per-target outcomes and the run report.

A run records one `TargetOutcome` per processed target. Under the continue
policy, failed targets are collected here in addition to being logged, so
callers can inspect them; the run itself still counts as successful.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TargetStatus(str, Enum):
    """Result of processing a single target."""

    WRITTEN = "written"
    FAILED = "failed"


@dataclass(frozen=True)
class TargetOutcome:
    """Outcome for one target.

    Attributes:
        path (Path): The target file.
        status (TargetStatus): Whether the header was written.
        bytes_written (int): Size of the new content (0 on failure).
        error (BaseException | None): Underlying error for failed targets.
    """

    path: Path
    status: TargetStatus
    bytes_written: int = 0
    error: BaseException | None = None


@dataclass
class RunReport:
    """Ordered outcomes of a run."""

    outcomes: list[TargetOutcome] = field(default_factory=lambda: [])

    def add(self, outcome: TargetOutcome) -> None:
        """Append an outcome."""
        self.outcomes.append(outcome)

    @property
    def written(self) -> list[TargetOutcome]:
        """Outcomes of targets that were updated."""
        return [o for o in self.outcomes if o.status == TargetStatus.WRITTEN]

    @property
    def failed(self) -> list[TargetOutcome]:
        """Outcomes of targets that could not be updated."""
        return [o for o in self.outcomes if o.status == TargetStatus.FAILED]

    @property
    def ok(self) -> bool:
        """True when no target failed."""
        return not self.failed

    def summary(self) -> str:
        """One-line human readable summary."""
        return f"{len(self.written)} file(s) updated, {len(self.failed)} failed"
