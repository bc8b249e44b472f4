# topmark:header:start
#
#   project      : HeaderStamp
#   file         : injector.py
#   file_relpath : src/headerstamp/injector.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Prepend a header resource to a batch of target files.

`HeaderInjector` is the engine behind ``headerstamp apply``. A run moves through
these states:

    UNVALIDATED → VALIDATED → HEADER_LOADED → PROCESSING → DONE

Validation failures end in ``CONFIGURATION_ERROR`` and header loading failures
in ``LOAD_ERROR``; neither touches any target. While processing, targets are
handled strictly one at a time: read, transform, write. A failing target ends
the run in ``ABORTED`` under `FailurePolicy.ABORT`, and is logged and skipped
under `FailurePolicy.CONTINUE`.

Subclasses specialize `HeaderInjector.read_target` and
`HeaderInjector.concat` (see `headerstamp.tagged.TagStrippingInjector`).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from headerstamp.config.logging import get_logger
from headerstamp.config.types import FailurePolicy, resolve_eol
from headerstamp.errors import (
    BatchError,
    ConfigurationError,
    ResourceLoadError,
    TargetIOError,
)
from headerstamp.header import Header, check_header_path, load_header
from headerstamp.outcomes import RunReport, TargetOutcome, TargetStatus
from headerstamp.targets import FileSetTargets, TargetSelector, select_targets
from headerstamp.transform import Body, compose
from headerstamp.utils.file import FileAccess, preserved_mtime

if TYPE_CHECKING:
    from pathlib import Path

    from headerstamp.config.logging import HeaderStampLogger
    from headerstamp.config.model import Config

logger: HeaderStampLogger = get_logger(__name__)


class RunState(str, Enum):
    """Lifecycle of a single injector run."""

    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    HEADER_LOADED = "header loaded"
    PROCESSING = "processing"
    DONE = "done"
    CONFIGURATION_ERROR = "configuration error"
    LOAD_ERROR = "load error"
    ABORTED = "aborted"


class HeaderInjector:
    """Prepend a header to every selected target.

    Args:
        config (Config): Frozen runtime configuration.
        access (FileAccess | None): File primitives (defaults to `FileAccess`).
    """

    def __init__(self, config: Config, *, access: FileAccess | None = None) -> None:
        self.config: Config = config
        self.access: FileAccess = access or FileAccess()
        self.state: RunState = RunState.UNVALIDATED
        self.eol: str = resolve_eol(config.eol)
        self.failure_policy: FailurePolicy = FailurePolicy.from_fail_on_error(
            config.fail_on_error
        )

    # ------------------------------------------------------------------ policy

    @property
    def log_level(self) -> int:
        """Level used for per-file progress messages."""
        return logging.INFO if self.config.verbose else logging.DEBUG

    @property
    def target_encoding(self) -> str:
        """Encoding targets are read and written in."""
        return self.config.to_encoding

    # ------------------------------------------------------------------ phases

    def validate(self) -> TargetSelector:
        """Check the configuration before any I/O.

        Returns:
            TargetSelector: The validated target selection.

        Raises:
            ConfigurationError: On missing, ambiguous or invalid attributes.
        """
        try:
            check_header_path(self.config.header_file)
            selector: TargetSelector = select_targets(
                self.config.to_file, self.config.file_sets
            )
            if isinstance(selector, FileSetTargets):
                for fs in selector.file_sets:
                    if not fs.base_dir.is_dir():
                        raise ConfigurationError(
                            f"File set directory does not exist: {fs.base_dir}"
                        )
        except ConfigurationError:
            self.state = RunState.CONFIGURATION_ERROR
            raise
        self.state = RunState.VALIDATED
        logger.log(
            self.log_level,
            "Preserve last modified time: %s",
            "yes" if self.config.preserve_last_modified else "no",
        )
        return selector

    def load_header(self) -> Header:
        """Load the header resource.

        Raises:
            ConfigurationError: When the header path is invalid.
            ResourceLoadError: When the header cannot be read or decoded.
        """
        try:
            header: Header = load_header(
                self.config.header_file,
                eol=self.eol,
                encoding=self.config.encoding,
                dest_encoding=self.target_encoding,
                log_level=self.log_level,
                access=self.access,
            )
        except ConfigurationError:
            self.state = RunState.CONFIGURATION_ERROR
            raise
        except ResourceLoadError:
            self.state = RunState.LOAD_ERROR
            raise
        self.state = RunState.HEADER_LOADED
        return header

    def run(self) -> RunReport:
        """Validate, load the header, and process every target.

        Returns:
            RunReport: One outcome per processed target. Under the continue
            policy, failures are listed here and logged; the run still succeeds.

        Raises:
            ConfigurationError: On invalid configuration (no target touched).
            ResourceLoadError: When the header cannot be loaded (no target touched).
            BatchError: When a target fails under the abort policy.
        """
        selector: TargetSelector = self.validate()
        header: Header = self.load_header()

        report = RunReport()
        self.state = RunState.PROCESSING
        for path in selector.iter_paths():
            try:
                outcome: TargetOutcome = self.process_target(header, path)
            except TargetIOError as e:
                if self.failure_policy is FailurePolicy.ABORT:
                    self.state = RunState.ABORTED
                    raise BatchError(e.path, e.cause) from e.cause
                logger.error("Cannot update file %s: %s", e.path, e.cause)
                outcome = TargetOutcome(path=path, status=TargetStatus.FAILED, error=e.cause)
            report.add(outcome)

        self.state = RunState.DONE
        logger.debug("Run complete: %s", report.summary())
        return report

    # ------------------------------------------------------------ per target

    def process_target(self, header: Header, path: Path) -> TargetOutcome:
        """Read, transform and write a single target.

        Raises:
            TargetIOError: When the target cannot be read, decoded, encoded or written.
        """
        try:
            logger.log(self.log_level, "Reading %s", path)
            body: Body = self.read_target(path)

            text: str = self.concat(header, body)

            logger.log(self.log_level, "Writing %s", path)
            with preserved_mtime(
                path,
                enabled=self.config.preserve_last_modified,
                access=self.access,
            ):
                written: int = self.write_target(path, text)
        except (OSError, UnicodeError) as e:
            raise TargetIOError(path, e) from e

        return TargetOutcome(path=path, status=TargetStatus.WRITTEN, bytes_written=written)

    def read_target(self, path: Path) -> Body:
        """Return the full content of ``path``."""
        return self.access.read_text(path, self.target_encoding)

    def concat(self, header: Header, body: Body) -> str:
        """Return ``header + EOL + body``."""
        return compose(header.text, body, eol=self.eol)

    def write_target(self, path: Path, text: str) -> int:
        """Replace the content of ``path`` with ``text``."""
        return self.access.write_text(path, text, self.target_encoding)

