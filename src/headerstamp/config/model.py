# topmark:header:start
#
#   project      : HeaderStamp
#   file         : model.py
#   file_relpath : src/headerstamp/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the injectors.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering:
    defaults → config files (in order) → CLI arguments. Later layers override
    earlier ones for every value that is set (not ``None``). File sets are not
    merged: a layer that declares file sets replaces the earlier ones.

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - CLI paths are resolved against the invocation CWD.

Immutability:
    - `Config` stores tuples and is ``frozen=True``. Use `Config.thaw` → edit →
      `MutableConfig.freeze` for safe updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from headerstamp.config.io import (
    extract_section,
    get_bool_value_or_none,
    get_str_list_value,
    get_string_value_or_none,
    get_table_list,
    load_toml_dict,
)
from headerstamp.config.keys import Toml
from headerstamp.config.logging import get_logger
from headerstamp.config.types import EolPolicy
from headerstamp.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_ENCODING,
    DEFAULT_OPEN_TAG,
    PYPROJECT_FILE_NAME,
)
from headerstamp.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from headerstamp.config.io import TomlTable
    from headerstamp.config.logging import HeaderStampLogger
    from headerstamp.config.types import ArgsLike
    from headerstamp.targets import FileSetSpec

logger: HeaderStampLogger = get_logger(__name__)


def abs_path_from(base: Path, raw: str | Path) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(raw)
    return (base / p).resolve() if not p.is_absolute() else p.resolve()


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for HeaderStamp.

    Attributes:
        config_files (tuple[Path, ...]): Config sources that contributed to this snapshot.
        header_file (Path | None): Header resource to prepend.
        to_file (Path | None): Single destination (exclusive with ``file_sets``).
        file_sets (tuple[FileSetSpec, ...]): File sets selecting the targets.
        eol (str | None): EOL token (``cr``/``mac``, ``lf``/``unix``, ``crlf``/``dos``);
            anything else selects the platform default.
        encoding (str): Encoding of the header resource.
        to_encoding (str): Encoding the header is transcoded to (plain variant).
        fail_on_error (bool): Abort the batch at the first failing target.
        preserve_last_modified (bool): Restore each target's modification time.
        verbose (bool): Promote per-file messages from DEBUG to INFO.
        open_tag (str): Marker handled by the tag-stripping variant.
    """

    config_files: tuple[Path, ...]
    header_file: Path | None
    to_file: Path | None
    file_sets: tuple[FileSetSpec, ...]
    eol: str | None
    encoding: str
    to_encoding: str
    fail_on_error: bool
    preserve_last_modified: bool
    verbose: bool
    open_tag: str

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Note:
            Export-only convenience for ``show-config``. Parsing lives on the
            mutable side (see `MutableConfig`).
        """
        return {
            Toml.KEY_FILE: str(self.header_file) if self.header_file else None,
            Toml.KEY_ENCODING: self.encoding,
            Toml.KEY_TO_FILE: str(self.to_file) if self.to_file else None,
            Toml.KEY_TO_ENCODING: self.to_encoding,
            Toml.KEY_EOL: EolPolicy.from_token(self.eol).value,
            Toml.KEY_FAIL_ON_ERROR: self.fail_on_error,
            Toml.KEY_PRESERVE_LAST_MODIFIED: self.preserve_last_modified,
            Toml.KEY_VERBOSE: self.verbose,
            Toml.KEY_OPEN_TAG: self.open_tag,
            Toml.SECTION_FILESET: [
                {
                    Toml.KEY_DIR: str(fs.base_dir),
                    Toml.KEY_INCLUDE: list(fs.includes),
                    Toml.KEY_EXCLUDE: list(fs.excludes),
                    Toml.KEY_DEFAULT_EXCLUDES: fs.default_excludes,
                }
                for fs in self.file_sets
            ],
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            config_files=list(self.config_files),
            header_file=self.header_file,
            to_file=self.to_file,
            file_sets=list(self.file_sets),
            eol=self.eol,
            encoding=self.encoding,
            to_encoding=self.to_encoding,
            fail_on_error=self.fail_on_error,
            preserve_last_modified=self.preserve_last_modified,
            verbose=self.verbose,
            open_tag=self.open_tag,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means *unset* (inherit from the previous layer). Defaults are
    applied by `from_defaults` and by `freeze` for values still unset.
    """

    config_files: list[Path] = field(default_factory=lambda: [])
    header_file: Path | None = None
    to_file: Path | None = None
    file_sets: list[FileSetSpec] = field(default_factory=lambda: [])
    eol: str | None = None
    encoding: str | None = None
    to_encoding: str | None = None
    fail_on_error: bool | None = None
    preserve_last_modified: bool | None = None
    verbose: bool | None = None
    open_tag: str | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            config_files=tuple(self.config_files),
            header_file=self.header_file,
            to_file=self.to_file,
            file_sets=tuple(self.file_sets),
            eol=self.eol,
            encoding=self.encoding or DEFAULT_ENCODING,
            to_encoding=self.to_encoding or DEFAULT_ENCODING,
            fail_on_error=True if self.fail_on_error is None else self.fail_on_error,
            preserve_last_modified=bool(self.preserve_last_modified),
            verbose=bool(self.verbose),
            open_tag=self.open_tag or DEFAULT_OPEN_TAG,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls(
            encoding=DEFAULT_ENCODING,
            to_encoding=DEFAULT_ENCODING,
            fail_on_error=True,
            preserve_last_modified=False,
            verbose=False,
            open_tag=DEFAULT_OPEN_TAG,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a configuration layer from a settings table.

        Args:
            data (TomlTable): The HeaderStamp settings table.
            config_file (Path | None): Source file; relative paths are resolved
                against its directory (or the CWD when ``None``).

        Returns:
            MutableConfig: The parsed layer (unset keys stay ``None``).
        """
        from headerstamp.targets import FileSetSpec  # pylint: disable=import-outside-toplevel

        base: Path = config_file.parent.resolve() if config_file else Path.cwd()

        header_raw: str | None = get_string_value_or_none(data, Toml.KEY_FILE)
        to_file_raw: str | None = get_string_value_or_none(data, Toml.KEY_TO_FILE)

        file_sets: list[FileSetSpec] = []
        for table in get_table_list(data, Toml.SECTION_FILESET):
            dir_raw: str | None = get_string_value_or_none(table, Toml.KEY_DIR)
            if not dir_raw:
                raise ConfigurationError(
                    f"Every [[{Toml.SECTION_FILESET}]] needs a '{Toml.KEY_DIR}' "
                    f"(in {config_file or '<inline>'})"
                )
            default_excludes: bool | None = get_bool_value_or_none(
                table, Toml.KEY_DEFAULT_EXCLUDES
            )
            file_sets.append(
                FileSetSpec(
                    base_dir=abs_path_from(base, dir_raw),
                    includes=tuple(get_str_list_value(table, Toml.KEY_INCLUDE)),
                    excludes=tuple(get_str_list_value(table, Toml.KEY_EXCLUDE)),
                    default_excludes=True if default_excludes is None else default_excludes,
                )
            )

        layer = cls(
            config_files=[config_file] if config_file else [],
            header_file=abs_path_from(base, header_raw) if header_raw else None,
            to_file=abs_path_from(base, to_file_raw) if to_file_raw else None,
            file_sets=file_sets,
            eol=get_string_value_or_none(data, Toml.KEY_EOL),
            encoding=get_string_value_or_none(data, Toml.KEY_ENCODING),
            to_encoding=get_string_value_or_none(data, Toml.KEY_TO_ENCODING),
            fail_on_error=get_bool_value_or_none(data, Toml.KEY_FAIL_ON_ERROR),
            preserve_last_modified=get_bool_value_or_none(data, Toml.KEY_PRESERVE_LAST_MODIFIED),
            verbose=get_bool_value_or_none(data, Toml.KEY_VERBOSE),
            open_tag=get_string_value_or_none(data, Toml.KEY_OPEN_TAG),
        )
        logger.debug("Parsed config layer from %s: %s", config_file or "<inline>", layer)
        return layer

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``headerstamp.toml`` and ``pyproject.toml`` files,
        extracting the ``[tool.headerstamp]`` section from the latter.

        Returns:
            MutableConfig | None: The parsed layer, or ``None`` when a
            pyproject file has no HeaderStamp section.

        Raises:
            ConfigurationError: When the file cannot be read or parsed.
        """
        data: TomlTable = load_toml_dict(path)
        section: TomlTable | None = extract_section(
            data, is_pyproject=path.name == PYPROJECT_FILE_NAME
        )
        if section is None:
            logger.debug("No [tool.headerstamp] section in %s", path)
            return None
        return cls.from_toml_dict(section, config_file=path.resolve())

    @classmethod
    def discover(cls, cwd: Path) -> list[Path]:
        """Return the config file found in ``cwd``, if any.

        ``headerstamp.toml`` wins over ``pyproject.toml``; a pyproject file
        only counts when it has a ``[tool.headerstamp]`` table.
        """
        dedicated: Path = cwd / CONFIG_FILE_NAME
        if dedicated.is_file():
            return [dedicated]
        pyproject: Path = cwd / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            section: TomlTable | None = extract_section(
                load_toml_dict(pyproject), is_pyproject=True
            )
            if section is not None:
                return [pyproject]
        return []

    @classmethod
    def load_merged(
        cls,
        *,
        config_paths: Iterable[Path] = (),
        discover_in: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults with the given (or discovered) config files.

        Args:
            config_paths (Iterable[Path]): Explicit config files, applied in order.
            discover_in (Path | None): When no explicit files are given, look for
                a config file in this directory.

        Returns:
            MutableConfig: The merged builder (CLI overrides still to apply).
        """
        merged: MutableConfig = cls.from_defaults()
        paths: list[Path] = list(config_paths)
        if not paths and discover_in is not None:
            paths = cls.discover(discover_in)
        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
            else:
                logger.warning("Config file %s has no HeaderStamp settings", path)
        return merged

    # ------------------------------ Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            header_file=other.header_file if other.header_file is not None else self.header_file,
            to_file=other.to_file if other.to_file is not None else self.to_file,
            file_sets=list(other.file_sets or self.file_sets),
            eol=other.eol if other.eol is not None else self.eol,
            encoding=other.encoding if other.encoding is not None else self.encoding,
            to_encoding=other.to_encoding
            if other.to_encoding is not None
            else self.to_encoding,
            fail_on_error=other.fail_on_error
            if other.fail_on_error is not None
            else self.fail_on_error,
            preserve_last_modified=other.preserve_last_modified
            if other.preserve_last_modified is not None
            else self.preserve_last_modified,
            verbose=other.verbose if other.verbose is not None else self.verbose,
            open_tag=other.open_tag if other.open_tag is not None else self.open_tag,
        )

    def apply_args(self, args: ArgsLike, *, cwd: Path | None = None) -> MutableConfig:
        """Overlay CLI/API arguments on top of this builder.

        Recognized keys mirror the TOML keys (``file``, ``to_file``, ``eol``,
        ``encoding``, ``to_encoding``, ``fail_on_error``,
        ``preserve_last_modified``, ``verbose``, ``open_tag``) plus the file set
        shorthand ``dirs``/``include``/``exclude``/``default_excludes``: each
        directory in ``dirs`` becomes a file set sharing the given patterns.

        Returns:
            MutableConfig: A new, merged builder.
        """
        from headerstamp.targets import FileSetSpec  # pylint: disable=import-outside-toplevel

        base: Path = cwd or Path.cwd()

        def path_or_none(key: str) -> Path | None:
            raw: object = args.get(key)
            return abs_path_from(base, str(raw)) if raw else None

        file_sets: list[FileSetSpec] = []
        includes: tuple[str, ...] = tuple(args.get("include") or ())
        excludes: tuple[str, ...] = tuple(args.get("exclude") or ())
        default_excludes: bool | None = args.get("default_excludes")
        for raw_dir in args.get("dirs") or ():
            file_sets.append(
                FileSetSpec(
                    base_dir=abs_path_from(base, raw_dir),
                    includes=includes,
                    excludes=excludes,
                    default_excludes=True if default_excludes is None else default_excludes,
                )
            )
        if (includes or excludes) and not file_sets:
            logger.warning("--include/--exclude given without --dir; patterns ignored")

        overlay = MutableConfig(
            header_file=path_or_none("file"),
            to_file=path_or_none("to_file"),
            file_sets=file_sets,
            eol=args.get("eol"),
            encoding=args.get("encoding"),
            to_encoding=args.get("to_encoding"),
            fail_on_error=args.get("fail_on_error"),
            preserve_last_modified=args.get("preserve_last_modified"),
            verbose=args.get("verbose"),
            open_tag=args.get("open_tag"),
        )
        merged: MutableConfig = self.merge_with(overlay)
        # A target selection given on the command line replaces the configured one
        if overlay.to_file is not None and not overlay.file_sets:
            merged.file_sets = []
        elif overlay.file_sets and overlay.to_file is None:
            merged.to_file = None
        return merged
