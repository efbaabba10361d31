"""Resolve which record collection a command works on.

Search order, starting at the working directory and walking up to the
repository root (the first directory holding ``.git`` or ``.hg``):

1. ``adrs.yaml``, then ``adrs.toml``
2. ``.adr-dir`` (adr-tools single-line file)
3. an existing ``doc/adr`` directory

Then the user-wide ``config.yaml``, then built-in defaults. An explicit
settings file skips the search; a directory override is applied last.
"""

import logging
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from adrs.config import DEFAULT_ADR_DIR, ProjectSettings
from adrs.domain.record.render import Mode
from adrs.domain.shared.error import ConfigurationError, StorageError
from adrs.domain.shared.model import ValueObject
from adrs.infrastructure.local.paths import AdrsPaths

logger = logging.getLogger(__name__)

YAML_SETTINGS = "adrs.yaml"
TOML_SETTINGS = "adrs.toml"
LEGACY_SETTINGS = ".adr-dir"
VCS_MARKERS = (".git", ".hg")


class ConfigSource(StrEnum):
    EXPLICIT = "explicit"
    PROJECT = "project"
    LEGACY = "legacy"
    DEFAULT_DIR = "default-dir"
    GLOBAL = "global"
    DEFAULTS = "defaults"


class ResolvedConfig(ValueObject):
    """Project settings together with where they came from."""

    settings: ProjectSettings
    source: ConfigSource
    root: Path  # Directory the record directory is relative to
    path: Path | None = None  # Settings file, when one was read
    directory_overridden: bool = False

    @property
    def directory(self) -> Path:
        return self.root / self.settings.adr_dir

    @property
    def mode(self) -> Mode:
        return self.settings.mode


# =============================================================================
# Settings files
# =============================================================================


def _validate(data: Any, path: Path) -> ProjectSettings:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file must contain a mapping: {path}", path=path)
    try:
        return ProjectSettings.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid settings in {path}: {e.errors()[0]['msg']}", path=path) from e


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Settings file not found: {path}", path=path) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}", path=path) from e


def load_yaml_settings(path: Path) -> ProjectSettings:
    try:
        data = yaml.safe_load(_read(path))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}", path=path) from e
    return _validate(data, path)


def load_toml_settings(path: Path) -> ProjectSettings:
    try:
        data = tomllib.loads(_read(path))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Malformed TOML in {path}: {e}", path=path) from e
    return _validate(data, path)


def load_legacy_settings(path: Path) -> ProjectSettings:
    """Read a ``.adr-dir`` file: its first line names the record directory."""
    lines = _read(path).strip().splitlines()
    directory = lines[0].strip() if lines else ""
    return ProjectSettings(adr_dir=Path(directory) if directory else DEFAULT_ADR_DIR)


def load_settings_file(path: Path) -> ProjectSettings:
    """Load any supported settings file, choosing the format by name."""
    if path.name == LEGACY_SETTINGS:
        return load_legacy_settings(path)
    if path.suffix == ".toml":
        return load_toml_settings(path)
    return load_yaml_settings(path)


def save_settings(root: Path, settings: ProjectSettings) -> Path:
    """Write project settings under ``root`` in the file its mode uses.

    Compatible mode writes ``.adr-dir`` so adr-tools can still find the
    records; ng mode writes ``adrs.yaml``.
    """
    if settings.mode == Mode.COMPATIBLE:
        path = root / LEGACY_SETTINGS
        content = f"{settings.adr_dir.as_posix()}\n"
    else:
        path = root / YAML_SETTINGS
        content = yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Failed to write settings to {path}: {e}", path=path) from e
    logger.debug(f"Saved settings to {path}")
    return path


# =============================================================================
# Resolution
# =============================================================================


def _search_directory(directory: Path) -> ResolvedConfig | None:
    for name, loader in ((YAML_SETTINGS, load_yaml_settings), (TOML_SETTINGS, load_toml_settings)):
        path = directory / name
        if path.is_file():
            return ResolvedConfig(
                settings=loader(path), source=ConfigSource.PROJECT, root=directory, path=path
            )

    legacy = directory / LEGACY_SETTINGS
    if legacy.is_file():
        return ResolvedConfig(
            settings=load_legacy_settings(legacy),
            source=ConfigSource.LEGACY,
            root=directory,
            path=legacy,
        )

    if (directory / DEFAULT_ADR_DIR).is_dir():
        return ResolvedConfig(settings=ProjectSettings(), source=ConfigSource.DEFAULT_DIR, root=directory)
    return None


def _is_repository_root(directory: Path) -> bool:
    return any((directory / marker).exists() for marker in VCS_MARKERS)


def _discover(start: Path, paths: AdrsPaths) -> ResolvedConfig:
    for directory in (start, *start.parents):
        found = _search_directory(directory)
        if found is not None:
            return found
        if _is_repository_root(directory):
            break

    global_file = paths.global_config_file
    if global_file.is_file():
        return ResolvedConfig(
            settings=load_yaml_settings(global_file),
            source=ConfigSource.GLOBAL,
            root=start,
            path=global_file,
        )
    return ResolvedConfig(settings=ProjectSettings(), source=ConfigSource.DEFAULTS, root=start)


def resolve_config(
    start: Path,
    *,
    config_file: Path | None = None,
    adr_dir: Path | None = None,
    paths: AdrsPaths | None = None,
) -> ResolvedConfig:
    """Resolve project settings for a command run from ``start``.

    Args:
        start: Directory to start searching from.
        config_file: Settings file to use instead of searching.
        adr_dir: Record directory that replaces whatever was resolved.
        paths: User-level paths, for locating the global settings file.

    Raises:
        ConfigurationError: If a settings file is missing, malformed or invalid.
    """
    start = start.resolve()
    if config_file is not None:
        config_file = config_file.resolve()
        resolved = ResolvedConfig(
            settings=load_settings_file(config_file),
            source=ConfigSource.EXPLICIT,
            root=config_file.parent,
            path=config_file,
        )
    else:
        resolved = _discover(start, paths or AdrsPaths())

    if adr_dir is not None:
        resolved = resolved.model_copy(
            update={
                "settings": resolved.settings.model_copy(update={"adr_dir": adr_dir}),
                "directory_overridden": True,
            }
        )

    logger.debug(f"Resolved config from {resolved.source} ({resolved.path or resolved.root})")
    return resolved
