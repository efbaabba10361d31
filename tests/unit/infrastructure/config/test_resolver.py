"""Tests for project settings resolution."""

from pathlib import Path

import pytest

from adrs.config import ProjectSettings
from adrs.domain.record.render import Mode
from adrs.domain.shared.error import ConfigurationError
from adrs.infrastructure.config.resolver import (
    ConfigSource,
    load_settings_file,
    resolve_config,
    save_settings,
)
from adrs.infrastructure.local.paths import AdrsPaths


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A repository root with a nested working directory."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    (root / "src" / "pkg").mkdir(parents=True)
    return root


@pytest.fixture
def paths(tmp_path: Path) -> AdrsPaths:
    return AdrsPaths(base_dir=tmp_path / "xdg" / "adrs")


class TestProjectSearch:
    def test_yaml_settings_in_ancestor(self, project: Path, paths: AdrsPaths):
        (project / "adrs.yaml").write_text("adr_dir: decisions\nmode: ng\n", encoding="utf-8")

        resolved = resolve_config(project / "src" / "pkg", paths=paths)

        assert resolved.source == ConfigSource.PROJECT
        assert resolved.root == project.resolve()
        assert resolved.directory == project.resolve() / "decisions"
        assert resolved.mode == Mode.NG
        assert not resolved.directory_overridden

    def test_toml_settings(self, project: Path, paths: AdrsPaths):
        (project / "adrs.toml").write_text('adr_dir = "docs/decisions"\nambiguity_ratio = 3.0\n', encoding="utf-8")

        resolved = resolve_config(project, paths=paths)

        assert resolved.source == ConfigSource.PROJECT
        assert resolved.settings.adr_dir == Path("docs/decisions")
        assert resolved.settings.ambiguity_ratio == 3.0

    def test_yaml_wins_over_legacy_file(self, project: Path, paths: AdrsPaths):
        (project / "adrs.yaml").write_text("adr_dir: from-yaml\n", encoding="utf-8")
        (project / ".adr-dir").write_text("from-legacy\n", encoding="utf-8")

        resolved = resolve_config(project, paths=paths)

        assert resolved.settings.adr_dir == Path("from-yaml")

    def test_legacy_file(self, project: Path, paths: AdrsPaths):
        (project / ".adr-dir").write_text("architecture/decisions\n", encoding="utf-8")

        resolved = resolve_config(project / "src", paths=paths)

        assert resolved.source == ConfigSource.LEGACY
        assert resolved.settings.adr_dir == Path("architecture/decisions")
        assert resolved.mode == Mode.COMPATIBLE
        assert resolved.path == project.resolve() / ".adr-dir"

    def test_default_directory(self, project: Path, paths: AdrsPaths):
        (project / "doc" / "adr").mkdir(parents=True)

        resolved = resolve_config(project / "src" / "pkg", paths=paths)

        assert resolved.source == ConfigSource.DEFAULT_DIR
        assert resolved.directory == project.resolve() / "doc" / "adr"

    def test_nearest_directory_wins(self, project: Path, paths: AdrsPaths):
        (project / ".adr-dir").write_text("outer\n", encoding="utf-8")
        (project / "src" / ".adr-dir").write_text("inner\n", encoding="utf-8")

        resolved = resolve_config(project / "src" / "pkg", paths=paths)

        assert resolved.root == (project / "src").resolve()
        assert resolved.settings.adr_dir == Path("inner")

    def test_search_stops_at_repository_root(self, tmp_path: Path, project: Path, paths: AdrsPaths):
        (tmp_path / ".adr-dir").write_text("outside\n", encoding="utf-8")

        resolved = resolve_config(project / "src", paths=paths)

        assert resolved.source == ConfigSource.DEFAULTS
        assert resolved.settings == ProjectSettings()
        assert resolved.root == (project / "src").resolve()


class TestFallbacks:
    def test_global_settings(self, project: Path, paths: AdrsPaths):
        paths.base.mkdir(parents=True)
        paths.global_config_file.write_text("mode: ng\nlogging:\n  level: DEBUG\n", encoding="utf-8")

        resolved = resolve_config(project, paths=paths)

        assert resolved.source == ConfigSource.GLOBAL
        assert resolved.mode == Mode.NG
        assert resolved.root == project.resolve()

    def test_defaults(self, project: Path, paths: AdrsPaths):
        resolved = resolve_config(project, paths=paths)

        assert resolved.source == ConfigSource.DEFAULTS
        assert resolved.directory == project.resolve() / "doc" / "adr"
        assert resolved.path is None


class TestOverrides:
    def test_explicit_file_skips_search(self, tmp_path: Path, project: Path, paths: AdrsPaths):
        (project / ".adr-dir").write_text("found-by-search\n", encoding="utf-8")
        explicit = tmp_path / "elsewhere" / "settings.yaml"
        explicit.parent.mkdir()
        explicit.write_text("adr_dir: chosen\n", encoding="utf-8")

        resolved = resolve_config(project, config_file=explicit, paths=paths)

        assert resolved.source == ConfigSource.EXPLICIT
        assert resolved.directory == explicit.parent.resolve() / "chosen"

    def test_explicit_file_missing(self, tmp_path: Path, paths: AdrsPaths):
        with pytest.raises(ConfigurationError):
            resolve_config(tmp_path, config_file=tmp_path / "nope.yaml", paths=paths)

    def test_directory_override_wins(self, project: Path, paths: AdrsPaths):
        (project / "adrs.yaml").write_text("adr_dir: decisions\nmode: ng\n", encoding="utf-8")

        resolved = resolve_config(project, adr_dir=Path("override"), paths=paths)

        assert resolved.directory == project.resolve() / "override"
        assert resolved.directory_overridden
        assert resolved.source == ConfigSource.PROJECT
        assert resolved.mode == Mode.NG


class TestMalformedSettings:
    @pytest.mark.parametrize(
        "content",
        ["adr_dir: [unclosed\n", "- a list\n", "mode: sideways\n", "ambiguity_ratio: -1\n"],
    )
    def test_bad_yaml_settings(self, project: Path, paths: AdrsPaths, content: str):
        (project / "adrs.yaml").write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            resolve_config(project, paths=paths)

    def test_bad_toml_settings(self, project: Path, paths: AdrsPaths):
        (project / "adrs.toml").write_text("adr_dir = \n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            resolve_config(project, paths=paths)

    def test_empty_yaml_means_defaults(self, project: Path, paths: AdrsPaths):
        (project / "adrs.yaml").write_text("", encoding="utf-8")

        assert resolve_config(project, paths=paths).settings == ProjectSettings()


class TestSaveSettings:
    def test_compatible_mode_writes_legacy_file(self, tmp_path: Path):
        path = save_settings(tmp_path, ProjectSettings(adr_dir=Path("docs/adr")))

        assert path == tmp_path / ".adr-dir"
        assert load_settings_file(path).adr_dir == Path("docs/adr")

    def test_ng_mode_writes_yaml(self, tmp_path: Path):
        settings = ProjectSettings(adr_dir=Path("decisions"), mode=Mode.NG, ambiguity_ratio=1.5)

        path = save_settings(tmp_path, settings)

        assert path == tmp_path / "adrs.yaml"
        assert load_settings_file(path) == settings
