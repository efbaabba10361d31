"""Tests for AdrsPaths path computation."""

from pathlib import Path

import pytest

from adrs.infrastructure.local.paths import AdrsPaths


class TestAdrsPaths:
    def test_default_uses_home_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME, paths derive from ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        test_home = Path("/test/home")
        monkeypatch.setattr(Path, "home", lambda: test_home)

        paths = AdrsPaths()

        assert paths.base == test_home / ".config" / "adrs"
        assert paths.global_config_file == test_home / ".config" / "adrs" / "config.yaml"

    def test_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """XDG_CONFIG_HOME replaces ~/.config."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg")

        assert AdrsPaths().global_config_file == Path("/xdg/adrs/config.yaml")

    def test_base_dir_override(self) -> None:
        """An explicit base directory ignores the environment."""
        paths = AdrsPaths(base_dir=Path("/custom"))

        assert paths.global_config_file == Path("/custom/config.yaml")
