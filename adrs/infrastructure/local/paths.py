"""Locates the user-level adrs configuration directory."""

import os
from pathlib import Path

GLOBAL_CONFIG_NAME = "config.yaml"


class AdrsPaths:
    """Manages paths within the user's adrs configuration directory.

    Directory structure:
        $XDG_CONFIG_HOME/adrs/      (default ~/.config/adrs/)
            config.yaml             # User-wide defaults
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        """Initialize paths.

        Args:
            base_dir: Override the configuration directory. Useful for testing.
        """
        self._base = base_dir

    @property
    def base(self) -> Path:
        """Configuration directory, honouring XDG_CONFIG_HOME."""
        if self._base is not None:
            return self._base
        xdg = os.environ.get("XDG_CONFIG_HOME")
        root = Path(xdg) if xdg else Path.home() / ".config"
        return root / "adrs"

    @property
    def global_config_file(self) -> Path:
        """User-wide settings file."""
        return self.base / GLOBAL_CONFIG_NAME
