import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from adrs.domain.record.render import Mode
from adrs.infrastructure.local.paths import AdrsPaths

DEFAULT_ADR_DIR = Path("doc/adr")


# =============================================================================
# Project Configuration
# =============================================================================


class ProjectSettings(BaseModel):
    """Settings of one record collection, read from the project's settings file."""

    adr_dir: Path = DEFAULT_ADR_DIR  # Relative to the project root
    mode: Mode = Mode.COMPATIBLE
    ambiguity_ratio: float = Field(default=2.0, gt=0)  # Fuzzy find: top score must beat runner-up by this factor


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load process settings from the user-wide config.yaml.

    Project keys in the same file are ignored here; the resolver reads them.
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the settings this model knows about from the YAML file."""
        data = self._load_yaml_config()
        return {k: v for k, v in data.items() if k in self.settings_cls.model_fields}

    def _load_yaml_config(self) -> dict[str, Any]:
        path = AdrsPaths().global_config_file
        if not path.is_file():
            return {}
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError):
            # The resolver reports a broken global file with a proper error
            return {}
        return data if isinstance(data, dict) else {}


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ADRS_LOGGING__")

    level: str = "WARNING"  # Root log level; the CLI stays quiet unless asked
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file: str | None = None  # Log to this file instead of stderr


class Config(BaseSettings):
    """Process-level settings.

    Environment variables (prefix ``ADRS_``):
        ADRS_CONFIG_FILE: Explicit project settings file.
        ADRS_DIR: Record directory override.
        ADRS_LOGGING__LEVEL, ADRS_LOGGING__FILE: Logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADRS_",
        env_nested_delimiter="__",  # Allows ADRS_LOGGING__LEVEL override
        extra="ignore",
    )

    config_file: Path | None = None
    dir: Path | None = None
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include the user-wide YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. yaml_settings - $XDG_CONFIG_HOME/adrs/config.yaml
        """
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Called once by the CLI entry point before any command runs.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level.upper())

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    handler: logging.Handler
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level.upper())
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
