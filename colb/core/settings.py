"""
Pydantic Settings for colb configuration.

Provides settings loading from the workspace's .colb.toml, environment
variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigParseError
from .models.config import BuildConfiguration, ColbConfig, LoggingConfig

CONFIG_FILENAME = ".colb.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def config_file_path(workspace: str | Path) -> Path:
    """Path of the configuration file for a workspace."""
    return Path(workspace) / CONFIG_FILENAME


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads a single .colb.toml file.

    A missing file yields no values. Unreadable or malformed files raise,
    since silently falling back to defaults would build with the wrong
    profile.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}
        path = self._config_path
        if path is None or not path.exists():
            return self._data

        try:
            with open(path, "rb") as f:
                self._data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            _get_logger().debug("Failed to parse config file %s: %s", path, e)
            raise ConfigParseError(
                f"Could not parse config file: {e}", file_path=str(path), cause=e
            ) from e
        except OSError as e:
            _get_logger().debug("Failed to read config file %s: %s", path, e)
            raise ConfigFileError(
                f"Could not open config file: {e}", file_path=str(path), cause=e
            ) from e

        _get_logger().debug("Loaded config file %s", path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class ColbSettings(BaseSettings):
    """colb settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (COLB_<section>__<field>)
    3. TOML config file (<workspace>/.colb.toml)
    4. Model defaults
    """

    model_config = {
        "env_prefix": "COLB_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    upstream: BuildConfiguration = Field(default_factory=BuildConfiguration.upstream)
    package: BuildConfiguration = Field(default_factory=BuildConfiguration.active)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The config path cannot be passed through here, so load_settings()
        hands it over in a module-level variable.
        """
        toml_source = TomlConfigSource(settings_cls, config_path=_current_config_path)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    def to_config(self) -> ColbConfig:
        return ColbConfig(
            upstream=self.upstream,
            package=self.package,
            logging=self.logging,
        )


# Module-level variable for passing to settings_customise_sources
_current_config_path: Path | None = None


def load_settings(config_path: Path | None = None, **overrides: Any) -> ColbSettings:
    """Load colb settings from a config file and the environment.

    Args:
        config_path: Path to .colb.toml (may not exist)
        **overrides: Values taking priority over every other source

    Returns:
        ColbSettings instance with all sources merged

    Raises:
        ConfigFileError: The file exists but cannot be read
        ConfigParseError: The file is not valid TOML or fails validation
    """
    global _current_config_path

    _current_config_path = config_path
    try:
        return ColbSettings(**overrides)
    except ValidationError as e:
        raise ConfigParseError(
            f"Could not parse config file: {e}",
            file_path=str(config_path) if config_path else None,
            cause=e,
        ) from e
    finally:
        _current_config_path = None
