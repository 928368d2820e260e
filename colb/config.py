"""Configuration loading and management for colb."""

from __future__ import annotations

import json
from pathlib import Path

from .core.exceptions import ConfigExistsError, ConfigFileError
from .core.models.config import BuildConfiguration, ColbConfig, LoggingConfig
from .core.settings import CONFIG_FILENAME, config_file_path, load_settings

__all__ = [
    "CONFIG_FILENAME",
    "config_file_path",
    "load_config",
    "render_config",
    "save_config",
    "write_default_config",
]


def load_config(workspace: str | Path) -> ColbConfig:
    """
    Load the configuration of a workspace.

    A missing .colb.toml is not an error: the built-in defaults are used.

    Args:
        workspace: Workspace root containing .colb.toml

    Returns:
        ColbConfig with defaults and environment overrides applied
    """
    return load_settings(config_path=config_file_path(workspace)).to_config()


def _toml_value(val) -> str:
    """Format a scalar or list as a TOML value."""
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, int):
        return str(val)
    if isinstance(val, list):
        return "[" + ", ".join(_toml_value(v) for v in val) + "]"
    # JSON string escaping is valid for TOML basic strings
    return json.dumps(str(val))


def _profile_lines(name: str, profile: BuildConfiguration) -> list[str]:
    lines = [f"[{name}]"]
    lines.append(f"mixins = {_toml_value(profile.mixins)}")
    lines.append(f"cmake_args = {_toml_value(profile.cmake_args)}")
    lines.append(f"build_type = {_toml_value(profile.build_type.value)}")
    if profile.parallel_jobs is not None:
        lines.append(f"parallel_jobs = {profile.parallel_jobs}")
    lines.append(f"build_tests = {_toml_value(profile.build_tests)}")
    lines.append("")

    handlers = profile.event_handlers
    lines.append(f"[{name}.event_handlers]")
    lines.append(f"desktop_notification = {_toml_value(handlers.desktop_notification)}")
    lines.append(f"console_cohesion = {_toml_value(handlers.console_cohesion)}")
    lines.append(f"summary = {_toml_value(handlers.summary)}")
    lines.append(f"console_start_end = {_toml_value(handlers.console_start_end)}")
    lines.append("")
    return lines


def render_config(config: ColbConfig) -> str:
    """
    Render a configuration as TOML.

    Both profiles are always written in full so the file documents every
    option. The [logging] table is only written when it differs from the
    defaults.
    """
    # Build TOML content manually (to avoid adding a TOML writer dependency)
    lines: list[str] = []
    lines.extend(_profile_lines("upstream", config.upstream))
    lines.extend(_profile_lines("package", config.package))

    defaults = LoggingConfig()
    if config.logging != defaults:
        lines.append("[logging]")
        lines.append(f"level = {_toml_value(config.logging.level)}")
        lines.append(f"console = {_toml_value(config.logging.console)}")
        lines.append(f"file = {_toml_value(config.logging.file)}")
        lines.append("")

    return "\n".join(lines)


def save_config(config: ColbConfig, config_path: Path) -> None:
    """Write a configuration to ``config_path``."""
    try:
        config_path.write_text(render_config(config))
    except OSError as e:
        raise ConfigFileError(
            f"Could not create '{config_path}': {e}", file_path=str(config_path), cause=e
        ) from e


def write_default_config(workspace: str | Path, force: bool = False) -> Path:
    """
    Write the default configuration into a workspace.

    Args:
        workspace: Workspace root
        force: Overwrite an existing file

    Returns:
        Path of the written file

    Raises:
        ConfigExistsError: The file exists and force is False
        ConfigFileError: The file could not be written
    """
    config_path = config_file_path(workspace)
    if config_path.exists() and not force:
        raise ConfigExistsError(
            f"Will not overwrite '{config_path}' without --force",
            file_path=str(config_path),
        )
    save_config(ColbConfig(), config_path)
    return config_path
