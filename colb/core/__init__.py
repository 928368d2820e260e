"""
Core infrastructure for colb.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interfaces for the presenter and logger services
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    FATAL_EXIT_CODE,
    ColbConfigError,
    ColbException,
    ColbExecutionError,
    ColbResolutionError,
    ConfigExistsError,
    ConfigFileError,
    ConfigParseError,
    EditorError,
    InvalidArgumentError,
    PackageNotFoundError,
    PhaseFailed,
    ToolLaunchError,
    ToolNotFoundError,
    WorkspaceNotFoundError,
)

__all__ = [
    "FATAL_EXIT_CODE",
    "ColbConfigError",
    "ColbException",
    "ColbExecutionError",
    "ColbResolutionError",
    "ConfigExistsError",
    "ConfigFileError",
    "ConfigParseError",
    "EditorError",
    "InvalidArgumentError",
    "PackageNotFoundError",
    "PhaseFailed",
    "ServiceContainer",
    "ToolLaunchError",
    "ToolNotFoundError",
    "WorkspaceNotFoundError",
    "bootstrap",
    "get_container",
    "reset",
]
