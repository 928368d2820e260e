"""
Pydantic models for colb.
"""

from .base import ColbBaseModel, ImmutableModel
from .config import (
    BuildConfiguration,
    BuildOutput,
    BuildType,
    ColbConfig,
    EventHandlers,
    LoggingConfig,
    TestConfiguration,
    TestResultConfig,
)

__all__ = [
    "BuildConfiguration",
    "BuildOutput",
    "BuildType",
    "ColbBaseModel",
    "ColbConfig",
    "EventHandlers",
    "ImmutableModel",
    "LoggingConfig",
    "TestConfiguration",
    "TestResultConfig",
]
