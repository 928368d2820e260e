"""
Configuration models.

Provides Pydantic models for the two build profiles (upstream and
package) and the small value types the command builder consumes.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, ClassVar, Literal

from pydantic import ConfigDict, Field

from .base import ColbBaseModel, ImmutableModel

if TYPE_CHECKING:
    from ...services.command.args import ArgStack

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(ColbBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class BuildType(str, Enum):
    """CMake build type passed as -DCMAKE_BUILD_TYPE."""

    DEBUG = "Debug"
    RELEASE = "Release"
    REL_WITH_DEB_INFO = "RelWithDebInfo"

    def apply(self, args: ArgStack) -> None:
        args.arg(cmake_arg("CMAKE_BUILD_TYPE", self.value))


def handler_str(name: str, enabled: bool) -> str:
    """Encode one colcon event handler toggle, e.g. ``summary+``."""
    return f"{name}{'+' if enabled else '-'}"


def cmake_arg(name: str, value: str) -> str:
    return f"-D{name}={value}"


class EventHandlers(ConfigBaseModel):
    """colcon event handlers, each enabled or disabled by name."""

    desktop_notification: bool = False
    console_cohesion: bool = False
    summary: bool = True
    console_start_end: bool = True

    @classmethod
    def silent(cls) -> EventHandlers:
        return cls(
            desktop_notification=False,
            console_cohesion=False,
            summary=False,
            console_start_end=False,
        )

    @classmethod
    def compile_logs_only(cls) -> EventHandlers:
        """Only show grouped compiler output, no progress lines."""
        handlers = cls.silent()
        handlers.console_cohesion = True
        return handlers

    def apply(self, args: ArgStack) -> None:
        """Serialize into ``--event-handlers name+ name- ...``."""
        args.arg("--event-handlers")
        args.arg(handler_str("summary", self.summary))
        args.arg(handler_str("console_start_end", self.console_start_end))
        args.arg(handler_str("console_cohesion", self.console_cohesion))
        args.arg(handler_str("desktop_notification", self.desktop_notification))


class BuildConfiguration(ConfigBaseModel):
    """A build profile applied to one category of packages."""

    DEFAULT_MIXINS: ClassVar[tuple[str, ...]] = ("compile-commands", "ninja", "mold", "ccache")

    mixins: list[str] = Field(default_factory=list)
    cmake_args: list[str] = Field(default_factory=list)
    build_type: BuildType = BuildType.DEBUG
    parallel_jobs: Annotated[int, Field(gt=0)] | None = None
    event_handlers: EventHandlers = Field(default_factory=EventHandlers)
    build_tests: bool = False

    @classmethod
    def upstream(cls) -> BuildConfiguration:
        """Profile for dependencies: full progress output, no tests."""
        return cls(
            mixins=list(cls.DEFAULT_MIXINS),
            cmake_args=[],
            build_type=BuildType.DEBUG,
            parallel_jobs=8,
            event_handlers=EventHandlers(),
            build_tests=False,
        )

    @classmethod
    def active(cls) -> BuildConfiguration:
        """Profile for the package under development: compiler output, tests on."""
        return cls(
            mixins=list(cls.DEFAULT_MIXINS),
            cmake_args=[],
            build_type=BuildType.DEBUG,
            parallel_jobs=8,
            event_handlers=EventHandlers.compile_logs_only(),
            build_tests=True,
        )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False


class ColbConfig(ConfigBaseModel):
    """Complete colb configuration as stored in .colb.toml."""

    upstream: BuildConfiguration = Field(default_factory=BuildConfiguration.upstream)
    package: BuildConfiguration = Field(default_factory=BuildConfiguration.active)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def with_overrides(
        self,
        build_type: BuildType | None = None,
        skip_tests: bool = False,
    ) -> ColbConfig:
        """Return a copy with command-line overrides applied.

        ``build_type`` only affects the package profile. ``skip_tests``
        turns off test building for both profiles. The receiver is left
        untouched so overrides never leak back into the file.
        """
        config = self.model_copy(deep=True)
        if build_type is not None:
            config.package.build_type = BuildType(build_type)
        if skip_tests:
            config.upstream.build_tests = False
            config.package.build_tests = False
        return config


class BuildOutput(ImmutableModel):
    """Layout of the build and install spaces."""

    symlink: bool = False
    merge: bool = False


class TestConfiguration(ImmutableModel):
    """Options for a ``colcon test`` invocation."""

    __test__ = False

    package: str
    test: str | None = None
    event_handlers: EventHandlers = Field(default_factory=EventHandlers.silent)


class TestResultConfig(ImmutableModel):
    """Options for a ``colcon test-result`` invocation."""

    __test__ = False

    package: str
    verbose: bool = False
    all: bool = False
