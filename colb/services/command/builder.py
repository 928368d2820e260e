"""
Staged command builder for colcon, ninja and ctest invocations.

A colcon command line is assembled through a fixed chain of stages::

    ColconInvocation          --log-base ...
      .build(output)    -> BuildVerb        build --build-base ...
        .configure(cfg) -> ConfiguredBuild  --executor ... -DCMAKE_BUILD_TYPE=...
          .select(what) -> FinalizedCommand --packages-...
      .test(cfg)        -> BasicVerb        test ...
      .test_result(cfg) -> BasicVerb        test-result ...
        .finalize()     -> FinalizedCommand

Each stage only offers the operations valid at that point and hands a
copy of its arguments to the next stage. Flags are always emitted in the
order colcon expects, and reusing a stage never alters a command that
was already built from it.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ...core.models.config import (
    BuildConfiguration,
    BuildOutput,
    TestConfiguration,
    TestResultConfig,
    cmake_arg,
)
from .args import ArgStack

COLCON = "colcon"
NINJA = "ninja"
CTEST = "ctest"

BUILD_BASE = "build"
INSTALL_BASE = "install"
LOG_BASE = "log"


@dataclass(frozen=True)
class DependenciesFor:
    """Build everything the packages depend on, but not the packages."""

    packages: tuple[str, ...]

    def apply(self, args: ArgStack) -> None:
        args.arg("--packages-up-to").args(self.packages)
        args.arg("--packages-skip").args(self.packages)


@dataclass(frozen=True)
class ThesePackages:
    """Build exactly the given packages."""

    packages: tuple[str, ...]

    def apply(self, args: ArgStack) -> None:
        args.arg("--packages-select").args(self.packages)


What = DependenciesFor | ThesePackages


@dataclass(frozen=True)
class FinalizedCommand:
    """A complete command line, ready to be handed to a runner."""

    program: str
    args: tuple[str, ...]
    cwd: Path

    def argv(self) -> list[str]:
        return [self.program, *self.args]


def anchored_regex(name: str) -> str:
    """Anchored ctest name filter matching exactly one test."""
    return f"^{name}$"


class _Stage:
    def __init__(self, args: ArgStack, workspace: Path) -> None:
        self._args = args
        self._workspace = workspace

    @property
    def args(self) -> list[str]:
        """Arguments accumulated so far (a copy)."""
        return self._args.to_list()

    def _extended(self) -> ArgStack:
        """Fresh copy of the arguments for the next stage to append to."""
        return ArgStack().args(self._args)

    def _finalize(self) -> FinalizedCommand:
        return FinalizedCommand(COLCON, tuple(self._args), self._workspace)


class ColconInvocation(_Stage):
    """A bare colcon call that still needs a verb."""

    def __init__(self, workspace: str | Path, log: bool) -> None:
        """
        Args:
            workspace: Workspace root, used as working directory
            log: Keep colcon logs in <workspace>/log instead of discarding them
        """
        args = ArgStack()
        args.arg("--log-base")
        args.arg(LOG_BASE if log else os.devnull)
        super().__init__(args, Path(workspace))

    def build(self, output: BuildOutput | None = None) -> BuildVerb:
        output = output or BuildOutput()
        args = self._extended()
        args.arg("build")
        args.args(["--build-base", BUILD_BASE, "--install-base", INSTALL_BASE])
        if output.symlink:
            args.arg("--symlink-install")
        if output.merge:
            args.arg("--merge-install")
        return BuildVerb(args, self._workspace)

    def test(self, config: TestConfiguration) -> BasicVerb:
        args = self._extended()
        args.arg("test")
        # --event-handlers once; colcon reads a repeated flag identically.
        config.event_handlers.apply(args)
        args.args(["--ctest-args", "--output-on-failure"])
        if config.test is not None:
            args.arg("-R")
            args.arg(anchored_regex(config.test))
        args.args(["--packages-select", config.package])
        return BasicVerb(args, self._workspace)

    def test_result(self, config: TestResultConfig) -> BasicVerb:
        args = self._extended()
        args.arg("test-result")
        args.args(["--test-result-base", f"{BUILD_BASE}/{config.package}"])
        if config.verbose:
            args.arg("--verbose")
        if config.all:
            args.arg("--all")
        return BasicVerb(args, self._workspace)


class BuildVerb(_Stage):
    """``colcon build`` waiting for a build profile."""

    def configure(self, config: BuildConfiguration) -> ConfiguredBuild:
        """Append the profile's options.

        The order is fixed: colcon (and CMake) let later flags of the same
        kind win, so the build type must come after the extra cmake args.
        """
        args = self._extended()
        if config.parallel_jobs is not None:
            args.args(
                ["--executor", "parallel", "--parallel-workers", str(config.parallel_jobs)]
            )
        config.event_handlers.apply(args)
        if config.mixins:
            args.arg("--mixin").args(config.mixins)
        args.arg("--cmake-args")
        args.arg(cmake_arg("BUILD_TESTING", "ON" if config.build_tests else "OFF"))
        args.args(config.cmake_args)
        config.build_type.apply(args)
        return ConfiguredBuild(args, self._workspace)


class ConfiguredBuild(_Stage):
    """A fully configured ``colcon build`` that only needs its targets."""

    def select(self, what: What) -> FinalizedCommand:
        args = self._extended()
        what.apply(args)
        return FinalizedCommand(COLCON, tuple(args), self._workspace)


class BasicVerb(_Stage):
    """``colcon test`` or ``colcon test-result``, complete as is."""

    def finalize(self) -> FinalizedCommand:
        return self._finalize()


def package_build_dir(workspace: str | Path, package: str) -> Path:
    return Path(workspace) / BUILD_BASE / package


def package_install_dir(workspace: str | Path, package: str) -> Path:
    return Path(workspace) / INSTALL_BASE / package


def ninja_build_target(workspace: str | Path, package: str, target: str) -> FinalizedCommand:
    """Build a single ninja target in a package's build folder, bypassing colcon."""
    build_dir = package_build_dir(workspace, package)
    args = ArgStack().arg("-C").arg(str(build_dir)).arg(target)
    return FinalizedCommand(NINJA, tuple(args), build_dir)


def ctest_single(workspace: str | Path, package: str, test: str) -> FinalizedCommand:
    """Run one test of a package through ctest, bypassing colcon."""
    build_dir = package_build_dir(workspace, package)
    args = (
        ArgStack()
        .arg("--test-dir")
        .arg(str(build_dir))
        .arg("--output-on-failure")
        .arg("-R")
        .arg(anchored_regex(test))
    )
    return FinalizedCommand(CTEST, tuple(args), build_dir)


def dependencies_for(packages: Sequence[str]) -> DependenciesFor:
    return DependenciesFor(tuple(packages))


def these_packages(packages: Sequence[str]) -> ThesePackages:
    return ThesePackages(tuple(packages))
