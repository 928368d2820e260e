"""
Verb-level orchestration: build, test and clean.

Every phase is a single external command. Phases run strictly one after
another and the first non-zero exit status aborts the verb with a
PhaseFailed carrying that status.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.exceptions import InvalidArgumentError
from ...core.models.config import (
    BuildConfiguration,
    BuildOutput,
    BuildType,
    ColbConfig,
    EventHandlers,
    TestConfiguration,
    TestResultConfig,
)
from ..command.builder import (
    ColconInvocation,
    FinalizedCommand,
    What,
    ctest_single,
    dependencies_for,
    ninja_build_target,
    package_build_dir,
    package_install_dir,
    these_packages,
)
from ..workspace import require_package

if TYPE_CHECKING:
    from ...core.interfaces.logger import ILogger
    from ...core.interfaces.presenter import IPresenter
    from ..execution.runner import CommandRunner


def format_packages(packages: Sequence[str]) -> str:
    return ", ".join(f"'{p}'" for p in packages)


@dataclass
class CleanReport:
    """What clean() removed and what it failed to remove."""

    removed: list[Path] = field(default_factory=list)
    errors: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def nothing_to_clean(self) -> bool:
        return not self.removed and not self.errors


class Workflow:
    """
    Runs the build, test and clean verbs against one workspace.

    Args:
        workspace: Canonical workspace root
        config: Loaded configuration; never modified
        runner: Launches the finalized commands
        presenter: Prints the phase banners
    """

    def __init__(
        self,
        workspace: Path,
        config: ColbConfig,
        runner: CommandRunner,
        presenter: IPresenter,
        logger: ILogger | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._workspace = workspace
        self._config = config
        self._runner = runner
        self._presenter = presenter
        self._logger = logger
        self._cwd = cwd

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ...core.interfaces.logger import ILogger
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _run(self, command: FinalizedCommand) -> None:
        self._runner.run_checked(command)

    def _colcon_build(self, profile: BuildConfiguration, what: What) -> None:
        command = (
            ColconInvocation(self._workspace, log=False)
            .build(BuildOutput())
            .configure(profile)
            .select(what)
        )
        self._run(command)

    def _build_dependencies(self, profile: BuildConfiguration, packages: Sequence[str]) -> None:
        self._presenter.header(f"Building dependencies for {format_packages(packages)}")
        self._colcon_build(profile, dependencies_for(packages))

    def _build_packages(self, profile: BuildConfiguration, packages: Sequence[str]) -> None:
        self._presenter.header(f"Building {format_packages(packages)}")
        self._colcon_build(profile, these_packages(packages))

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def resolve_packages(self, packages: Sequence[str] | None) -> list[str]:
        """Explicit packages as given, else the package around the cwd."""
        if packages:
            return [require_package(p, self._cwd) for p in packages]
        return [require_package(None, self._cwd)]

    def build(
        self,
        packages: Sequence[str] | None = None,
        skip_dependencies: bool = False,
        skip_tests: bool = False,
        build_type: BuildType | None = None,
    ) -> None:
        """
        Build packages, and unless skipped their dependencies first.

        Dependencies use the upstream profile, the packages themselves the
        package profile. ``build_type`` only overrides the latter.
        """
        pkgs = self.resolve_packages(packages)
        config = self._config.with_overrides(skip_tests=skip_tests)
        self.logger.debug(
            "build: packages=%s skip_dependencies=%s skip_tests=%s build_type=%s",
            pkgs,
            skip_dependencies,
            skip_tests,
            build_type,
        )

        if not skip_dependencies:
            self._build_dependencies(config.upstream, pkgs)

        config = config.with_overrides(build_type=build_type)
        self._build_packages(config.package, pkgs)

    def test(
        self,
        package: str | None = None,
        test: str | None = None,
        direct: bool = False,
        skip_rebuild: bool = False,
        rebuild_dependencies: bool = False,
    ) -> None:
        """
        Rebuild and test a package.

        Phases, each skipped according to the flags:

        1. rebuild dependencies (and the package itself when a single test
           is requested, since phase 2 then only builds the test target)
        2. rebuild the test target through ninja, or the whole package
        3. run the test directly through ctest and stop, or through colcon
        4. print the verbose test results
        """
        pkg = require_package(package, self._cwd)
        config = self._config
        self.logger.debug(
            "test: package=%s test=%s direct=%s skip_rebuild=%s rebuild_dependencies=%s",
            pkg,
            test,
            direct,
            skip_rebuild,
            rebuild_dependencies,
        )

        if rebuild_dependencies and not skip_rebuild:
            self._build_dependencies(config.upstream, [pkg])
            if test is not None:
                self._build_packages(config.package, [pkg])

        if not skip_rebuild:
            if test is not None:
                self._presenter.header(f"Building test '{test}' in '{pkg}'")
                self._run(ninja_build_target(self._workspace, pkg, test))
            else:
                self._build_packages(config.package, [pkg])

        if test is not None:
            self._presenter.header(f"Running test '{test}' in '{pkg}'")
            if direct:
                self._run(ctest_single(self._workspace, pkg, test))
                return
        else:
            if direct:
                self._presenter.print_warning("--direct only applies to a single --test")
            self._presenter.header(f"Running tests for '{pkg}'")

        self._run(
            ColconInvocation(self._workspace, log=True)
            .test(
                TestConfiguration(
                    package=pkg,
                    test=test,
                    event_handlers=EventHandlers.silent(),
                )
            )
            .finalize()
        )

        self._presenter.header(f"Test results for '{pkg}'")
        self._run(
            ColconInvocation(self._workspace, log=False)
            .test_result(TestResultConfig(package=pkg, verbose=True, all=True))
            .finalize()
        )

    def clean(self, package: str) -> CleanReport:
        """
        Remove a package's build and install folders.

        Removal errors are reported per folder and do not stop the other
        folder from being removed. Merged install spaces are not handled.
        """
        if not package:
            raise InvalidArgumentError("Package argument must not be empty!", argument="package")

        self._presenter.header(f"Cleaning up '{package}'")
        report = CleanReport()
        for folder in (
            package_build_dir(self._workspace, package),
            package_install_dir(self._workspace, package),
        ):
            if not folder.exists():
                continue
            self._presenter.context(f"rm -r '{folder}'")
            try:
                shutil.rmtree(folder)
            except OSError as e:
                self.logger.warning("Failed to remove %s: %s", folder, e)
                self._presenter.print_error(str(e))
                report.errors.append((folder, str(e)))
            else:
                report.removed.append(folder)

        if report.nothing_to_clean:
            self._presenter.context("# Nothing to clean up")
        return report
