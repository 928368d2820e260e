"""
Runs finalized commands as blocking child processes.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from ...core.exceptions import FATAL_EXIT_CODE, PhaseFailed, ToolLaunchError, ToolNotFoundError
from ...presenters.console import format_command

if TYPE_CHECKING:
    from ...core.interfaces.logger import ILogger
    from ...core.interfaces.presenter import IPresenter
    from ..command.builder import FinalizedCommand


def normalize_status(returncode: int) -> int:
    """Map a subprocess return code to an exit code colb can exit with.

    A negative return code means the child was killed by a signal and has
    no exit status of its own.
    """
    if returncode < 0:
        return FATAL_EXIT_CODE
    return returncode


def exit_on_error(status: int, command: str | None = None) -> None:
    """Raise PhaseFailed for any non-zero status."""
    if status != 0:
        raise PhaseFailed(status, command=command)


class CommandRunner:
    """
    Launches FinalizedCommands.

    Prints the exact command line before starting it so it can be copied
    and rerun by hand, then waits for the child to exit.

    Usage:
        runner = CommandRunner(presenter)
        status = runner.run(command)
    """

    def __init__(self, presenter: IPresenter, logger: ILogger | None = None) -> None:
        self._presenter = presenter
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ...core.interfaces.logger import ILogger
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def run(self, command: FinalizedCommand) -> int:
        """
        Run a command and return its exit status.

        Raises:
            ToolNotFoundError: The executable is not on PATH
            ToolLaunchError: The process could not be started
        """
        self._presenter.command(command.program, command.args)
        self.logger.debug("Running %s in %s", command.argv(), command.cwd)

        if not command.cwd.is_dir():
            raise ToolLaunchError(
                f"Cannot run '{command.program}': working directory '{command.cwd}' does not exist",
                tool=command.program,
                cwd=str(command.cwd),
            )

        try:
            result = subprocess.run(command.argv(), cwd=command.cwd)
        except FileNotFoundError as e:
            raise ToolNotFoundError(command.program, cause=e) from e
        except OSError as e:
            raise ToolLaunchError(
                f"Could not run '{command.program}': {e}",
                tool=command.program,
                cwd=str(command.cwd),
                cause=e,
            ) from e

        status = normalize_status(result.returncode)
        self.logger.debug("%s exited with %d", command.program, status)
        return status

    def run_checked(self, command: FinalizedCommand) -> None:
        """Run a command and raise PhaseFailed unless it succeeds."""
        exit_on_error(self.run(command), format_command(command.program, command.args))
