"""
Console presenter for terminal output.

Renders the phase banners and command traces printed around each
external tool run. Whether ANSI colors are used is decided by the caller
and passed in, so output can be tested without a real terminal.
"""

import sys
from collections.abc import Sequence

from ..core.interfaces.presenter import IPresenter

RESET = "\033[0m"
DECO = "\033[90m"  # bright black
HEADER = "\033[1;94m"  # bold bright blue
ERROR = "\033[91m"
WARNING = "\033[93m"

DIVIDER_TEXT = "Output"


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Example output::

        ┌[ Building 'my_pkg' ]
        └> colcon --log-base /dev/null build ...
        [ \\ \\ \\ Output / / / ]
    """

    def __init__(self, use_color: bool = False, file=None, err_file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output file (defaults to sys.stdout)
            err_file: Error output file (defaults to sys.stderr)
        """
        self._use_color = use_color
        self._file = file or sys.stdout
        self._err_file = err_file or sys.stderr

    @property
    def use_color(self) -> bool:
        return self._use_color

    def _deco(self, text: str) -> str:
        if self._use_color:
            return f"{DECO}{text}{RESET}"
        return text

    def print(self, message: str) -> None:
        print(message, file=self._file)

    def print_error(self, message: str) -> None:
        if self._use_color:
            print(f"{ERROR}Error: {message}{RESET}", file=self._err_file)
        else:
            print(f"Error: {message}", file=self._err_file)

    def print_warning(self, message: str) -> None:
        if self._use_color:
            print(f"{WARNING}Warning: {message}{RESET}", file=self._err_file)
        else:
            print(f"Warning: {message}", file=self._err_file)

    def header(self, title: str) -> None:
        if self._use_color:
            title = f"{HEADER}{title}{RESET}"
        print(f"{self._deco('┌[')} {title} {self._deco(']')}", file=self._file)

    def context(self, message: str) -> None:
        print(f"{self._deco('└>')} {message}", file=self._file)

    def command(self, program: str, args: Sequence[str]) -> None:
        """Print ``└> program arg ...`` and the output divider."""
        print(f"{self._deco('└>')} {format_command(program, args)}", file=self._file)
        self.divider()

    def divider(self) -> None:
        left = self._deco("[ \\ \\ \\")
        right = self._deco("/ / / ]")
        print(f"{left} {DIVIDER_TEXT} {right}", file=self._file)
        self._file.flush()


def format_command(program: str, args: Sequence[str]) -> str:
    """Join a program and its arguments the way they are traced."""
    return " ".join([program, *args])
