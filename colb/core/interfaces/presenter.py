"""
Presenter interface for user-facing output.

Covers the phase banners, command traces and error messages that colb
prints around each external tool invocation.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class IPresenter(ABC):
    """Interface for output presentation."""

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a plain message."""

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""

    @abstractmethod
    def header(self, title: str) -> None:
        """Print a phase banner, e.g. ``┌[ Building 'foo' ]``."""

    @abstractmethod
    def context(self, message: str) -> None:
        """Print a detail line below a banner, e.g. ``└> /ws (Unconfigured)``."""

    @abstractmethod
    def command(self, program: str, args: Sequence[str]) -> None:
        """Print the command about to run, followed by the output divider."""
