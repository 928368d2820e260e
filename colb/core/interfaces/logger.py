"""
Logger interface for internal diagnostic output.

Separate from IPresenter, which prints the banners and command traces
the user sees. Use ILogger for diagnostics that only matter when
debugging colb itself.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Interface for internal logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Log a debug-level message with %-style arguments."""

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        """Log a recoverable problem, e.g. a folder clean could not remove."""
