"""
Execution of external tools.
"""

from .runner import CommandRunner, exit_on_error, normalize_status

__all__ = ["CommandRunner", "exit_on_error", "normalize_status"]
