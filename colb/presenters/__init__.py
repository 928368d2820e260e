"""
Output presenters for colb CLI.
"""

from .console import ConsolePresenter, format_command

__all__ = ["ConsolePresenter", "format_command"]
