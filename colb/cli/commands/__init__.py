"""
Click command implementations for colb CLI.

Each module corresponds to a colb command (e.g., build.py implements
'colb build'). Commands are registered with the main CLI group via the
register_commands() function in colb.cli.
"""

from .build import build
from .clean import clean
from .config import config
from .init import init
from .test import test

COMMANDS = [
    init,
    build,
    test,
    clean,
    config,
]

__all__ = [
    "COMMANDS",
    "build",
    "clean",
    "config",
    "init",
    "test",
]
