"""
Click-based CLI for colb.

This module provides the main Click command group and serves as the
entry point for the colb CLI.

Usage:
    from colb.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .context import ColbContext
from .decorators import handle_errors

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("colb")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="colb")
@click.option(
    "-w",
    "--workspace",
    default=None,
    help="Workspace root (default: nearest folder with build/ or .colb.toml).",
)
@click.pass_context
@handle_errors
def cli(ctx: click.Context, workspace: str | None) -> None:
    """colb - a colcon wrapper for faster change, compile, test cycles

    \b
    Quick Start:
        colb init              Write .colb.toml with the default profiles
        colb build             Build the package you are in (and its deps)
        colb test -t my_test   Rebuild and run a single test

    \b
    Housekeeping:
        colb clean <package>   Remove build/ and install/ of a package
        colb config            Edit .colb.toml in $EDITOR
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = ColbContext.create(workspace)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "ColbContext",
    "__version__",
    "cli",
    "register_commands",
]
