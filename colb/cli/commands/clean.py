"""
Native Click implementation of the clean command.

Usage: colb clean <package>
"""

import click

from ..context import ColbContext
from ..decorators import handle_errors


@click.command("clean")
@click.argument("package")
@click.pass_obj
@handle_errors
def clean(ctx: ColbContext, package: str) -> None:
    """Remove the build and install folders of a package.

    Errors removing one folder are reported without stopping. Merged
    install spaces are not supported.
    """
    ctx.show_workspace()
    config = ctx.load_config()
    ctx.workflow(config).clean(package)
