"""
Native Click implementation of the test command.

Usage: colb test [options] [package]
"""

import click

from ..context import ColbContext
from ..decorators import handle_errors


@click.command("test")
@click.argument("package", required=False)
@click.option("-t", "--test", "test_name", default=None, help="Build and run only this test.")
@click.option(
    "-d",
    "--direct",
    is_flag=True,
    default=False,
    help="Run the single test through ctest instead of colcon test.",
)
@click.option(
    "-s",
    "--skip-rebuild",
    is_flag=True,
    default=False,
    help="Don't rebuild the package.",
)
@click.option(
    "-r",
    "--rebuild-dependencies",
    is_flag=True,
    default=False,
    help="Rebuild the package's dependencies first.",
)
@click.pass_obj
@handle_errors
def test(
    ctx: ColbContext,
    package: str | None,
    test_name: str | None,
    direct: bool,
    skip_rebuild: bool,
    rebuild_dependencies: bool,
) -> None:
    """Rebuild and run the tests of a package.

    PACKAGE defaults to the package containing the current directory.
    With --test only that test target is rebuilt (through ninja) and run.

    \b
    Examples:
        colb test                       # All tests of the current package
        colb test foo -t test_bar       # Rebuild and run test_bar only
        colb test -t test_bar -d -s     # Rerun test_bar through ctest
    """
    ctx.show_workspace()
    config = ctx.load_config()
    ctx.workflow(config).test(
        package=package,
        test=test_name,
        direct=direct,
        skip_rebuild=skip_rebuild,
        rebuild_dependencies=rebuild_dependencies,
    )
