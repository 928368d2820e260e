"""
Native Click implementation of the build command.

Usage: colb build [options] [packages...]
"""

import click

from ...core.models.config import BuildType
from ..context import ColbContext
from ..decorators import handle_errors

BUILD_TYPE_CHOICES = [t.value for t in BuildType]


@click.command("build")
@click.argument("packages", nargs=-1)
@click.option(
    "-s",
    "--skip-dependencies",
    is_flag=True,
    default=False,
    help="Don't rebuild dependencies.",
)
@click.option(
    "-t",
    "--skip-tests",
    is_flag=True,
    default=False,
    help="Don't build tests.",
)
@click.option(
    "-b",
    "--build-type",
    type=click.Choice(BUILD_TYPE_CHOICES, case_sensitive=False),
    default=None,
    help="Override the package profile's build type.",
)
@click.pass_obj
@handle_errors
def build(
    ctx: ColbContext,
    packages: tuple[str, ...],
    skip_dependencies: bool,
    skip_tests: bool,
    build_type: str | None,
) -> None:
    """Build one or more packages.

    Dependencies are built first with the upstream profile, then the
    packages with the package profile. Without PACKAGES, the package
    containing the current directory is built.

    \b
    Examples:
        colb build                      # Package in the current directory
        colb build foo bar -s           # foo and bar only, no dependencies
        colb build -t -b Release        # No tests, Release for the package
    """
    ctx.show_workspace()
    config = ctx.load_config()
    ctx.workflow(config).build(
        packages=list(packages),
        skip_dependencies=skip_dependencies,
        skip_tests=skip_tests,
        build_type=BuildType(build_type) if build_type else None,
    )
