"""
Entry point for the `colb` command-line interface.

colb is a colcon wrapper for faster change, compile, test cycles in a
multi-package workspace.
"""


def main():
    """Main entry point for the colb CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
