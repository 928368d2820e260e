"""
Native Click implementation of the config command.

Usage: colb config
"""

import os
import shlex
import subprocess

import click

from ...core.exceptions import EditorError
from ...services.execution.runner import normalize_status
from ..context import ColbContext
from ..decorators import handle_errors

EDITOR_VARIABLE = "EDITOR"


def open_in_editor(path: str) -> int:
    """
    Open a file in $EDITOR and wait for it to exit.

    Returns:
        The editor's exit status

    Raises:
        EditorError: $EDITOR is unset or cannot be started
    """
    editor = os.environ.get(EDITOR_VARIABLE, "")
    if not editor.strip():
        raise EditorError(f"Couldn't read ${EDITOR_VARIABLE}: environment variable not set")

    try:
        result = subprocess.run([*shlex.split(editor), path])
    except (OSError, ValueError) as e:
        raise EditorError(f"Couldn't run ${EDITOR_VARIABLE} '{editor}': {e}", cause=e) from e
    return normalize_status(result.returncode)


@click.command("config")
@click.pass_obj
@handle_errors
def config(ctx: ColbContext) -> None:
    """Open the configuration file in $EDITOR.

    The file is opened even if it does not exist yet or fails to parse.
    Exits with the editor's exit code.
    """
    raise SystemExit(open_in_editor(str(ctx.config_path)))
