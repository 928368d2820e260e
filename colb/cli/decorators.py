"""
Click decorators for colb CLI commands.

- handle_errors: Turns colb exceptions into a message and an exit code
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.di import resolve_or_default
from ..core.exceptions import ColbException, PhaseFailed
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter

F = TypeVar("F", bound=Callable[..., Any])


def _fallback_presenter() -> IPresenter:
    from ..presenters.console import ConsolePresenter

    return ConsolePresenter(use_color=sys.stderr.isatty())


def handle_errors(f: F) -> F:
    """Decorator mapping ColbException to SystemExit.

    A failed child process (PhaseFailed) already printed its own output,
    so only its exit code is propagated. Every other error is printed to
    stderr and exits with the exception's exit code.

    Usage:
        @cli.command()
        @click.pass_obj
        @handle_errors
        def build(ctx: ColbContext):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except PhaseFailed as e:
            raise SystemExit(e.exit_code) from e
        except ColbException as e:
            from ..services.logging import NullLogger

            logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
            logger.debug("Aborting: %s", e)
            presenter = resolve_or_default(IPresenter, _fallback_presenter)  # type: ignore[type-abstract]
            presenter.print_error(e.message)
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
