"""
Application bootstrap for colb.

Registers the presenter and logger with the DI container. The CLI
bootstraps as soon as it knows whether to use colors; the logger is
reconfigured once the workspace's [logging] table has been read.
"""

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .models.config import LoggingConfig

_initialized = False


def bootstrap(presenter: IPresenter | None = None) -> ServiceContainer:
    """
    Bootstrap the colb application.

    Args:
        presenter: Presenter to register; a colorless console presenter if None

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, presenter)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, presenter: IPresenter | None) -> None:
    """Register core application services."""
    from ..presenters.console import ConsolePresenter

    if presenter is None:
        presenter = ConsolePresenter(use_color=False)
    container.register_singleton(IPresenter, implementation=presenter)  # type: ignore[type-abstract]
    configure_logging(LoggingConfig(), container)


def configure_logging(
    logging_config: LoggingConfig,
    container: ServiceContainer | None = None,
) -> None:
    """(Re)register the logger from a [logging] config table."""
    from ..services.logging import ColbLogger

    container = container or get_container()

    def create_logger() -> ILogger:
        return ColbLogger(logging_config)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False
