"""
Diagnostic logging for colb itself.

The banners and command traces users see go through the presenter. This
logger only records what colb decided (resolved paths, launched argv,
exit statuses) and is silent unless the workspace's [logging] table
turns a handler on::

    [logging]
    level = "debug"
    console = true   # stderr
    file = true      # ~/.colb/colb.log
"""

import logging
import sys
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".colb" / "colb.log"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 2

FORMAT = "%(asctime)s colb[%(process)d] %(levelname)s: %(message)s"


def _handlers(config: LoggingConfig, log_file: Path) -> Iterator[logging.Handler]:
    if config.console:
        yield logging.StreamHandler(sys.stderr)
    if config.file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        yield RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)


class ColbLogger(ILogger):
    """
    ILogger on top of a stdlib logger configured from a LoggingConfig.

    Building a ColbLogger replaces the handlers of the named stdlib logger,
    so reconfiguring after the [logging] table is read never duplicates
    output.
    """

    def __init__(
        self,
        config: LoggingConfig | None = None,
        log_file: Path | None = None,
        name: str = "colb",
    ) -> None:
        config = config or LoggingConfig()
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._logger.setLevel(config.level.upper())
        for old in list(self._logger.handlers):
            self._logger.removeHandler(old)
            old.close()

        formatter = logging.Formatter(FORMAT)
        for handler in _handlers(config, log_file or DEFAULT_LOG_FILE):
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        if not self._logger.handlers:
            # Keeps logging.lastResort from printing warnings to stderr.
            self._logger.addHandler(logging.NullHandler())

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)


class NullLogger(ILogger):
    """Drops everything; used before bootstrap and in tests."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass
