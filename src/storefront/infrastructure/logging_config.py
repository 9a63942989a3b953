"""Logging setup for the storefront process.

Only the ``storefront`` logger gets a handler, so library loggers and
pytest's own capture are left alone.
"""

from __future__ import annotations

import logging

import click

LOGGER_NAME = "storefront"
LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ClickEchoHandler(logging.Handler):
    """Writes records through ``click.echo`` to whatever stderr is current."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


class LoggerManager:
    """Attaches one console handler to the package logger."""

    def __init__(self, log_level: int | str = logging.WARNING) -> None:
        self.log_level = log_level.upper() if isinstance(log_level, str) else log_level
        self.logger = logging.getLogger(LOGGER_NAME)

    def setup(self) -> None:
        self.logger.setLevel(self.log_level)

        # Repeated calls only adjust the level.
        if any(isinstance(h, ClickEchoHandler) for h in self.logger.handlers):
            return

        self.logger.addHandler(self._create_console_handler())
        self.logger.debug("Logging configured at level %s", self.log_level)

    def _create_console_handler(self) -> logging.Handler:
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        return handler


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Initializes and configures the package logger."""
    LoggerManager(level).setup()
