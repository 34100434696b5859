"""Debug sink forwarding console output to :mod:`logging`."""

from __future__ import annotations

import logging

from lib_console_sync.application.ports.sink import DebugSinkPort
from lib_console_sync.domain.levels import LogLevel

DEFAULT_LOGGER_NAME = "lib_console_sync.console"


class LoggingDebugSink(DebugSinkPort):
    """Log every formatted console message on a stdlib logger.

    Examples
    --------
    >>> sink = LoggingDebugSink("tests.sink")
    >>> sink.output_debug_message(LogLevel.WARN, "careful")
    """

    def __init__(self, logger_name: str = DEFAULT_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def output_debug_message(self, level: LogLevel, message: str) -> None:
        self._logger.log(level.to_python_level(), message, extra={"console_level": level.value})


__all__ = ["DEFAULT_LOGGER_NAME", "LoggingDebugSink"]
