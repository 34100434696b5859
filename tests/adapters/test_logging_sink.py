from __future__ import annotations

import logging

import pytest

from lib_console_sync.adapters.formatter import RichMarkupFormatter
from lib_console_sync.adapters.sinks import DEFAULT_LOGGER_NAME, LoggingDebugSink
from lib_console_sync.application import ConsoleClient
from lib_console_sync.domain import LogLevel, ValuesPayload


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.ASSERT, logging.ERROR),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.COUNT_RESET, logging.WARNING),
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.LOG, logging.INFO),
        (LogLevel.TIME_END, logging.INFO),
    ],
)
def test_sink_maps_levels(caplog: pytest.LogCaptureFixture, level: LogLevel, expected: int) -> None:
    sink = LoggingDebugSink()
    with caplog.at_level(logging.DEBUG, logger=DEFAULT_LOGGER_NAME):
        sink.output_debug_message(level, "message")
    record = caplog.records[-1]
    assert record.name == DEFAULT_LOGGER_NAME
    assert record.levelno == expected
    assert record.console_level == level.value
    assert record.getMessage() == "message"


def test_sink_uses_named_logger() -> None:
    assert LoggingDebugSink("custom.console").logger.name == "custom.console"


def test_client_mirrors_plain_output_to_the_sink() -> None:
    sink = LoggingDebugSink("tests.console.sink")
    handler = _Collect()
    sink.logger.addHandler(handler)
    sink.logger.setLevel(logging.DEBUG)
    try:
        client = ConsoleClient(formatter=RichMarkupFormatter(), debug_sink=sink)
        client.printer(LogLevel.INFO, ValuesPayload(("%s", "<raw>")))
    finally:
        sink.logger.removeHandler(handler)
    assert [record.getMessage() for record in handler.records] == ["%s <raw>"]
