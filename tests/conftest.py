from __future__ import annotations

from collections.abc import Sequence
from io import StringIO

import pytest
from rich.console import Console

from lib_console_sync.adapters.formatter import RichMarkupFormatter
from lib_console_sync.application import ConsoleClient, ScriptConsole


class RecordingDisplay:
    """Display surface double remembering every callback."""

    def __init__(self) -> None:
        self.notifications: list[int] = []
        self.batches: list[tuple[int, tuple[str, ...], tuple[str, ...]]] = []

    def did_output_message(self, index: int) -> None:
        self.notifications.append(index)

    def did_get_messages(self, start_index: int, kinds: Sequence[str], data: Sequence[str]) -> None:
        self.batches.append((start_index, tuple(kinds), tuple(data)))


class RecordingSink:
    def __init__(self) -> None:
        self.messages: list[tuple[object, str]] = []

    def output_debug_message(self, level, message: str) -> None:
        self.messages.append((level, message))


@pytest.fixture(autouse=True)
def _clean_console_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CONSOLE_ORIGIN", "CONSOLE_MAX_BATCH", "CONSOLE_FORCE_COLOR", "CONSOLE_NO_COLOR", "CONSOLE_DEBUG_LOGGER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def formatter() -> RichMarkupFormatter:
    return RichMarkupFormatter()


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def client(formatter: RichMarkupFormatter, display: RecordingDisplay, sink: RecordingSink) -> ConsoleClient:
    return ConsoleClient(formatter=formatter, display=display, debug_sink=sink)


@pytest.fixture
def script_console(client: ConsoleClient, formatter: RichMarkupFormatter) -> ScriptConsole:
    return ScriptConsole(client, formatter)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=100, color_system=None)
