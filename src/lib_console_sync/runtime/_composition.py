"""Composition root wiring a console session from its settings.

Purpose
-------
Translate :class:`SessionSettings` into a live :class:`ConsoleSession`: one
engine, one realm with ``console`` bound, and the default adapters unless the
caller injects replacements.
"""

from __future__ import annotations

from typing import Any

from lib_console_sync.adapters import (
    DumpAdapter,
    LoggingDebugSink,
    PythonRealm,
    PythonScriptEnvironment,
    RichDisplayAdapter,
    RichMarkupFormatter,
)
from lib_console_sync.application import ConsoleClient, ScriptConsole
from lib_console_sync.application.ports import DebugSinkPort, DisplaySurfacePort, DumpPort, ValueFormatterPort
from lib_console_sync.application.use_cases.dump import create_capture_dump

from ._session import ConsoleSession
from ._settings import SessionSettings

REALM_CONSOLE_NAME = "console"


def build_session(
    settings: SessionSettings,
    *,
    display: DisplaySurfacePort | None = None,
    formatter: ValueFormatterPort | None = None,
    dump_port: DumpPort | None = None,
    bindings: dict[str, Any] | None = None,
) -> ConsoleSession:
    """Assemble a session; the display (if any) is bound before the first append."""

    value_formatter = formatter if formatter is not None else RichMarkupFormatter()
    client = ConsoleClient(
        formatter=value_formatter,
        display=display,
        debug_sink=_create_debug_sink(settings),
        origin=settings.origin,
        max_batch=settings.max_batch,
    )
    if isinstance(display, RichDisplayAdapter):
        display.attach(client.send_messages)

    script_console = ScriptConsole(client, value_formatter)
    realm = PythonRealm(bindings)
    realm.bind(REALM_CONSOLE_NAME, script_console)
    client.attach(PythonScriptEnvironment(realm))

    capture_dump = create_capture_dump(
        message_log=client.message_log,
        dump_port=dump_port if dump_port is not None else DumpAdapter(),
    )
    return ConsoleSession(client=client, console=script_console, realm=realm, capture_dump=capture_dump)


def create_terminal_display(settings: SessionSettings) -> RichDisplayAdapter:
    return RichDisplayAdapter(force_color=settings.force_color, no_color=settings.no_color)


def _create_debug_sink(settings: SessionSettings) -> DebugSinkPort | None:
    if settings.debug_logger is None:
        return None
    return LoggingDebugSink(settings.debug_logger)


__all__ = ["REALM_CONSOLE_NAME", "build_session", "create_terminal_display"]
