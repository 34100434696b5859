"""Use case exporting the message log through a dump adapter.

Purpose
-------
Provide the application-layer glue between the message log and the dump
adapter.

System Role
-----------
Invoked by :meth:`lib_console_sync.runtime.ConsoleSession.dump`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from lib_console_sync.application.ports.dump import DumpPort
from lib_console_sync.domain.dump import DumpFormat
from lib_console_sync.domain.message_log import MessageLog


def create_capture_dump(
    *,
    message_log: MessageLog,
    dump_port: DumpPort,
) -> Callable[..., str]:
    """Return a callable rendering the current log through ``dump_port``.

    Examples
    --------
    >>> class DummyDump:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def dump(self, entries, *, dump_format, path=None):
    ...         self.calls.append((len(entries), dump_format, path))
    ...         return 'payload'
    >>> dump_port = DummyDump()
    >>> capture = create_capture_dump(message_log=MessageLog(), dump_port=dump_port)
    >>> capture(dump_format=DumpFormat.TEXT)
    'payload'
    >>> dump_port.calls[0][1] is DumpFormat.TEXT
    True
    """

    def capture(*, dump_format: DumpFormat, path: Path | None = None) -> str:
        """Render a snapshot; the log itself is left untouched."""

        return dump_port.dump(message_log.snapshot(), dump_format=dump_format, path=path)

    return capture


__all__ = ["create_capture_dump"]
