"""Dump port defining message log snapshot exports.

Purpose
-------
Describe how a snapshot of the message log is turned into a shareable artefact
so the session façade can trigger exports without coupling to an adapter.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from lib_console_sync.domain.dump import DumpFormat
from lib_console_sync.domain.messages import MessageEntry


@runtime_checkable
class DumpPort(Protocol):
    """Export message log entries to text, JSON or HTML.

    Examples
    --------
    >>> class Recorder:
    ...     def dump(self, entries, *, dump_format, path=None):
    ...         return f"{len(list(entries))}:{dump_format.value}"
    >>> isinstance(Recorder(), DumpPort)
    True
    >>> Recorder().dump([], dump_format=DumpFormat.TEXT)
    '0:text'
    """

    def dump(
        self,
        entries: Sequence[MessageEntry],
        *,
        dump_format: DumpFormat,
        path: Path | None = None,
    ) -> str:
        """Render ``entries`` according to ``dump_format``."""


__all__ = ["DumpPort"]
