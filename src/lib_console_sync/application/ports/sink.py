"""Port for the observability channel that mirrors formatted log output."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_console_sync.domain.levels import LogLevel


@runtime_checkable
class DebugSinkPort(Protocol):
    """Receive the plain text of every values-branch log call."""

    def output_debug_message(self, level: LogLevel, message: str) -> None:
        """Forward ``message`` logged at ``level``."""


__all__ = ["DebugSinkPort"]
