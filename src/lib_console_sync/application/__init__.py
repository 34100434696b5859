"""Application layer: the console engine and the script-facing console API."""

from __future__ import annotations

from .console_client import DEFAULT_ORIGIN, ConsoleClient
from .script_console import ScriptConsole

__all__ = ["DEFAULT_ORIGIN", "ConsoleClient", "ScriptConsole"]
