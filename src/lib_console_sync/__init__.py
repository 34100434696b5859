"""Console message synchronization and formatting engine.

Hosts open a :class:`ConsoleSession`, feed it input and structured log calls,
and let display surfaces catch up through the sync protocol.
"""

from __future__ import annotations

from .__init__conf__ import summary_info, version as __version__
from .application import ConsoleClient, ScriptConsole
from .domain import DumpFormat, LogLevel, MessageBatch, MessageEntry, MessageKind
from .runtime import ConsoleSession, open_session

__all__ = [
    "ConsoleClient",
    "ConsoleSession",
    "DumpFormat",
    "LogLevel",
    "MessageBatch",
    "MessageEntry",
    "MessageKind",
    "ScriptConsole",
    "__version__",
    "open_session",
    "summary_info",
]
