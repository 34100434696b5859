"""Domain entities and value objects used by the console engine."""

from __future__ import annotations

from .completion import Completion, CompletionKind
from .dump import DumpFormat
from .levels import LevelRendering, LogLevel, RenderBranch
from .message_log import MessageLog
from .messages import MessageBatch, MessageEntry, MessageKind
from .payloads import GroupPayload, PrinterPayload, TracePayload, ValuesPayload

__all__ = [
    "Completion",
    "CompletionKind",
    "DumpFormat",
    "GroupPayload",
    "LevelRendering",
    "LogLevel",
    "MessageBatch",
    "MessageEntry",
    "MessageKind",
    "MessageLog",
    "PrinterPayload",
    "RenderBranch",
    "TracePayload",
    "ValuesPayload",
]
