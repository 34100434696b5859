"""Adapter implementations for the console engine's ports."""

from __future__ import annotations

from .display import RichDisplayAdapter
from .dump import DumpAdapter
from .formatter import RichMarkupFormatter
from .script import PythonRealm, PythonScriptEnvironment
from .sinks import LoggingDebugSink

__all__ = [
    "DumpAdapter",
    "LoggingDebugSink",
    "PythonRealm",
    "PythonScriptEnvironment",
    "RichDisplayAdapter",
    "RichMarkupFormatter",
]
