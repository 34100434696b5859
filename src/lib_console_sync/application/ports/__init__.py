"""Ports connecting the console engine to its collaborators."""

from __future__ import annotations

from .display import DisplaySurfacePort
from .dump import DumpPort
from .formatter import ValueFormatterPort
from .script import ScriptEnvironmentPort
from .sink import DebugSinkPort

__all__ = [
    "DebugSinkPort",
    "DisplaySurfacePort",
    "DumpPort",
    "ScriptEnvironmentPort",
    "ValueFormatterPort",
]
