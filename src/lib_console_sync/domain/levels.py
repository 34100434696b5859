"""Console log levels and the rendering table that dispatches on them.

Purpose
-------
Model the log levels a script console emits and bind each of them to exactly
one rendering branch, so the printer never falls through silently when a new
level is introduced.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* :class:`RenderBranch` and :class:`LevelRendering` descriptors.
* ``_LEVEL_TABLE`` mapping every level to its descriptor.

System Role
-----------
Consumed by the printer (branch selection and value templates) and by the
debug sink (translation into :mod:`logging` severities).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum


class LogLevel(Enum):
    """Levels a script console can print at."""

    ASSERT = "assert"
    COUNT = "count"
    COUNT_RESET = "countReset"
    DEBUG = "debug"
    DIR = "dir"
    ERROR = "error"
    GROUP = "group"
    GROUP_COLLAPSED = "groupCollapsed"
    INFO = "info"
    LOG = "log"
    TIME_END = "timeEnd"
    TIME_LOG = "timeLog"
    TRACE = "trace"
    WARN = "warn"

    @property
    def rendering(self) -> "LevelRendering":
        """Return the rendering descriptor bound to this level."""

        return _LEVEL_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant used by the debug sink."""

        return _PYTHON_LEVELS.get(self, logging.INFO)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a level from its enum name or console method name.

        >>> LogLevel.from_name("countReset") is LogLevel.COUNT_RESET
        True
        >>> LogLevel.from_name(" warn ") is LogLevel.WARN
        True
        """
        normalized = name.strip()
        for member in cls:
            if member.value == normalized or member.name == normalized.upper():
                return member
        raise ValueError(f"Unknown log level: {name!r}")


class RenderBranch(Enum):
    """Structural branch the printer takes for a level."""

    TRACE = "trace"
    GROUP = "group"
    VALUES = "values"


@dataclass(frozen=True, slots=True)
class LevelRendering:
    """Describe how a level is rendered.

    ``css_class`` and ``prefix`` only apply to the values branch; a level
    without a CSS class gets the bare styled span.
    """

    branch: RenderBranch
    css_class: str | None = None
    prefix: str = ""


_BARE = LevelRendering(RenderBranch.VALUES)
_WARN = LevelRendering(RenderBranch.VALUES, "warn", "(w) ")

_LEVEL_TABLE: dict[LogLevel, LevelRendering] = {
    LogLevel.ASSERT: _BARE,
    LogLevel.COUNT: _BARE,
    LogLevel.COUNT_RESET: _WARN,
    LogLevel.DEBUG: LevelRendering(RenderBranch.VALUES, "debug", "(d) "),
    LogLevel.DIR: _BARE,
    LogLevel.ERROR: LevelRendering(RenderBranch.VALUES, "error", "(e) "),
    LogLevel.GROUP: LevelRendering(RenderBranch.GROUP),
    LogLevel.GROUP_COLLAPSED: LevelRendering(RenderBranch.GROUP),
    LogLevel.INFO: LevelRendering(RenderBranch.VALUES, "info", "(i) "),
    LogLevel.LOG: LevelRendering(RenderBranch.VALUES, "log", " "),
    LogLevel.TIME_END: _BARE,
    LogLevel.TIME_LOG: _BARE,
    LogLevel.TRACE: LevelRendering(RenderBranch.TRACE),
    LogLevel.WARN: _WARN,
}
# Every level must be listed; the printer relies on the lookup never missing.

_missing = [level.name for level in LogLevel if level not in _LEVEL_TABLE]
if _missing:  # pragma: no cover - guards future edits
    raise RuntimeError("Log levels without a rendering: " + ", ".join(_missing))

_PYTHON_LEVELS: dict[LogLevel, int] = {
    LogLevel.ASSERT: logging.ERROR,
    LogLevel.COUNT_RESET: logging.WARNING,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
}


__all__ = ["LevelRendering", "LogLevel", "RenderBranch"]
