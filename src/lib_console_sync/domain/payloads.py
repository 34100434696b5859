"""Printer payloads: the closed set of argument shapes a log call can carry.

Trace calls carry a label and stack, group calls carry a label, and every
other level carries the raw values to format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .levels import LogLevel, RenderBranch


@dataclass(frozen=True, slots=True)
class ValuesPayload:
    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


@dataclass(frozen=True, slots=True)
class TracePayload:
    label: str = ""
    stack: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stack", tuple(self.stack))


@dataclass(frozen=True, slots=True)
class GroupPayload:
    label: str = ""


PrinterPayload = Union[ValuesPayload, TracePayload, GroupPayload]

_PAYLOAD_FOR_BRANCH: dict[RenderBranch, type] = {
    RenderBranch.TRACE: TracePayload,
    RenderBranch.GROUP: GroupPayload,
    RenderBranch.VALUES: ValuesPayload,
}


def ensure_payload_matches(level: LogLevel, payload: PrinterPayload) -> None:
    """Raise :class:`TypeError` when ``payload`` is not the shape ``level`` takes.

    >>> ensure_payload_matches(LogLevel.TRACE, TracePayload("t", ("f",)))
    >>> ensure_payload_matches(LogLevel.LOG, GroupPayload("g"))
    Traceback (most recent call last):
    ...
    TypeError: log expects ValuesPayload, got GroupPayload
    """
    expected = _PAYLOAD_FOR_BRANCH[level.rendering.branch]
    if not isinstance(payload, expected):
        raise TypeError(f"{level.value} expects {expected.__name__}, got {type(payload).__name__}")


__all__ = ["GroupPayload", "PrinterPayload", "TracePayload", "ValuesPayload", "ensure_payload_matches"]
