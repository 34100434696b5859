"""Completion record returned by a script environment.

Purpose
-------
Represent the three ways a unit of script execution can finish: a normal
return with a value, a normal return without one, or an abrupt completion
carrying the thrown value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CompletionKind(Enum):
    NORMAL = "normal"
    ABRUPT = "abrupt"


@dataclass(frozen=True, slots=True)
class Completion:
    """Outcome of evaluating one script.

    >>> Completion.normal(4).has_value
    True
    >>> Completion.empty().has_value
    False
    >>> Completion.throw(ValueError("x")).is_abrupt
    True
    """

    kind: CompletionKind
    value: Any = None
    has_value: bool = False

    @property
    def is_abrupt(self) -> bool:
        return self.kind is CompletionKind.ABRUPT

    @property
    def is_object_error(self) -> bool:
        """Return ``True`` when the thrown value is an exception object."""

        return self.is_abrupt and isinstance(self.value, BaseException)

    @classmethod
    def normal(cls, value: Any) -> "Completion":
        return cls(CompletionKind.NORMAL, value, True)

    @classmethod
    def empty(cls) -> "Completion":
        return cls(CompletionKind.NORMAL)

    @classmethod
    def throw(cls, value: Any) -> "Completion":
        return cls(CompletionKind.ABRUPT, value, True)


__all__ = ["Completion", "CompletionKind"]
