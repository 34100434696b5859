"""Port for turning script values into markup or plain text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueFormatterPort(Protocol):
    """Render values and errors produced by a script environment.

    Implementations are pure and never raise for a value the environment
    produced.
    """

    def format_value(self, value: Any) -> str:
        """Return markup describing ``value``."""

    def format_error(self, error: BaseException) -> str:
        """Return markup describing an exception object."""

    def format_values(self, values: Sequence[Any]) -> str:
        """Return the plain text joining ``values`` for log output."""


__all__ = ["ValueFormatterPort"]
