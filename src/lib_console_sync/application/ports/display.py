"""Display surface port describing the push and pull callbacks.

Purpose
-------
Define the passive consumer the console engine notifies. A display surface is
told the index of every appended entry and receives batches when it asks for
entries it has not seen yet.

System Role
-----------
Keeps the engine independent of terminals, browsers or test doubles; any
object implementing both methods can be bound to a session.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class DisplaySurfacePort(Protocol):
    """Receive console message notifications and batches.

    Examples
    --------
    >>> class Recorder:
    ...     def did_output_message(self, index):
    ...         pass
    ...     def did_get_messages(self, start_index, kinds, data):
    ...         pass
    >>> isinstance(Recorder(), DisplaySurfacePort)
    True
    """

    def did_output_message(self, index: int) -> None:
        """Handle the notification that entry ``index`` was appended."""

    def did_get_messages(self, start_index: int, kinds: Sequence[str], data: Sequence[str]) -> None:
        """Handle a batch of entries beginning at ``start_index``."""


__all__ = ["DisplaySurfacePort"]
