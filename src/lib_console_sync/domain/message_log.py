"""Append-only log of rendered console messages.

Purpose
-------
Hold every entry a console session produced, in order, so display surfaces can
catch up from any index they already have.

Contents
--------
* :class:`MessageLog` with append, slicing and iteration helpers.

System Role
-----------
Single source of truth for the sync protocol. Indices are stable: nothing is
ever removed or rewritten, and a ``clear`` is itself an appended entry.
"""

from __future__ import annotations

from typing import Iterator

from .messages import MessageEntry


class MessageLog:
    """Ordered, 0-indexed, append-only sequence of :class:`MessageEntry`.

    >>> log = MessageLog()
    >>> log.append(MessageEntry.html("<b>hi</b>"))
    0
    >>> log.append(MessageEntry.clear())
    1
    >>> [entry.kind.tag for entry in log.entries_from(0)]
    ['html', 'clear']
    >>> log.entries_from(2)
    []
    """

    def __init__(self) -> None:
        self._entries: list[MessageEntry] = []

    def append(self, entry: MessageEntry) -> int:
        """Store ``entry`` at the end and return its index."""

        self._entries.append(entry)
        return len(self._entries) - 1

    def entries_from(self, start_index: int, limit: int | None = None) -> list[MessageEntry]:
        """Return entries from ``start_index`` onwards, oldest first.

        Negative or out-of-range indices yield an empty list. ``limit`` caps the
        number of returned entries without skipping any.
        """
        if start_index < 0 or start_index >= len(self._entries):
            return []
        stop = len(self._entries) if limit is None else min(len(self._entries), start_index + limit)
        return self._entries[start_index:stop]

    def snapshot(self) -> list[MessageEntry]:
        """Return a copy of every entry."""

        return list(self._entries)

    def __getitem__(self, index: int) -> MessageEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[MessageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["MessageLog"]
