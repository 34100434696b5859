"""Batch construction for the sync protocol."""

from __future__ import annotations

from lib_console_sync.domain.message_log import MessageLog
from lib_console_sync.domain.messages import MessageBatch


def build_batch(log: MessageLog, start_index: int, *, max_batch: int | None = None) -> MessageBatch:
    """Slice ``log`` from ``start_index`` into a :class:`MessageBatch`.

    An index at or past the end (or a negative one) yields an empty batch:
    a freshly attached display surface asks for index 0 before anything has
    been logged.

    >>> from lib_console_sync.domain.messages import MessageEntry
    >>> log = MessageLog()
    >>> len(build_batch(log, 0))
    0
    >>> _ = log.append(MessageEntry.html("a"))
    >>> _ = log.append(MessageEntry.end_group())
    >>> build_batch(log, 0).kinds
    ('html', 'groupEnd')
    >>> build_batch(log, 0, max_batch=1).next_index
    1
    """

    if max_batch is not None and max_batch <= 0:
        raise ValueError("max_batch must be positive")
    entries = log.entries_from(start_index, max_batch)
    return MessageBatch.from_entries(start_index, entries)


__all__ = ["build_batch"]
