"""Message log entries and the batches handed to display surfaces.

Purpose
-------
Provide the immutable records stored in the message log and the flat
``kinds``/``data`` batch shape used by the sync protocol.

Contents
--------
* :class:`MessageKind` – entry discriminator with its wire tag.
* :class:`MessageEntry` – one rendered console entry.
* :class:`MessageBatch` – slice of the log starting at ``start_index``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageKind(Enum):
    """Kinds of entries a display surface must interpret."""

    HTML = "html"
    CLEAR = "clear"
    BEGIN_GROUP = "group"
    BEGIN_GROUP_COLLAPSED = "groupCollapsed"
    END_GROUP = "groupEnd"

    @property
    def tag(self) -> str:
        """Return the flat string used on the display boundary."""

        return self.value

    @property
    def carries_data(self) -> bool:
        """Return ``True`` for kinds whose ``data`` holds markup."""

        return self not in (MessageKind.CLEAR, MessageKind.END_GROUP)

    @classmethod
    def from_tag(cls, tag: str) -> "MessageKind":
        """Return the kind for ``tag``.

        >>> MessageKind.from_tag("groupEnd") is MessageKind.END_GROUP
        True
        """
        try:
            return cls(tag)
        except ValueError as exc:
            raise ValueError(f"Unknown message kind: {tag!r}") from exc


@dataclass(frozen=True, slots=True)
class MessageEntry:
    """Immutable rendered console entry.

    ``data`` is markup for ``html`` and group-begin entries and always empty
    for ``clear`` and ``groupEnd``.
    """

    kind: MessageKind
    data: str = ""

    def __post_init__(self) -> None:
        if not self.kind.carries_data and self.data:
            raise ValueError(f"{self.kind.tag} entries carry no data")

    @classmethod
    def html(cls, markup: str) -> "MessageEntry":
        return cls(MessageKind.HTML, markup)

    @classmethod
    def clear(cls) -> "MessageEntry":
        return cls(MessageKind.CLEAR)

    @classmethod
    def begin_group(cls, label_markup: str, *, expanded: bool) -> "MessageEntry":
        kind = MessageKind.BEGIN_GROUP if expanded else MessageKind.BEGIN_GROUP_COLLAPSED
        return cls(kind, label_markup)

    @classmethod
    def end_group(cls) -> "MessageEntry":
        return cls(MessageKind.END_GROUP)


@dataclass(frozen=True, slots=True)
class MessageBatch:
    """Entries ``start_index .. start_index + len(kinds) - 1`` of the log."""

    start_index: int
    kinds: tuple[str, ...] = ()
    data: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.kinds) != len(self.data):
            raise ValueError("kinds and data must have the same length")

    def __len__(self) -> int:
        return len(self.kinds)

    @property
    def next_index(self) -> int:
        """Index a display surface should request next."""

        return self.start_index + len(self.kinds)

    @classmethod
    def from_entries(cls, start_index: int, entries: list[MessageEntry]) -> "MessageBatch":
        return cls(
            start_index=start_index,
            kinds=tuple(entry.kind.tag for entry in entries),
            data=tuple(entry.data for entry in entries),
        )


__all__ = ["MessageBatch", "MessageEntry", "MessageKind"]
