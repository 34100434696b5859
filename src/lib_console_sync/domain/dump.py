"""Dump format enumeration for message log exports.

Purpose
-------
Standardise the snapshot formats shared by the CLI, the session façade and the
dump adapter.
"""

from __future__ import annotations

from enum import Enum


class DumpFormat(Enum):
    """Supported export targets for message log dumps.

    Examples
    --------
    >>> DumpFormat.TEXT.value
    'text'
    >>> DumpFormat.HTML.name
    'HTML'
    """

    TEXT = "text"
    JSON = "json"
    HTML = "html"

    @classmethod
    def from_name(cls, name: str) -> "DumpFormat":
        """Return the matching enum member for a case-insensitive name.

        Examples
        --------
        >>> DumpFormat.from_name('JSON') is DumpFormat.JSON
        True
        >>> DumpFormat.from_name('  html  ') is DumpFormat.HTML
        True
        >>> DumpFormat.from_name('yaml')
        Traceback (most recent call last):
        ...
        ValueError: Unsupported dump format: 'yaml'
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported dump format: {name!r}")


__all__ = ["DumpFormat"]
