"""Display surface adapters."""

from __future__ import annotations

from .rich_display import RichDisplayAdapter

__all__ = ["RichDisplayAdapter"]
