"""Value formatter adapters."""

from __future__ import annotations

from .rich_markup import RichMarkupFormatter

__all__ = ["RichMarkupFormatter"]
