"""Application use cases wiring the domain to the ports."""

from __future__ import annotations

from .dump import create_capture_dump
from .evaluate import UNCAUGHT_PREFIX, render_completion
from .render import escape_html_entities, render_group_label, render_trace, render_values
from .sync import build_batch

__all__ = [
    "UNCAUGHT_PREFIX",
    "build_batch",
    "create_capture_dump",
    "escape_html_entities",
    "render_completion",
    "render_group_label",
    "render_trace",
    "render_values",
]
