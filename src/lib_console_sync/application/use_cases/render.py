"""Markup templates applied by the printer.

Purpose
-------
Turn printer payloads into the markup stored in the message log. The
functions here are pure: style consumption and log appends stay in
:class:`~lib_console_sync.application.console_client.ConsoleClient`.

Contents
--------
* :func:`escape_html_entities` – escaping shared by every template.
* :func:`render_trace`, :func:`render_group_label`, :func:`render_values`.
"""

from __future__ import annotations

import html

from lib_console_sync.domain.levels import LogLevel, RenderBranch
from lib_console_sync.domain.payloads import TracePayload


def escape_html_entities(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and quotes.

    >>> escape_html_entities("<b>&\\"</b>")
    '&lt;b&gt;&amp;&quot;&lt;/b&gt;'
    """

    return html.escape(text, quote=True)


def render_trace(payload: TracePayload) -> str:
    """Render a titled, arrow-prefixed stack listing.

    >>> render_trace(TracePayload("", ("<module>",)))
    "<span class='trace'>-> &lt;module&gt;<br></span>"
    """

    parts: list[str] = []
    if payload.label:
        parts.append(f"<span class='title'>{escape_html_entities(payload.label)}</span><br>")
    parts.append("<span class='trace'>")
    for function_name in payload.stack:
        parts.append(f"-> {escape_html_entities(function_name)}<br>")
    parts.append("</span>")
    return "".join(parts)


def render_group_label(label: str, style: str) -> str:
    """Wrap a group label in a span carrying ``style``.

    >>> render_group_label("a<b", "color: red")
    "<span style='color: red'>a&lt;b</span>"
    """

    return f"<span style='{escape_html_entities(style)}'>{escape_html_entities(label)}</span>"


def render_values(level: LogLevel, output: str, style: str) -> str:
    """Wrap already-formatted ``output`` in the span template for ``level``.

    >>> render_values(LogLevel.WARN, "x > 1", "")
    '<span class="warn" style="">(w) x &gt; 1</span>'
    >>> render_values(LogLevel.COUNT, "default: 1", "")
    '<span style="">default: 1</span>'
    """

    rendering = level.rendering
    if rendering.branch is not RenderBranch.VALUES:
        raise ValueError(f"{level.value} is not rendered from values")
    styling = escape_html_entities(style)
    if rendering.css_class is None:
        opening = f'<span style="{styling}">'
    else:
        opening = f'<span class="{rendering.css_class}" style="{styling}">{rendering.prefix}'
    return f"{opening}{escape_html_entities(output)}</span>"


__all__ = ["escape_html_entities", "render_group_label", "render_trace", "render_values"]
