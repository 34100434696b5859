"""Dump adapter supporting text, JSON, and HTML exports of the message log.

Outputs
-------
* Text with group nesting shown as indentation.
* JSON arrays of ``{"index", "kind", "data"}`` records.
* A standalone HTML document where groups become nested ``<details>``.

Purpose
-------
Turn a message log snapshot into a shareable artefact without a live display
surface.

Contents
--------
* :class:`DumpAdapter` - implementation of :class:`DumpPort`.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from lib_console_sync.adapters._markup import markup_to_text
from lib_console_sync.application.ports.dump import DumpPort
from lib_console_sync.domain.dump import DumpFormat
from lib_console_sync.domain.messages import MessageEntry, MessageKind

_CLEAR_TEXT = "--- console cleared ---"

_HTML_HEAD = (
    "<html><head><title>lib_console_sync dump</title>"
    "<style>"
    ".debug{color:gray}.info{color:teal}.warn{color:olive}.error{color:red}"
    "details{margin-left:1em}.entry{font-family:monospace}"
    "</style></head><body>"
)
_HTML_TAIL = "</body></html>"


class DumpAdapter(DumpPort):
    """Render message log snapshots into text, JSON, or HTML."""

    def dump(
        self,
        entries: Sequence[MessageEntry],
        *,
        dump_format: DumpFormat,
        path: Path | None = None,
    ) -> str:
        """Render ``entries`` according to ``dump_format``.

        Examples
        --------
        >>> DumpAdapter().dump([MessageEntry.html("hi")], dump_format=DumpFormat.JSON).startswith('[')
        True
        """
        if dump_format is DumpFormat.TEXT:
            content = self._render_text(entries)
        elif dump_format is DumpFormat.JSON:
            content = self._render_json(entries)
        elif dump_format is DumpFormat.HTML:
            content = self._render_html(entries)
        else:  # pragma: no cover - exhaustiveness guard
            raise ValueError(f"Unsupported dump format: {dump_format}")

        if path is not None:
            path.write_text(content, encoding="utf-8")
        return content

    @staticmethod
    def _render_text(entries: Sequence[MessageEntry]) -> str:
        """Render entries as indented plain text.

        Examples
        --------
        >>> entries = [MessageEntry.begin_group("g", expanded=True), MessageEntry.html("a"), MessageEntry.end_group()]
        >>> DumpAdapter._render_text(entries)
        'g\\n  a'
        """
        lines: list[str] = []
        depth = 0
        for entry in entries:
            indent = "  " * depth
            if entry.kind is MessageKind.CLEAR:
                lines.append(indent + _CLEAR_TEXT)
            elif entry.kind is MessageKind.END_GROUP:
                depth = max(0, depth - 1)
            else:
                lines.extend(indent + line for line in markup_to_text(entry.data).split("\n"))
                if entry.kind is not MessageKind.HTML:
                    depth += 1
        return "\n".join(lines)

    @staticmethod
    def _render_json(entries: Sequence[MessageEntry]) -> str:
        """Serialise entries into a deterministic JSON array.

        Examples
        --------
        >>> DumpAdapter._render_json([])
        '[]'
        """
        payload = [{"index": index, "kind": entry.kind.tag, "data": entry.data} for index, entry in enumerate(entries)]
        return json.dumps(payload, indent=2, sort_keys=True)

    @staticmethod
    def _render_html(entries: Sequence[MessageEntry]) -> str:
        """Generate an HTML document with groups as nested ``<details>``.

        Unbalanced group ends are ignored and open groups are closed at the end.

        Examples
        --------
        >>> DumpAdapter._render_html([]).startswith('<html>')
        True
        """
        parts = [_HTML_HEAD]
        depth = 0
        for entry in entries:
            if entry.kind is MessageKind.HTML:
                parts.append(f'<div class="entry">{entry.data}</div>')
            elif entry.kind is MessageKind.CLEAR:
                parts.append('<hr class="clear">')
            elif entry.kind is MessageKind.END_GROUP:
                if depth:
                    parts.append("</details>")
                    depth -= 1
            else:
                opened = " open" if entry.kind is MessageKind.BEGIN_GROUP else ""
                parts.append(f"<details{opened}><summary>{entry.data}</summary>")
                depth += 1
        parts.append("</details>" * depth)
        parts.append(_HTML_TAIL)
        return "".join(parts)


__all__ = ["DumpAdapter"]
