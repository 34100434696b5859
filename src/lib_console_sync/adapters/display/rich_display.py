"""Rich-powered terminal display surface implementing :class:`DisplaySurfacePort`.

Purpose
-------
Show a console session in a terminal. The adapter behaves like any remote
display surface: it is told about new entries by index, pulls what it has not
seen yet and reconstructs group nesting from the begin/end markers.

Contents
--------
* :data:`_STYLE_MAP` - default CSS-class-to-Rich-style mapping.
* :class:`RichDisplayAdapter` - the display surface used by the CLI.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from rich.console import Console
from rich.text import Text

from lib_console_sync.adapters._markup import leading_css_class, markup_to_text
from lib_console_sync.application.ports.display import DisplaySurfacePort
from lib_console_sync.domain.messages import MessageKind

_STYLE_MAP: Mapping[str, str] = {
    "debug": "dim",
    "info": "cyan",
    "log": "",
    "warn": "yellow",
    "error": "red",
    "trace": "magenta",
}

#: Default Rich styles keyed by the CSS class of a rendered entry.

_INDENT = "  "


class RichDisplayAdapter(DisplaySurfacePort):
    """Render console entries with Rich, keeping track of what was shown.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=80)
    >>> display = RichDisplayAdapter(console=console)
    >>> display.did_get_messages(0, ["group", "html", "groupEnd"], ["<b>outer</b>", "inner", ""])
    >>> console.export_text().splitlines()
    ['▾ outer', '  inner']
    >>> display.next_index
    3
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._style_map = {**_STYLE_MAP, **(styles or {})}
        self._fetch: Callable[[int], object] | None = None
        self._next_index = 0
        self._depth = 0

    @property
    def console(self) -> Console:
        return self._console

    @property
    def next_index(self) -> int:
        """Index of the first entry this surface has not rendered."""

        return self._next_index

    @property
    def depth(self) -> int:
        return self._depth

    def attach(self, fetch: Callable[[int], object]) -> None:
        """Install the pull callback (usually ``ConsoleClient.send_messages``)."""

        self._fetch = fetch

    def did_output_message(self, index: int) -> None:
        if self._fetch is None or index < self._next_index:
            return
        self._fetch(self._next_index)

    def did_get_messages(self, start_index: int, kinds: Sequence[str], data: Sequence[str]) -> None:
        for offset, (tag, markup) in enumerate(zip(kinds, data)):
            index = start_index + offset
            if index < self._next_index:
                continue
            self._render(MessageKind.from_tag(tag), markup)
            self._next_index = index + 1

    def _render(self, kind: MessageKind, markup: str) -> None:
        if kind is MessageKind.CLEAR:
            self._console.clear()
            self._depth = 0
            return
        if kind is MessageKind.END_GROUP:
            self._depth = max(0, self._depth - 1)
            return
        if kind is MessageKind.HTML:
            self._print(markup_to_text(markup), self._style_for(markup))
            return
        marker = "▾" if kind is MessageKind.BEGIN_GROUP else "▸"
        self._print(f"{marker} {markup_to_text(markup)}", "bold")
        self._depth += 1

    def _style_for(self, markup: str) -> str:
        if self._no_color:
            return ""
        css_class = leading_css_class(markup)
        return self._style_map.get(css_class, "") if css_class else ""

    def _print(self, text: str, style: str) -> None:
        prefix = _INDENT * self._depth
        indented = "\n".join(prefix + line for line in text.split("\n"))
        self._console.print(Text(indented, style=style), highlight=False)


__all__ = ["RichDisplayAdapter"]
