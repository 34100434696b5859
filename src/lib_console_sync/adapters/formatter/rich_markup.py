"""Rich-powered value formatter implementing :class:`ValueFormatterPort`.

Purpose
-------
Render evaluated values as syntax-highlighted markup (Rich's repr highlighter
exported with inline styles) and exceptions as an error line followed by the
frames of their traceback.

System Role
-----------
Default formatter wired by the composition root; display surfaces receive its
markup unchanged inside ``html`` entries.
"""

from __future__ import annotations

import html
import traceback
from collections.abc import Sequence
from io import StringIO
from typing import Any

from rich.console import Console
from rich.pretty import Pretty, pretty_repr

from lib_console_sync.application.ports.formatter import ValueFormatterPort

_VALUE_FORMAT = '<span class="value">{code}</span>'


class RichMarkupFormatter(ValueFormatterPort):
    """Format values with Rich and errors with :mod:`traceback`.

    Examples
    --------
    >>> formatter = RichMarkupFormatter()
    >>> formatter.format_values(["total", 3, None])
    'total 3 None'
    >>> '>4<' in formatter.format_value(4)
    True
    >>> formatter.format_error(ValueError("x < y"))
    '<span class="error">ValueError: x &lt; y</span>'
    """

    def __init__(self, *, width: int = 100, max_frames: int = 20) -> None:
        self._width = width
        self._max_frames = max_frames

    def format_value(self, value: Any) -> str:
        console = Console(
            file=StringIO(),
            record=True,
            force_terminal=True,
            legacy_windows=False,
            color_system="truecolor",
            width=self._width,
        )
        console.print(Pretty(value), end="")
        code = console.export_html(inline_styles=True, code_format="{code}")
        return _VALUE_FORMAT.format(code=code.rstrip("\n").replace("\n", "<br>"))

    def format_error(self, error: BaseException) -> str:
        name = type(error).__name__
        message = str(error)
        header = f"{name}: {message}" if message else name
        parts = [f'<span class="error">{html.escape(header)}</span>']
        frames = traceback.extract_tb(error.__traceback__)[-self._max_frames :] if self._max_frames else []
        for frame in reversed(frames):
            location = f"{frame.filename}:{frame.lineno}"
            parts.append(f'<br><span class="frame">  at {html.escape(frame.name)} ({html.escape(location)})</span>')
        return "".join(parts)

    def format_values(self, values: Sequence[Any]) -> str:
        return " ".join(value if isinstance(value, str) else pretty_repr(value) for value in values)


__all__ = ["RichMarkupFormatter"]
