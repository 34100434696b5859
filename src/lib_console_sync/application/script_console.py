"""Console object exposed to scripts.

Purpose
-------
Implement the logging entry points a script calls (``console.log`` and
friends): format-specifier processing, counters, timers, assertions, traces
and groups. Every call ends in one :meth:`ConsoleClient.printer` call (or a
clear/group-end append).

Contents
--------
* :class:`ScriptConsole` – the object placed in a realm under ``console``.

System Role
-----------
Sits between script code and the engine; the ``%c`` directive is the only way
scripts set the pending style.
"""

from __future__ import annotations

import re
import sys
import time
from typing import Any, Callable

from rich.pretty import pretty_repr

from lib_console_sync.application.console_client import ConsoleClient
from lib_console_sync.application.ports.formatter import ValueFormatterPort
from lib_console_sync.domain import GroupPayload, LogLevel, TracePayload, ValuesPayload

_SPECIFIER = re.compile(r"%([sdifoOc%])")

DEFAULT_COUNT_LABEL = "default"
DEFAULT_GROUP_LABEL = "Group"
ASSERTION_MESSAGE = "Assertion failed"


def _as_integer(value: Any) -> str:
    try:
        return str(int(value))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _as_float(value: Any) -> str:
    try:
        return repr(float(value))
    except (TypeError, ValueError):
        return "NaN"


class ScriptConsole:
    """Logging API bound to one :class:`ConsoleClient`.

    Examples
    --------
    >>> from lib_console_sync.adapters.formatter import RichMarkupFormatter
    >>> formatter = RichMarkupFormatter()
    >>> client = ConsoleClient(formatter=formatter)
    >>> console = ScriptConsole(client, formatter)
    >>> console.log("%d apples", "3")
    >>> client.message_log[0].data
    '<span class="log" style=""> 3 apples</span>'
    """

    def __init__(
        self,
        client: ConsoleClient,
        formatter: ValueFormatterPort,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._client = client
        self._formatter = formatter
        self._clock = clock
        self._counters: dict[str, int] = {}
        self._timers: dict[str, float] = {}

    # -- logger -------------------------------------------------------------

    def log(self, *data: Any) -> None:
        self._logger(LogLevel.LOG, data)

    def info(self, *data: Any) -> None:
        self._logger(LogLevel.INFO, data)

    def debug(self, *data: Any) -> None:
        self._logger(LogLevel.DEBUG, data)

    def warn(self, *data: Any) -> None:
        self._logger(LogLevel.WARN, data)

    def error(self, *data: Any) -> None:
        self._logger(LogLevel.ERROR, data)

    def dir(self, item: Any = None) -> None:
        """Log ``item`` on its own, without format-specifier processing."""

        self._client.printer(LogLevel.DIR, ValuesPayload((item,)))

    def assert_(self, condition: Any = False, *data: Any) -> None:
        """Log ``data`` at assert level when ``condition`` is falsy."""

        if condition:
            return
        if not data:
            data = (ASSERTION_MESSAGE,)
        elif isinstance(data[0], str):
            data = (f"{ASSERTION_MESSAGE}: {data[0]}", *data[1:])
        else:
            data = (ASSERTION_MESSAGE, *data)
        self._logger(LogLevel.ASSERT, data)

    def clear(self) -> None:
        self._client.clear_output()

    # -- counting -----------------------------------------------------------

    def count(self, label: str = DEFAULT_COUNT_LABEL) -> None:
        """Increment the counter for ``label`` and log ``"label: n"``."""

        self._counters[label] = self._counters.get(label, 0) + 1
        self._logger(LogLevel.COUNT, (f"{label}: {self._counters[label]}",))

    def count_reset(self, label: str = DEFAULT_COUNT_LABEL) -> None:
        """Reset the counter for ``label``; warn when it was never counted."""

        if label in self._counters:
            self._counters[label] = 0
            return
        self._logger(LogLevel.COUNT_RESET, (f'"{label}" doesn\'t have a count',))

    # -- grouping -----------------------------------------------------------

    def group(self, *data: Any) -> None:
        """Open an expanded group labelled by the formatted ``data`` (default ``"Group"``)."""

        self._group(LogLevel.GROUP, data)

    def group_collapsed(self, *data: Any) -> None:
        self._group(LogLevel.GROUP_COLLAPSED, data)

    def group_end(self) -> None:
        self._client.end_group()

    # -- timing -------------------------------------------------------------

    def time(self, label: str = DEFAULT_COUNT_LABEL) -> None:
        """Start a timer named ``label``.

        Parameters
        ----------
        label:
            Timer name; starting a running timer again only logs a warning
            and keeps the original start time.
        """

        if label in self._timers:
            self._logger(LogLevel.WARN, (f"Timer '{label}' already exists.",))
            return
        self._timers[label] = self._clock()

    def time_log(self, label: str = DEFAULT_COUNT_LABEL, *data: Any) -> None:
        elapsed = self._elapsed(label)
        if elapsed is None:
            return
        self._logger(LogLevel.TIME_LOG, (f"{label}: {elapsed}", *data))

    def time_end(self, label: str = DEFAULT_COUNT_LABEL) -> None:
        """Log the elapsed time of ``label`` in milliseconds and stop the timer."""

        elapsed = self._elapsed(label)
        if elapsed is None:
            return
        del self._timers[label]
        self._logger(LogLevel.TIME_END, (f"{label}: {elapsed}",))

    # -- tracing ------------------------------------------------------------

    def trace(self, *data: Any) -> None:
        """Print the call stack leading to this call, innermost first.

        Trace output carries no style: a style that was already pending stays
        pending for the next call, and ``%c`` directives in the label are
        discarded.
        """

        pending = self._client.pending_style
        label = self._formatter.format_values(self._format(data)) if data else ""
        self._client.set_pending_style(pending)
        self._client.printer(LogLevel.TRACE, TracePayload(label, self._collect_stack()))

    # Browser spellings.
    countReset = count_reset
    groupCollapsed = group_collapsed
    groupEnd = group_end
    timeLog = time_log
    timeEnd = time_end

    def _logger(self, level: LogLevel, data: tuple[Any, ...]) -> None:
        if not data:
            return
        values = data if len(data) == 1 else tuple(self._format(data))
        self._client.printer(level, ValuesPayload(values))

    def _group(self, level: LogLevel, data: tuple[Any, ...]) -> None:
        label = self._formatter.format_values(self._format(data)) if data else DEFAULT_GROUP_LABEL
        self._client.printer(level, GroupPayload(label))

    def _format(self, data: tuple[Any, ...]) -> list[Any]:
        """Apply format specifiers in a leading string to the following arguments.

        ``%c`` consumes its argument as a style declaration for the message
        being built; specifiers without a remaining argument stay verbatim.
        """
        if not data or not isinstance(data[0], str):
            return list(data)

        target = data[0]
        remaining = list(data[1:])
        pieces: list[str] = []
        position = 0
        for match in _SPECIFIER.finditer(target):
            pieces.append(target[position : match.start()])
            position = match.end()
            specifier = match.group(1)
            if specifier == "%":
                pieces.append("%")
                continue
            if not remaining:
                pieces.append(match.group(0))
                continue
            argument = remaining.pop(0)
            if specifier == "s":
                pieces.append(str(argument))
            elif specifier in "di":
                pieces.append(_as_integer(argument))
            elif specifier == "f":
                pieces.append(_as_float(argument))
            elif specifier in "oO":
                pieces.append(pretty_repr(argument))
            else:
                self._client.add_css_style_to_current_message(str(argument))
        pieces.append(target[position:])
        return ["".join(pieces), *remaining]

    def _elapsed(self, label: str) -> str | None:
        started = self._timers.get(label)
        if started is None:
            self._logger(LogLevel.WARN, (f"Timer '{label}' does not exist.",))
            return None
        return f"{(self._clock() - started) * 1000:.3f} ms"

    def _collect_stack(self) -> tuple[str, ...]:
        # Frame 0 is this helper, frame 1 is trace().
        frame = sys._getframe(2)
        names: list[str] = []
        script_names: list[str] = []
        origin = self._client.origin
        while frame is not None:
            names.append(frame.f_code.co_name)
            if frame.f_code.co_filename == origin:
                script_names.append(frame.f_code.co_name)
            frame = frame.f_back
        return tuple(script_names or names)


__all__ = ["ASSERTION_MESSAGE", "DEFAULT_COUNT_LABEL", "DEFAULT_GROUP_LABEL", "ScriptConsole"]
