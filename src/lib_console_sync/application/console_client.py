"""Console engine owning the message log of one script session.

Purpose
-------
Combine the printer, the evaluator bridge and the sync protocol around a single
append-only :class:`~lib_console_sync.domain.message_log.MessageLog` and a
one-shot pending style slot.

Contents
--------
* :class:`ConsoleClient` – the engine bound to one realm for its lifetime.

System Role
-----------
Structured log calls from :class:`~lib_console_sync.application.script_console.ScriptConsole`
and raw input from the host both end up here as exactly one append each; the
bound display surface is notified after every append and pulls batches through
:meth:`ConsoleClient.send_messages`.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import cast

from lib_console_sync.application.ports import (
    DebugSinkPort,
    DisplaySurfacePort,
    ScriptEnvironmentPort,
    ValueFormatterPort,
)
from lib_console_sync.application.use_cases.evaluate import render_completion
from lib_console_sync.application.use_cases.render import render_group_label, render_trace, render_values
from lib_console_sync.application.use_cases.sync import build_batch
from lib_console_sync.domain import (
    GroupPayload,
    LogLevel,
    MessageBatch,
    MessageEntry,
    MessageLog,
    PrinterPayload,
    RenderBranch,
    TracePayload,
    ValuesPayload,
)
from lib_console_sync.domain.payloads import ensure_payload_matches

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "(console)"


class ConsoleClient:
    """Format console output, keep the message log and serve display surfaces.

    Parameters
    ----------
    formatter:
        Renders values and errors to markup.
    script_environment:
        Realm that evaluates input; ``None`` models a detached session in which
        :meth:`handle_input` does nothing.
    display:
        Optional display surface notified on every append.
    debug_sink:
        Optional observability channel receiving the plain text of value logs.
    origin:
        Name reported to the script environment for evaluated input.
    max_batch:
        Optional cap on the entries returned by one sync request.
    """

    def __init__(
        self,
        *,
        formatter: ValueFormatterPort,
        script_environment: ScriptEnvironmentPort | None = None,
        display: DisplaySurfacePort | None = None,
        debug_sink: DebugSinkPort | None = None,
        origin: str = DEFAULT_ORIGIN,
        max_batch: int | None = None,
    ) -> None:
        if max_batch is not None and max_batch <= 0:
            raise ValueError("max_batch must be positive")
        self._formatter = formatter
        self._script_environment = script_environment
        self._display = display
        self._debug_sink = debug_sink
        self._origin = origin
        self._max_batch = max_batch
        self._message_log = MessageLog()
        self._current_message_style = ""
        self._lock = RLock()

    @property
    def message_log(self) -> MessageLog:
        return self._message_log

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def pending_style(self) -> str:
        """Return the style the next print or group call will consume."""

        return self._current_message_style

    @property
    def is_attached(self) -> bool:
        return self._script_environment is not None

    def attach(self, script_environment: ScriptEnvironmentPort) -> None:
        """Bind the realm that :meth:`handle_input` evaluates against.

        Parameters
        ----------
        script_environment:
            Environment replacing any previously attached one.
        """

        self._script_environment = script_environment

    def detach(self) -> None:
        """Drop the realm; subsequent input is ignored."""

        self._script_environment = None

    def bind_display(self, display: DisplaySurfacePort | None) -> None:
        """Bind (or with ``None`` unbind) the display surface notified on append.

        Why
        ---
        A surface often needs the client to exist before it can pull (its
        fetch callback is :meth:`send_messages`), so binding is separate from
        construction.
        """

        self._display = display

    # -- evaluator bridge ---------------------------------------------------

    def handle_input(self, source: str) -> None:
        """Evaluate ``source`` and log its completion.

        Appends at most one entry: the uncaught exception for an abrupt
        completion, the value for a normal completion with a value, and nothing
        otherwise. Entries logged by the script itself while running are
        appended before the completion entry.

        Parameters
        ----------
        source:
            Input text handed to the attached script environment unchanged.

        Side Effects
        ------------
        None at all while no realm is attached: the call returns without
        appending or logging.
        """
        environment = self._script_environment
        if environment is None:
            return

        completion = environment.evaluate_classic_script(source, self._origin)
        markup = render_completion(completion, self._formatter)
        if markup is not None:
            self.print_html(markup)

    # -- printer -------------------------------------------------------------

    def add_css_style_to_current_message(self, style: str) -> None:
        """Add a style declaration for the next print or group call.

        Examples
        --------
        >>> from lib_console_sync.adapters.formatter import RichMarkupFormatter
        >>> client = ConsoleClient(formatter=RichMarkupFormatter())
        >>> client.add_css_style_to_current_message("color: red")
        >>> client.add_css_style_to_current_message("font-weight: bold")
        >>> client.pending_style
        'color: red;font-weight: bold;'
        """

        with self._lock:
            self._current_message_style += f"{style};"

    def set_pending_style(self, style: str) -> None:
        """Replace the pending style with ``style``."""

        with self._lock:
            self._current_message_style = style

    def printer(self, level: LogLevel, payload: PrinterPayload) -> int:
        """Render one log call and append it.

        Trace output ignores the pending style; group and value output consume
        it. Value output is also forwarded, as plain text, to the debug sink.

        Parameters
        ----------
        level:
            Console level selecting the rendering branch and template.
        payload:
            Payload variant matching ``level``'s branch.

        Returns
        -------
        int
            Index of the appended entry.

        Raises
        ------
        TypeError
            If ``payload`` does not match the branch of ``level``; nothing is
            appended and the pending style is left untouched.

        Examples
        --------
        >>> from lib_console_sync.adapters.formatter import RichMarkupFormatter
        >>> client = ConsoleClient(formatter=RichMarkupFormatter())
        >>> client.printer(LogLevel.WARN, ValuesPayload(("a < b",)))
        0
        >>> client.message_log[0].data
        '<span class="warn" style="">(w) a &lt; b</span>'
        """
        ensure_payload_matches(level, payload)
        branch = level.rendering.branch

        if branch is RenderBranch.TRACE:
            return self.print_html(render_trace(cast(TracePayload, payload)))

        with self._lock:
            styling = self._consume_style()

        if branch is RenderBranch.GROUP:
            return self.begin_group(
                render_group_label(cast(GroupPayload, payload).label, styling),
                start_expanded=level is LogLevel.GROUP,
            )

        output = self._formatter.format_values(cast(ValuesPayload, payload).values)
        if self._debug_sink is not None:
            self._debug_sink.output_debug_message(level, output)
        return self.print_html(render_values(level, output, styling))

    def print_html(self, markup: str) -> int:
        """Append already-rendered ``markup`` as an ``html`` entry.

        The markup is stored verbatim; callers are responsible for escaping.
        Returns the index of the new entry.
        """

        return self._append(MessageEntry.html(markup))

    def clear_output(self) -> int:
        """Append a ``clear`` marker; earlier entries stay in the log."""

        return self._append(MessageEntry.clear())

    def begin_group(self, label_markup: str, *, start_expanded: bool) -> int:
        """Append a group start carrying ``label_markup``.

        Parameters
        ----------
        label_markup:
            Rendered (escaped) label shown as the group header.
        start_expanded:
            ``True`` appends a ``group`` entry, ``False`` a ``groupCollapsed`` one.

        Returns
        -------
        int
            Index of the appended entry.
        """

        return self._append(MessageEntry.begin_group(label_markup, expanded=start_expanded))

    def end_group(self) -> int:
        """Append a ``groupEnd`` marker, balanced or not."""

        return self._append(MessageEntry.end_group())

    # -- sync protocol -------------------------------------------------------

    def get_messages(self, start_index: int) -> MessageBatch:
        """Return the entries from ``start_index`` on.

        Parameters
        ----------
        start_index:
            First log index wanted. Negative or past-the-end indices are not
            errors; they yield an empty batch.

        Returns
        -------
        MessageBatch
            Kinds and data in append order, capped at ``max_batch`` entries
            when a cap is configured.
        """

        with self._lock:
            return build_batch(self._message_log, start_index, max_batch=self._max_batch)

    def send_messages(self, start_index: int) -> MessageBatch:
        """Push the entries from ``start_index`` on to the display surface.

        Empty batches are not pushed; the batch is returned either way.
        Exceptions raised by the display surface are logged and swallowed so a
        failing surface never blocks the log.
        """
        batch = self.get_messages(start_index)
        display = self._display
        if len(batch) == 0 or display is None:
            return batch
        try:
            display.did_get_messages(batch.start_index, batch.kinds, batch.data)
        except Exception:
            logger.exception("display surface failed to receive messages from %d", start_index)
        return batch

    def _consume_style(self) -> str:
        style = self._current_message_style
        self._current_message_style = ""
        return style

    def _append(self, entry: MessageEntry) -> int:
        with self._lock:
            index = self._message_log.append(entry)
        self._notify(index)
        return index

    def _notify(self, index: int) -> None:
        display = self._display
        if display is None:
            return
        try:
            display.did_output_message(index)
        except Exception:
            logger.exception("display surface failed to handle message %d", index)


__all__ = ["DEFAULT_ORIGIN", "ConsoleClient"]
