"""Session façade returned by :func:`lib_console_sync.runtime.open_session`."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Callable

from lib_console_sync.adapters.script import PythonRealm
from lib_console_sync.application import ConsoleClient, ScriptConsole
from lib_console_sync.domain import DumpFormat, MessageBatch


class ConsoleSession:
    """One console bound to one realm, from creation until :meth:`close`.

    Examples
    --------
    >>> from lib_console_sync.runtime import open_session
    >>> with open_session(debug_logger=None) as session:
    ...     session.evaluate("console.log('hi')")
    ...     session.get_messages(0).kinds
    ('html',)
    """

    def __init__(
        self,
        *,
        client: ConsoleClient,
        console: ScriptConsole,
        realm: PythonRealm,
        capture_dump: Callable[..., str],
    ) -> None:
        self._client = client
        self._console = console
        self._realm = realm
        self._capture_dump = capture_dump
        self._closed = False

    @property
    def client(self) -> ConsoleClient:
        return self._client

    @property
    def console(self) -> ScriptConsole:
        return self._console

    @property
    def realm(self) -> PythonRealm:
        return self._realm

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._client.message_log)

    def evaluate(self, source: str) -> None:
        """Evaluate ``source`` in the session realm.

        Uncaught exceptions become log entries, never raised errors. Does
        nothing once the session is closed.
        """

        self._client.handle_input(source)

    def get_messages(self, start_index: int) -> MessageBatch:
        return self._client.get_messages(start_index)

    def send_messages(self, start_index: int) -> MessageBatch:
        return self._client.send_messages(start_index)

    def dump(self, dump_format: str | DumpFormat = "text", path: str | Path | None = None) -> str:
        """Render the current log; the log itself is not modified.

        Parameters
        ----------
        dump_format:
            ``text``, ``json`` or ``html`` (case-insensitive) or a :class:`DumpFormat`.
        path:
            Optional file receiving the rendered payload.

        Returns
        -------
        str
            The rendered payload, also when it was written to ``path``.

        Raises
        ------
        ValueError
            If ``dump_format`` names an unsupported format.
        """

        fmt = dump_format if isinstance(dump_format, DumpFormat) else DumpFormat.from_name(dump_format)
        target = Path(path) if path is not None else None
        return self._capture_dump(dump_format=fmt, path=target)

    def close(self) -> None:
        """Detach the realm and the display surface."""

        if self._closed:
            return
        self._client.detach()
        self._client.bind_display(None)
        self._closed = True

    def __enter__(self) -> "ConsoleSession":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ConsoleSession"]
