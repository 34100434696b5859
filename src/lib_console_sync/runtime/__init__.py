"""Runtime façade creating console sessions.

Purpose
-------
Expose :func:`open_session`, the single entry point hosts use instead of
wiring the engine, realm and adapters themselves.

System Role
-----------
Outer shell of the layering: configuration inputs (arguments plus
``CONSOLE_*`` environment overrides) become a composed
:class:`ConsoleSession`. Sessions are explicit objects with a lifecycle; there
is no process-wide instance.
"""

from __future__ import annotations

from typing import Any

from lib_console_sync.adapters.sinks import DEFAULT_LOGGER_NAME
from lib_console_sync.application.console_client import DEFAULT_ORIGIN
from lib_console_sync.application.ports import DisplaySurfacePort, DumpPort, ValueFormatterPort

from ._composition import REALM_CONSOLE_NAME, build_session, create_terminal_display
from ._session import ConsoleSession
from ._settings import SessionSettings, build_session_settings


def open_session(
    *,
    origin: str = DEFAULT_ORIGIN,
    max_batch: int | None = None,
    force_color: bool = False,
    no_color: bool = False,
    debug_logger: str | None = DEFAULT_LOGGER_NAME,
    display: DisplaySurfacePort | None = None,
    terminal: bool = False,
    formatter: ValueFormatterPort | None = None,
    dump_port: DumpPort | None = None,
    bindings: dict[str, Any] | None = None,
) -> ConsoleSession:
    """Create a console session.

    Inputs
    ------
    origin, max_batch, force_color, no_color, debug_logger:
        Settings, each overridable through its ``CONSOLE_*`` variable.
    display:
        Display surface to notify; ``terminal=True`` creates the Rich
        terminal surface instead.
    formatter, dump_port:
        Replacement adapters for value rendering and dumps.
    bindings:
        Extra names placed in the realm next to ``console``.

    Side Effects
    ------------
    Raises :class:`ValueError` when both ``display`` and ``terminal`` are given
    or when a setting is invalid.
    """

    if display is not None and terminal:
        raise ValueError("pass either display or terminal=True, not both")
    settings = build_session_settings(
        origin=origin,
        max_batch=max_batch,
        force_color=force_color,
        no_color=no_color,
        debug_logger=debug_logger,
    )
    surface = create_terminal_display(settings) if terminal else display
    return build_session(settings, display=surface, formatter=formatter, dump_port=dump_port, bindings=bindings)


__all__ = [
    "REALM_CONSOLE_NAME",
    "ConsoleSession",
    "SessionSettings",
    "build_session",
    "build_session_settings",
    "open_session",
]
