"""Session settings resolved from keyword arguments and the environment."""

from __future__ import annotations

from dataclasses import dataclass

from lib_console_sync import config
from lib_console_sync.adapters.sinks import DEFAULT_LOGGER_NAME
from lib_console_sync.application.console_client import DEFAULT_ORIGIN

ENV_ORIGIN = "CONSOLE_ORIGIN"
ENV_MAX_BATCH = "CONSOLE_MAX_BATCH"
ENV_FORCE_COLOR = "CONSOLE_FORCE_COLOR"
ENV_NO_COLOR = "CONSOLE_NO_COLOR"
ENV_DEBUG_LOGGER = "CONSOLE_DEBUG_LOGGER"


@dataclass(frozen=True, slots=True)
class SessionSettings:
    """Resolved configuration for one console session.

    Attributes
    ----------
    origin:
        Filename reported for evaluated input (appears in tracebacks and
        restricts ``console.trace`` to script frames).
    max_batch:
        Optional cap on entries per sync batch; ``None`` sends everything.
    force_color / no_color:
        Colour switches for the terminal display surface.
    debug_logger:
        Logger name receiving the plain text of value logs; ``None`` disables
        the debug sink.
    """

    origin: str = DEFAULT_ORIGIN
    max_batch: int | None = None
    force_color: bool = False
    no_color: bool = False
    debug_logger: str | None = DEFAULT_LOGGER_NAME


def build_session_settings(
    *,
    origin: str = DEFAULT_ORIGIN,
    max_batch: int | None = None,
    force_color: bool = False,
    no_color: bool = False,
    debug_logger: str | None = DEFAULT_LOGGER_NAME,
) -> SessionSettings:
    """Apply ``CONSOLE_*`` environment overrides to the given arguments.

    Environment values take precedence so deployments can adjust a session
    without code changes.
    """

    if max_batch is not None and max_batch <= 0:
        raise ValueError("max_batch must be positive")
    resolved_logger = config.env_str(ENV_DEBUG_LOGGER, debug_logger or "") or None
    return SessionSettings(
        origin=config.env_str(ENV_ORIGIN, origin),
        max_batch=config.env_int(ENV_MAX_BATCH, max_batch),
        force_color=config.env_bool(ENV_FORCE_COLOR, force_color),
        no_color=config.env_bool(ENV_NO_COLOR, no_color),
        debug_logger=resolved_logger,
    )


__all__ = ["SessionSettings", "build_session_settings"]
