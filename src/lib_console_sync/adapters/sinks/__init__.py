"""Observability sinks for console output."""

from __future__ import annotations

from .logging_sink import DEFAULT_LOGGER_NAME, LoggingDebugSink

__all__ = ["DEFAULT_LOGGER_NAME", "LoggingDebugSink"]
