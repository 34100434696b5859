"""Translate script completions into console markup."""

from __future__ import annotations

from lib_console_sync.application.ports.formatter import ValueFormatterPort
from lib_console_sync.domain.completion import Completion

UNCAUGHT_PREFIX = "Uncaught exception: "


def render_completion(completion: Completion, formatter: ValueFormatterPort) -> str | None:
    """Return the markup to log for ``completion`` or ``None`` when nothing is shown.

    Abrupt completions are prefixed with :data:`UNCAUGHT_PREFIX`; exception
    objects use the richer error rendering, any other thrown value is rendered
    like a plain value.
    """

    if completion.is_abrupt:
        if completion.is_object_error:
            rendered = formatter.format_error(completion.value)
        else:
            rendered = formatter.format_value(completion.value)
        return UNCAUGHT_PREFIX + rendered
    if completion.has_value:
        return formatter.format_value(completion.value)
    return None


__all__ = ["UNCAUGHT_PREFIX", "render_completion"]
