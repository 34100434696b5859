"""Port describing the script execution environment."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_console_sync.domain.completion import Completion


@runtime_checkable
class ScriptEnvironmentPort(Protocol):
    """Evaluate source text against one realm."""

    def evaluate_classic_script(self, source: str, origin: str) -> Completion:
        """Run ``source`` once and report how it completed."""


__all__ = ["ScriptEnvironmentPort"]
