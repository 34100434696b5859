"""Script environment adapters."""

from __future__ import annotations

from .python_realm import PythonRealm, PythonScriptEnvironment

__all__ = ["PythonRealm", "PythonScriptEnvironment"]
