"""Package surface checks: metadata banner and public exports."""

from __future__ import annotations

import lib_console_sync
from lib_console_sync import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_console_sync" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_version_matches_metadata() -> None:
    assert lib_console_sync.__version__ == __init__conf__.version


def test_public_exports_resolve() -> None:
    for name in lib_console_sync.__all__:
        assert getattr(lib_console_sync, name) is not None


def test_open_session_from_package_root() -> None:
    with lib_console_sync.open_session(debug_logger=None) as session:
        session.evaluate("'ok'")
        assert len(session) == 1
