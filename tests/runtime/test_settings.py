from __future__ import annotations

import pytest

from lib_console_sync.adapters.sinks import DEFAULT_LOGGER_NAME
from lib_console_sync.runtime import SessionSettings, build_session_settings, open_session


def test_defaults() -> None:
    assert build_session_settings() == SessionSettings()
    assert SessionSettings().origin == "(console)"
    assert SessionSettings().debug_logger == DEFAULT_LOGGER_NAME


def test_environment_overrides_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONSOLE_ORIGIN", "<repl>")
    monkeypatch.setenv("CONSOLE_MAX_BATCH", "3")
    monkeypatch.setenv("CONSOLE_FORCE_COLOR", "yes")
    monkeypatch.setenv("CONSOLE_NO_COLOR", "0")
    monkeypatch.setenv("CONSOLE_DEBUG_LOGGER", "app.console")
    settings = build_session_settings(origin="x", max_batch=10, no_color=True, debug_logger=None)
    assert settings == SessionSettings(
        origin="<repl>",
        max_batch=3,
        force_color=True,
        no_color=False,
        debug_logger="app.console",
    )


def test_disabling_the_debug_logger() -> None:
    assert build_session_settings(debug_logger=None).debug_logger is None


@pytest.mark.parametrize(
    "name, raw, fragment",
    [
        ("CONSOLE_MAX_BATCH", "many", "CONSOLE_MAX_BATCH must be an integer"),
        ("CONSOLE_MAX_BATCH", "0", "CONSOLE_MAX_BATCH must be positive"),
        ("CONSOLE_NO_COLOR", "perhaps", "CONSOLE_NO_COLOR must be a boolean"),
    ],
)
def test_invalid_environment_values_name_the_variable(
    monkeypatch: pytest.MonkeyPatch, name: str, raw: str, fragment: str
) -> None:
    monkeypatch.setenv(name, raw)
    with pytest.raises(ValueError, match=fragment):
        build_session_settings()


def test_invalid_max_batch_argument() -> None:
    with pytest.raises(ValueError, match="max_batch"):
        build_session_settings(max_batch=-1)


def test_origin_from_environment_reaches_scripts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONSOLE_ORIGIN", "<repl>")
    with open_session(debug_logger=None) as session:
        assert session.client.origin == "<repl>"
        session.evaluate("def f():\n    console.trace()\nf()")
        assert "-> f<br>" in session.client.message_log[0].data
