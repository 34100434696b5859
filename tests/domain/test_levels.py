from __future__ import annotations

import logging

import pytest

from lib_console_sync.domain.levels import LogLevel, RenderBranch


@pytest.mark.parametrize("level", LogLevel)
def test_every_level_has_a_rendering(level: LogLevel) -> None:
    assert isinstance(level.rendering.branch, RenderBranch)


@pytest.mark.parametrize(
    "level, branch",
    [
        (LogLevel.TRACE, RenderBranch.TRACE),
        (LogLevel.GROUP, RenderBranch.GROUP),
        (LogLevel.GROUP_COLLAPSED, RenderBranch.GROUP),
        (LogLevel.LOG, RenderBranch.VALUES),
        (LogLevel.COUNT, RenderBranch.VALUES),
    ],
)
def test_structural_levels_take_their_own_branch(level: LogLevel, branch: RenderBranch) -> None:
    assert level.rendering.branch is branch


def test_warn_and_count_reset_share_the_warn_template() -> None:
    assert LogLevel.WARN.rendering == LogLevel.COUNT_RESET.rendering
    assert LogLevel.WARN.rendering.css_class == "warn"
    assert LogLevel.WARN.rendering.prefix == "(w) "


@pytest.mark.parametrize("level", [LogLevel.ASSERT, LogLevel.COUNT, LogLevel.DIR, LogLevel.TIME_END, LogLevel.TIME_LOG])
def test_levels_without_a_template_use_the_bare_span(level: LogLevel) -> None:
    assert level.rendering.css_class is None
    assert level.rendering.prefix == ""


@pytest.mark.parametrize(
    "name, expected",
    [
        ("log", LogLevel.LOG),
        ("countReset", LogLevel.COUNT_RESET),
        ("GROUP_COLLAPSED", LogLevel.GROUP_COLLAPSED),
        ("  warn ", LogLevel.WARN),
    ],
)
def test_from_name_accepts_method_and_enum_names(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize(
    "level, python_level",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.LOG, logging.INFO),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.COUNT_RESET, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.ASSERT, logging.ERROR),
    ],
)
def test_to_python_level(level: LogLevel, python_level: int) -> None:
    assert level.to_python_level() == python_level
