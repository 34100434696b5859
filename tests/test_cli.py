"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_console_sync import __init__conf__
from lib_console_sync import cli as cli_mod
from lib_console_sync.__init__conf__ import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, input_text: str | None = None) -> tuple[int, str, BaseException | None]:
    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], input=input_text, prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_eval_prints_live_output() -> None:
    exit_code, stdout, _ = run_cli(["eval", "console.log('hello')", "6 * 7"])

    assert exit_code == 0
    assert strip_ansi(stdout).splitlines() == [" hello", "42"]


def test_eval_reports_uncaught_exceptions() -> None:
    exit_code, stdout, _ = run_cli(["eval", "1 / 0"])

    assert exit_code == 0
    assert strip_ansi(stdout).startswith("Uncaught exception: ZeroDivisionError: division by zero")


def test_eval_dump_text_replaces_live_output() -> None:
    exit_code, stdout, _ = run_cli(["eval", "--dump", "text", "console.group('g')\nconsole.log('x')"])

    assert exit_code == 0
    assert stdout == "g\n   x\n"


def test_eval_dump_json_to_file(tmp_path: Path) -> None:
    target = tmp_path / "dump.json"
    exit_code, stdout, _ = run_cli(["eval", "--dump", "json", "--output", str(target), "console.clear()"])

    assert exit_code == 0
    assert stdout == ""
    assert json.loads(target.read_text(encoding="utf-8")) == [{"data": "", "index": 0, "kind": "clear"}]


def test_eval_output_requires_dump(tmp_path: Path) -> None:
    exit_code, stdout, _ = run_cli(["eval", "--output", str(tmp_path / "x"), "1"])

    assert exit_code == 2
    assert "--output requires --dump" in stdout


def test_eval_rejects_unknown_dump_format() -> None:
    exit_code, _stdout, _ = run_cli(["eval", "--dump", "yaml", "1"])

    assert exit_code == 2


def test_repl_evaluates_until_exit() -> None:
    exit_code, stdout, _ = run_cli(["repl"], input_text="total = 40\ntotal + 2\n\nexit\nnever_evaluated\n")

    assert exit_code == 0
    plain = strip_ansi(stdout)
    assert plain.count(cli_mod.PROMPT) == 4
    assert "42" in plain
    assert "NameError" not in plain


def test_repl_stops_at_end_of_input() -> None:
    exit_code, stdout, _ = run_cli(["repl"], input_text="'done'")

    assert exit_code == 0
    assert "done" in strip_ansi(stdout)


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--no-traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": False, "traceback_force_color": False}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True
