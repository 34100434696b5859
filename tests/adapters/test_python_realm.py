from __future__ import annotations

import traceback

import pytest

from lib_console_sync.adapters.script import PythonRealm, PythonScriptEnvironment
from lib_console_sync.adapters.script.python_realm import REALM_MODULE_NAME


@pytest.fixture
def environment() -> PythonScriptEnvironment:
    return PythonScriptEnvironment(PythonRealm())


def test_trailing_expression_is_the_value(environment: PythonScriptEnvironment) -> None:
    completion = environment.evaluate_classic_script("x = 20\nx * 2 + 2", "(console)")
    assert completion.is_abrupt is False
    assert completion.value == 42


@pytest.mark.parametrize("source", ["", "pass", "y = 1", "None", "def f():\n    return 1"])
def test_sources_without_value(environment: PythonScriptEnvironment, source: str) -> None:
    completion = environment.evaluate_classic_script(source, "(console)")
    assert completion.is_abrupt is False
    assert completion.has_value is False


def test_state_persists_between_evaluations(environment: PythonScriptEnvironment) -> None:
    environment.evaluate_classic_script("items = []", "(console)")
    environment.evaluate_classic_script("items.append(1)", "(console)")
    assert environment.evaluate_classic_script("items", "(console)").value == [1]
    assert environment.realm.globals["__name__"] == REALM_MODULE_NAME


def test_exceptions_become_abrupt_completions(environment: PythonScriptEnvironment) -> None:
    completion = environment.evaluate_classic_script("raise ValueError('x')", "(console)")
    assert completion.is_abrupt
    assert completion.is_object_error
    assert isinstance(completion.value, ValueError)


def test_syntax_errors_are_abrupt(environment: PythonScriptEnvironment) -> None:
    completion = environment.evaluate_classic_script("1 +", "(console)")
    assert completion.is_abrupt
    assert isinstance(completion.value, SyntaxError)


def test_statements_before_a_failing_expression_take_effect(environment: PythonScriptEnvironment) -> None:
    environment.evaluate_classic_script("a = 1\nmissing_name", "(console)")
    assert environment.realm.globals["a"] == 1


def test_code_is_compiled_with_the_origin(environment: PythonScriptEnvironment) -> None:
    completion = environment.evaluate_classic_script("def f():\n    return f.__code__.co_filename\nf()", "session-1")
    assert completion.value == "session-1"


def test_system_exit_is_not_captured(environment: PythonScriptEnvironment) -> None:
    with pytest.raises(SystemExit):
        environment.evaluate_classic_script("raise SystemExit(3)", "(console)")


def test_bindings_are_visible_to_scripts() -> None:
    realm = PythonRealm({"base": 10})
    realm.bind("offset", 5)
    environment = PythonScriptEnvironment(realm)
    assert environment.evaluate_classic_script("base + offset", "(console)").value == 15


def test_error_traceback_starts_at_script_frames(environment: PythonScriptEnvironment) -> None:
    completion = environment.evaluate_classic_script("def f():\n    raise ValueError('x')\nf()", "(console)")
    frames = traceback.extract_tb(completion.value.__traceback__)
    assert [frame.name for frame in frames] == ["<module>", "f"]
    assert {frame.filename for frame in frames} == {"(console)"}


def test_parse_errors_carry_no_engine_frames(environment: PythonScriptEnvironment) -> None:
    completion = environment.evaluate_classic_script("1 +", "(console)")
    assert completion.value.__traceback__ is None
