"""Python script environment implementing :class:`ScriptEnvironmentPort`.

Purpose
-------
Evaluate console input as Python source inside a persistent namespace (the
realm) and report the outcome as a :class:`Completion`, following the rules of
the interactive prompt: the value of a trailing expression is the result and
``None`` means there is nothing to show.

Contents
--------
* :class:`PythonRealm` – namespace shared by every evaluation of a session.
* :class:`PythonScriptEnvironment` – compiles and runs source against a realm.
"""

from __future__ import annotations

import ast
import logging
from types import TracebackType
from typing import Any

from lib_console_sync.application.ports.script import ScriptEnvironmentPort
from lib_console_sync.domain.completion import Completion

logger = logging.getLogger(__name__)

REALM_MODULE_NAME = "__console__"


class PythonRealm:
    """Global namespace in which console input runs.

    >>> realm = PythonRealm({"answer": 42})
    >>> realm.globals["answer"], realm.globals["__name__"]
    (42, '__console__')
    """

    def __init__(self, bindings: dict[str, Any] | None = None) -> None:
        self.globals: dict[str, Any] = {"__name__": REALM_MODULE_NAME}
        if bindings:
            self.globals.update(bindings)

    def bind(self, name: str, value: Any) -> None:
        self.globals[name] = value


class PythonScriptEnvironment(ScriptEnvironmentPort):
    """Run source text once per call against a :class:`PythonRealm`.

    Examples
    --------
    >>> environment = PythonScriptEnvironment(PythonRealm())
    >>> environment.evaluate_classic_script("2 + 2", "(console)").value
    4
    >>> environment.evaluate_classic_script("x = 1", "(console)").has_value
    False
    >>> environment.evaluate_classic_script("x + 1", "(console)").value
    2
    >>> environment.evaluate_classic_script("raise ValueError('x')", "(console)").is_abrupt
    True
    """

    def __init__(self, realm: PythonRealm) -> None:
        self._realm = realm

    @property
    def realm(self) -> PythonRealm:
        return self._realm

    def evaluate_classic_script(self, source: str, origin: str) -> Completion:
        """Compile and run ``source``; exceptions become abrupt completions.

        Only :class:`Exception` subclasses are captured; ``KeyboardInterrupt``
        and ``SystemExit`` reach the host. The traceback of a captured
        exception starts at the first frame compiled from ``origin`` so error
        renderings show script frames only.
        """
        try:
            value = self._run(source, origin)
        except Exception as exc:
            logger.debug("script raised %s", type(exc).__name__)
            return Completion.throw(exc.with_traceback(_script_traceback(exc.__traceback__, origin)))
        if value is None:
            return Completion.empty()
        return Completion.normal(value)

    def _run(self, source: str, origin: str) -> Any:
        namespace = self._realm.globals
        tree = ast.parse(source, filename=origin, mode="exec")
        if not tree.body:
            return None

        trailing = tree.body[-1]
        if not isinstance(trailing, ast.Expr):
            exec(compile(tree, origin, "exec"), namespace)
            return None

        statements = ast.Module(body=tree.body[:-1], type_ignores=[])
        if statements.body:
            exec(compile(statements, origin, "exec"), namespace)
        expression = ast.Expression(body=trailing.value)
        return eval(compile(expression, origin, "eval"), namespace)


def _script_traceback(tb: TracebackType | None, origin: str) -> TracebackType | None:
    """Drop the leading engine frames of ``tb``.

    Returns ``None`` when no frame belongs to ``origin`` (a syntax error
    raised while parsing, for example).
    """

    while tb is not None and tb.tb_frame.f_code.co_filename != origin:
        tb = tb.tb_next
    return tb


__all__ = ["PythonRealm", "PythonScriptEnvironment", "REALM_MODULE_NAME"]
