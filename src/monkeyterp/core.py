from __future__ import annotations

import logging
import sys
from typing import Any, Optional

from .common import ParseError
from .nodes import Program
from .objects import NULL, Error, Object, ReturnValue
from .parser import parse
from .scopes import Environment

logger = logging.getLogger(__name__)


class RunResult:
    """Outcome of `InterpreterCore.run`: the final value, or the parse error that stopped it."""

    def __init__(self, value: Object, env: Environment, exception: Optional[ParseError] = None):
        self.value = value
        self.env = env
        self.exception = exception

    @property
    def ok(self) -> bool:
        return self.exception is None and not isinstance(self.value, Error)

    def raise_for_exception(self) -> None:
        if self.exception is not None:
            raise self.exception

    def __repr__(self) -> str:
        if self.exception is not None:
            return f"<RunResult exception={self.exception!r}>"
        return f"<RunResult value={self.value!r}>"


class InterpreterCore:
    def __init__(self, recursion_limit: int = 20000):
        """
        recursion_limit:
          - host recursion limit in effect while a program is evaluated; every
            call in the interpreted language costs about a dozen host frames
          - the previous limit is restored afterwards, and never lowered
        """
        self.recursion_limit = recursion_limit

    def make_default_env(self) -> Environment:
        return Environment()

    # ----- run -----

    def run(self, source: str, env: Environment) -> RunResult:
        """
        Parse and evaluate `source` in `env`.

        Bindings made by the program persist in `env`, so the same environment
        can be passed again for the next input. A syntax error is reported on
        the result instead of being raised.
        """
        if not isinstance(env, Environment):
            raise TypeError("env must be an Environment")
        try:
            program = parse(source)
        except ParseError as exc:
            logger.debug("parse failed: %s", exc)
            return RunResult(NULL, env, exc)
        return RunResult(self.evaluate(program, env), env)

    def evaluate(self, program: Program, env: Environment) -> Object:
        previous_limit = sys.getrecursionlimit()
        if previous_limit < self.recursion_limit:
            sys.setrecursionlimit(self.recursion_limit)
        try:
            return self._evaluate_program(program, env)
        finally:
            sys.setrecursionlimit(previous_limit)

    def _evaluate_program(self, program: Program, env: Environment) -> Object:
        result: Object = NULL
        for stmt in program.statements:
            result = self.exec_stmt(stmt, env)
            if isinstance(result, ReturnValue):
                return result.value
            if isinstance(result, Error):
                return result
        return result

    # ----- dispatch -----

    def exec_stmt(self, node: Any, env: Environment) -> Object:
        m = getattr(self, f"exec_{node.__class__.__name__}", None)
        if m is None:
            raise NotImplementedError(f"Statement not supported: {node.__class__.__name__}")
        return m(node, env)

    def eval_expr(self, node: Any, env: Environment) -> Object:
        m = getattr(self, f"eval_{node.__class__.__name__}", None)
        if m is None:
            raise NotImplementedError(f"Expression not supported: {node.__class__.__name__}")
        return m(node, env)
