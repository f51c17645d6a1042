from __future__ import annotations

import pytest

from monkeyterp import NULL, Environment, Integer, Interpreter, ParseError, RunResult


def test_load_walks_outward():
    outer = Environment()
    outer.store("a", Integer(1))
    inner = outer.enclosed()
    inner.store("b", Integer(2))
    assert inner.load("a") == Integer(1)
    assert inner.load("b") == Integer(2)
    assert outer.load("b") is None
    assert "a" in inner
    assert "b" not in outer


def test_store_shadows_without_touching_outer():
    outer = Environment()
    outer.store("a", Integer(1))
    inner = outer.enclosed()
    inner.store("a", Integer(2))
    assert inner.load("a") == Integer(2)
    assert outer.load("a") == Integer(1)


def test_store_overwrites_in_same_scope():
    env = Environment()
    env.store("a", Integer(1))
    assert env.store("a", Integer(2)) == Integer(2)
    assert env.load("a") == Integer(2)
    assert list(env) == ["a"]
    assert len(env) == 1


def test_run_requires_environment():
    interpreter = Interpreter()
    with pytest.raises(TypeError):
        interpreter.run("1", env={})  # type: ignore[arg-type]


def test_environment_persists_across_runs():
    interpreter = Interpreter()
    env = interpreter.make_default_env()
    assert interpreter.run("let counter = 1;", env=env).ok
    assert interpreter.run("let bump = fn(n) { n + counter };", env=env).ok
    result = interpreter.run("bump(41)", env=env)
    assert isinstance(result, RunResult)
    assert result.value == Integer(42)
    assert result.env is env


def test_run_reports_parse_errors_on_result():
    interpreter = Interpreter()
    env = interpreter.make_default_env()
    result = interpreter.run("let = 1", env=env)
    assert not result.ok
    assert isinstance(result.exception, ParseError)
    assert result.value is NULL
    with pytest.raises(ParseError):
        result.raise_for_exception()
    assert len(env) == 0


def test_runtime_error_result_is_not_ok():
    interpreter = Interpreter()
    result = interpreter.run("1 + true", env=interpreter.make_default_env())
    assert result.exception is None
    assert not result.ok


def test_closure_keeps_frame_alive_after_call_returns():
    interpreter = Interpreter()
    env = interpreter.make_default_env()
    interpreter.run("let make = fn(x) { fn() { x } }; let keep = make(7);", env=env)
    keep = env.load("keep")
    assert keep.env.load("x") == Integer(7)
    assert keep.env.outer is env
    assert "x" not in env
