from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _run_module(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ, PYTHONPATH=str(ROOT / "src"))
    return subprocess.run(
        [sys.executable, "-m", "monkeyterp", *args],
        check=False,
        capture_output=True,
        text=True,
        input=stdin,
        env=env,
    )


def test_module_executes_kitchen_sink_script() -> None:
    script = Path(__file__).parent / "fixtures" / "kitchen_sink.mk"
    proc = _run_module(str(script))
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == "127\n"
    assert proc.stderr == ""


def test_runtime_error_exits_nonzero(tmp_path: Path) -> None:
    script = tmp_path / "bad.mk"
    script.write_text("let x = 5 + true;\n")
    proc = _run_module(str(script))
    assert proc.returncode == 1
    assert proc.stdout == "Error: type mismatch: INTEGER + BOOLEAN\n"


def test_parse_error_exits_nonzero(tmp_path: Path) -> None:
    script = tmp_path / "broken.mk"
    script.write_text("let = 1;\n")
    proc = _run_module(str(script))
    assert proc.returncode == 1
    assert "parse error: expected next token to be IDENT" in proc.stderr


def test_missing_script() -> None:
    proc = _run_module("does-not-exist.mk")
    assert proc.returncode == 2
    assert "script not found" in proc.stderr


def test_unknown_option_is_a_usage_error() -> None:
    proc = _run_module("--nope")
    assert proc.returncode == 2
    assert "usage: python -m monkeyterp" in proc.stderr


def test_repl_reads_stdin_when_no_script_is_given() -> None:
    proc = _run_module(stdin="let a = 2;\na * 3\n")
    assert proc.returncode == 0, proc.stderr
    assert ">> 2\n>> 6\n" in proc.stdout
