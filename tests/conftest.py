from __future__ import annotations

import sys
from pathlib import Path

# Allow importing the package when running plain `pytest` without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pytest

from monkeyterp import Interpreter


@pytest.fixture
def run_interpreter():
    def _run(source: str, *, env=None):
        interpreter = Interpreter()
        if env is None:
            env = interpreter.make_default_env()
        result = interpreter.run(source, env=env)
        result.raise_for_exception()
        return result.value

    return _run
