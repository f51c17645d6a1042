import argparse
import logging
import sys
from pathlib import Path

from .main import Interpreter
from .objects import Error
from .repl import Repl


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m monkeyterp",
        usage="python -m monkeyterp [--debug] [--prompt TEXT] [script]",
    )
    parser.add_argument("script", nargs="?", help="program to run; starts a REPL when omitted")
    parser.add_argument("--debug", action="store_true", help="log parser and evaluator activity")
    parser.add_argument("--prompt", default=Repl.prompt, help="REPL prompt")
    return parser


def run_script(path: Path) -> int:
    source = path.read_text()
    interpreter = Interpreter()
    try:
        result = interpreter.run(source, env=interpreter.make_default_env())
    except RecursionError:
        print("monkeyterp: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    if result.exception is not None:
        print(f"monkeyterp: {path}: parse error: {result.exception}", file=sys.stderr)
        return 1
    print(result.value.inspect())
    return 1 if isinstance(result.value, Error) else 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args_list = sys.argv[1:] if argv is None else argv
    try:
        args = parser.parse_args(args_list)
    except SystemExit as exc:
        return int(exc.code)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    if args.script is None:
        repl = Repl()
        repl.prompt = args.prompt
        repl.cmdloop()
        return 0

    script_path = Path(args.script).resolve()
    if not script_path.is_file():
        print(f"monkeyterp: script not found: {script_path}", file=sys.stderr)
        return 2
    return run_script(script_path)


if __name__ == "__main__":
    raise SystemExit(main())
