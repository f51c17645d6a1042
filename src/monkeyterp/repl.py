"""Interactive session: each line is parsed and evaluated in one persistent environment."""

from __future__ import annotations

import cmd
import sys

from .main import Interpreter


class Repl(cmd.Cmd):
    """
    Line loop on top of `cmd.Cmd`.

    Only the exact line `exit` and a real end of input end the session; every
    other line is program text, including ones that start with `help`, `?` or
    `EOF`, which `cmd.Cmd` would otherwise treat as commands.
    """

    intro = "monkeyterp :: type 'exit' or press Ctrl-D to quit"
    prompt = ">> "

    def __init__(self, interpreter: Interpreter | None = None, *, stdin=None, stdout=None, stderr=None):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.stderr = stderr if stderr is not None else sys.stderr
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.env = self.interpreter.make_default_env()

    def cmdloop(self, intro: str | None = None) -> None:
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            print(self.intro, file=self.stdout)
        stop = False
        while not stop:
            line = self.read_line()
            if line is None:
                # End of input.
                print(file=self.stdout)
                break
            stop = self.onecmd(line)
        self.postloop()

    def read_line(self) -> str | None:
        """Next input line without its newline, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line: str) -> bool:
        if line.strip() == "exit":
            return self.do_exit("")
        if not line.strip():
            return self.emptyline()
        self.default(line)
        return False

    def default(self, line: str) -> None:
        try:
            result = self.interpreter.run(line, self.env)
        except RecursionError:
            print("error: maximum recursion depth exceeded", file=self.stderr)
            return
        if result.exception is not None:
            print(f"parse error: {result.exception}", file=self.stderr)
            return
        print(result.value.inspect(), file=self.stdout)

    def emptyline(self) -> bool:
        """Do not repeat the previous line."""
        return False

    def do_exit(self, arg: str) -> bool:
        """Leave the session."""
        return True
