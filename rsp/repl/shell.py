"""Interactive shell for rsp. Uses cmd as backend."""
from __future__ import annotations

import cmd
import logging
import sys
from pathlib import Path
from typing import Optional

from rsp.errors import RspError, RspSyntaxError
from rsp.interpreter import Interpreter
from rsp.printer import lisp_repr
from rsp.reader.parser import parse_all
from rsp.repl import history
from rsp.repl.highlighter import highlight

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({".exit", "(exit)"})


class Shell(cmd.Cmd):
    """rsp read-eval-print loop."""
    intro = "rsp interactive shell. Type .exit or (exit) to quit, Ctrl-C cancels the current input."
    secondary_prompt = "...> "  # shown while an expression is still open

    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        history_path: Optional[Path] = None,
        color: Optional[bool] = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter or Interpreter()
        self.history_path = history_path
        self.color = sys.stdout.isatty() if color is None else color

        self._pending = ""
        self._history_loaded = False
        self.count = 1
        self.prompt = self.primary_prompt

    @property
    def primary_prompt(self) -> str:
        return f"lisp ({self.count})> "

    def _reset_input(self) -> None:
        self._pending = ""
        self.prompt = self.primary_prompt

    def _show(self, text: str) -> None:
        print(highlight(text) if self.color else text, file=self.stdout)

    def _error(self, message: str) -> None:
        print(f"Error: {message}", file=self.stdout)

    def _needs_more_input(self, source: str) -> bool:
        try:
            parse_all(source)
        except RspSyntaxError as e:
            return e.incomplete
        return False

    def evaluate(self, source: str) -> None:
        """Evaluate a complete input and print its result or error."""
        try:
            result = self.interpreter.eval(source)
        except RspError as e:
            logger.debug("Evaluation failed: %s", e)
            self._error(str(e))
        except RecursionError:
            self._error("maximum recursion depth exceeded")
        else:
            self._show(lisp_repr(result))

    def default(self, line: str) -> Optional[bool]:
        """Accumulate input until it forms complete expressions, then evaluate."""
        if not self._pending and line.strip() in EXIT_COMMANDS:
            return True

        source = f"{self._pending}\n{line}" if self._pending else line
        if not self.use_rawinput:
            # Input is not typed at a terminal, echo it so transcripts read well
            self._show(line)
        if self._needs_more_input(source):
            self._pending = source
            self.prompt = self.secondary_prompt
            return None

        self.evaluate(source)
        self.count += 1
        self._reset_input()
        return None

    def onecmd(self, line: str) -> Optional[bool]:
        # Lisp input never names a shell command
        if line == "EOF":
            return self.do_EOF(line)
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def emptyline(self) -> Optional[bool]:
        """Do not repeat the previous input on an empty line."""
        if self._pending:
            self._pending += "\n"
        return None

    def do_EOF(self, arg: str) -> bool:
        """Exit the shell."""
        print(file=self.stdout)
        return True

    def preloop(self) -> None:
        # cmdloop restarts after Ctrl-C, history is read only once
        if self.use_rawinput and not self._history_loaded:
            self.history_path = history.load_history(self.history_path)
            self._history_loaded = True

    def postloop(self) -> None:
        if self.use_rawinput:
            history.save_history(self.history_path)

    def run(self) -> None:
        """Run the loop until exit; Ctrl-C discards the pending input and continues."""
        intro = self.intro
        while True:
            try:
                self.cmdloop(intro)
                return
            except KeyboardInterrupt:
                print("^C", file=self.stdout)
                self._reset_input()
                intro = ""
