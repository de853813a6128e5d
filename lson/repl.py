"""Interactive read loop for LSON.

Reads one line of JSON at a time, evaluates it against a long-lived
Interpreter and prints the result as JSON. A failed evaluation prints the
error and its call trace and the loop carries on; definitions committed
before the failure stay in effect.
"""

from __future__ import annotations

import atexit
import logging
import sys
import traceback
from pathlib import Path
from typing import IO, Callable, Optional

from lson.codec import decode, encode
from lson.config import get_prompt
from lson.interpreter import Interpreter


def enable_line_editing(history_file: Optional[Path]) -> None:
    """Turn on readline editing for input(), with persistent history if configured."""
    try:
        import readline
    except ImportError:
        # readline is not available on every platform; input() still works without it
        return
    if history_file is None:
        return
    try:
        readline.read_history_file(history_file)
    except FileNotFoundError:
        pass
    atexit.register(readline.write_history_file, history_file)


def format_error(error: BaseException) -> str:
    """Render an error as its message followed by the call trace."""
    trace = "".join(traceback.format_tb(error.__traceback__))
    return f"Error: {error}\n{trace}".rstrip("\n")


class Repl:
    BANNER = "LSON"

    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        *,
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[IO[str]] = None,
        prompt: Optional[str] = None,
    ):
        self._logger = logging.getLogger("Repl")
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self._input_fn = input_fn if input_fn is not None else input
        self._out = out
        self.prompt = prompt if prompt is not None else get_prompt()

    @property
    def out(self) -> IO[str]:
        return self._out if self._out is not None else sys.stdout

    def eval_line(self, line: str) -> str:
        """Evaluate one line of input and return the text to print."""
        try:
            return encode(self.interpreter.evaluate(decode(line)))
        except Exception as e:
            self._logger.debug("evaluation failed for %r", line, exc_info=True)
            return format_error(e)

    def run(self) -> None:
        self.out.write(self.BANNER + "\n")
        while True:
            try:
                line = self._input_fn(self.prompt)
            except (EOFError, KeyboardInterrupt):
                self.out.write("\n")
                break
            if not line.strip():
                continue
            self.out.write(self.eval_line(line) + "\n")
            self.out.flush()
