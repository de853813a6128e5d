from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Literal, Optional

from lson import SExpression, LsonValue
from lson.builtin.env_builtin import register
from lson.builtin.macro_builtin import register as register_macros
from lson.codec import decode_all
from lson.config import get_prelude_path
from lson.errors import LsonRecursionError
from lson.evaluation.evaluator import Evaluator
from lson.prelude import BOOTSTRAP
from lson.types.environment import Environment, GlobalEnvironment
from lson.types.macro_environment import MacroEnvironment

# Python frames used per nested form, with room for the caller's own stack
_FRAMES_PER_FORM = 6
_STACK_HEADROOM = 1000


class Interpreter:
    """
    Owns one global table and one macro table and evaluates LSON values
    against them.

    Construction registers the builtins, runs the bootstrap programs that
    define `defun` and `not`, then loads the user prelude if any. Every
    instance is independent; nothing is shared between interpreters.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        out: Optional[IO[str]] = None,
        max_expansion_depth: Optional[int] = None,
        max_eval_depth: Optional[int] = None,
    ):
        self._logger = logging.getLogger("Interpreter")

        self.globals: GlobalEnvironment = GlobalEnvironment()
        register(self.globals)

        self.macros: MacroEnvironment = MacroEnvironment()
        register_macros(self.macros)

        self.evaluator = Evaluator(
            self.globals,
            self.macros,
            out=out,
            max_expansion_depth=max_expansion_depth,
            max_eval_depth=max_eval_depth,
        )
        needed = self.evaluator.max_eval_depth * _FRAMES_PER_FORM + _STACK_HEADROOM
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)
            self._logger.debug("recursion limit raised to %d", needed)

        for expr in BOOTSTRAP:
            self.evaluate(expr)
        self._logger.debug("bootstrap complete, macros: %s", self.macros.names())

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                try:
                    self.load_prelude(path)
                except FileNotFoundError:
                    # Be permissive: a missing prelude file leaves the bootstrap environment
                    self._logger.warning("prelude file not found: %s", path)
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self, path: str | Path) -> None:
        """Evaluate every value in a prelude file."""
        source = Path(path).read_text(encoding="utf-8")
        self._logger.info("loading prelude from %s", path)
        self.eval_prelude(source)

    def eval_prelude(self, code: str) -> None:
        for expr in decode_all(code):
            self.evaluate(expr)

    def evaluate(self, expr: SExpression) -> LsonValue:
        """Evaluate one decoded value with a fresh, empty local environment."""
        try:
            return self.evaluator.evaluate(expr, Environment())
        except RecursionError:
            raise LsonRecursionError("evaluation nested too deeply")

    def eval(self, code: str) -> LsonValue:
        """Decode and evaluate every JSON value in `code`; returns the last result."""
        result: LsonValue = None
        for expr in decode_all(code):
            result = self.evaluate(expr)
        return result
