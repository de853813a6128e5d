"""Core evaluator for LSON.

Dispatches on value shape, runs special forms, expands macros and hands
ordinary calls to the application engine.
"""

from __future__ import annotations

import logging
from typing import IO, Optional

from lson import SExpression, LsonValue
from lson.config import get_max_eval_depth, get_max_expansion_depth
from lson.errors import LsonExpansionTooDeep, LsonRecursionError
from lson.evaluation.apply import apply
from lson.evaluation.special_forms import SPECIAL_FORMS
from lson.types.closure import Builtin, Closure
from lson.types.environment import Environment, GlobalEnvironment
from lson.types.macro_environment import MacroEnvironment


class Evaluator:
    """
    Evaluates LSON values against one global table and one macro table.

    Local scopes are passed explicitly as Environment chains; the two tables
    are owned by whoever constructs the evaluator, so independent evaluators
    never share definitions.
    """

    def __init__(
        self,
        globals_env: GlobalEnvironment,
        macros: MacroEnvironment,
        out: Optional[IO[str]] = None,
        max_expansion_depth: Optional[int] = None,
        max_eval_depth: Optional[int] = None,
    ):
        self.globals = globals_env
        self.macros = macros
        # Diagnostic stream for `p`; None means sys.stdout at write time
        self.out = out
        self.max_expansion_depth = (
            max_expansion_depth if max_expansion_depth is not None else get_max_expansion_depth()
        )
        self.max_eval_depth = (
            max_eval_depth if max_eval_depth is not None else get_max_eval_depth()
        )
        # Number of forms currently being evaluated
        self._depth = 0
        self._logger = logging.getLogger("Evaluator")

    def evaluate(self, expr: SExpression, env: Environment) -> LsonValue:
        if isinstance(expr, str):
            return self.lookup(expr, env)

        if isinstance(expr, list):
            if not expr:
                return expr
            if self._depth >= self.max_eval_depth:
                raise LsonRecursionError(
                    f"evaluation nested deeper than {self.max_eval_depth} forms"
                )
            self._depth += 1
            try:
                return self.eval_form(expr[0], expr[1:], env)
            finally:
                self._depth -= 1

        if isinstance(expr, dict):
            return {key: self.evaluate(value, env) for key, value in expr.items()}

        # --- Numbers, booleans, null, closures and builtins return as-is ---
        return expr

    def lookup(self, name: str, env: Environment) -> LsonValue:
        """Resolve `name` in the local chain first, then in the global table."""
        pair = env.find(name)
        if pair is not None:
            return pair[1]
        return self.globals.lookup(name)

    def eval_form(self, head: SExpression, args: list[SExpression], env: Environment) -> LsonValue:
        if isinstance(head, str):
            # --- Special forms handling ---
            handler = SPECIAL_FORMS.get(head)
            if handler is not None:
                return handler(args, env, self)

            if self.macros.is_macro(head):
                expansion = self.expand(head, args)
                return self.evaluate(expansion, env)

        function = self.evaluate(head, env)
        values = [self.evaluate(arg, env) for arg in args]
        return apply(function, values, self)

    def is_macro_call(self, form: SExpression) -> bool:
        return (
            isinstance(form, list)
            and len(form) > 0
            and isinstance(form[0], str)
            and form[0] not in SPECIAL_FORMS
            and self.macros.is_macro(form[0])
        )

    def expand(self, head: str, args: list[SExpression]) -> SExpression:
        """
        Expand a macro call until the result is no longer a macro call.

        Consecutive expansions run in a loop rather than through recursive
        evaluation, so a self-expanding macro is stopped by the depth limit
        instead of exhausting the Python stack.
        """
        form = self.macros.expand_1(head, args, self)
        depth = 1
        while self.is_macro_call(form):
            if depth >= self.max_expansion_depth:
                raise LsonExpansionTooDeep(
                    f"macro {form[0]!r} still expanding after {depth} steps"
                )
            form = self.macros.expand_1(form[0], form[1:], self)
            depth += 1
        return form

    def apply(self, function: LsonValue, args: list[LsonValue]) -> LsonValue:
        return apply(function, args, self)

    def define_global(self, name: str, value: LsonValue) -> None:
        self.globals.define(name, value)
        self._logger.debug("defined global %r", name)

    def define_macro(self, name: str, transformer: Closure | Builtin) -> None:
        self.macros.define_macro(name, transformer)
        self._logger.debug("defined macro %r", name)
