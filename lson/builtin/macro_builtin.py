"""Builtin macro transformers for LSON (implemented in Python).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression
from lson.errors import LsonArityError, LsonTypeError
from lson.types.closure import Builtin
from lson.types.macro_environment import MacroEnvironment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def let_macro(evaluator: Evaluator, args: list[SExpression]) -> SExpression:
    """
    ["let", [var1, val1, var2, val2, ...], body...]
    => [["fn", [var1, var2, ...], body...], val1, val2, ...]

    The expansion is returned unevaluated; the macro path evaluates it.
    """
    if not args:
        raise LsonArityError("let requires a bindings list")

    bindings = args[0]
    body = list(args[1:])

    if not isinstance(bindings, list):
        raise LsonTypeError(f"let bindings must be a list, got {bindings!r}")
    if len(bindings) % 2 != 0:
        raise LsonArityError(f"let bindings must be name/value pairs, got {bindings!r}")

    vars_ = bindings[0::2]
    vals_ = bindings[1::2]
    return [["fn", vars_, *body], *vals_]


def register(macro_env: MacroEnvironment) -> None:
    """Register builtin macros in the provided MacroEnvironment."""
    macro_env.define_macro("let", Builtin("let"))
