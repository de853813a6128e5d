"""Special form: defmacro.

Builds a closure from the parameter list and body, exactly as `fn` would,
and registers it in the macro table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression, LsonValue
from lson.errors import LsonAlreadyDefined, LsonArityError, LsonTypeError
from lson.types.environment import Environment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def defmacro_form(tail: list[SExpression], env: Environment, evaluator: Evaluator) -> LsonValue:
    """Register a macro named by the first argument; returns the name."""
    if len(tail) < 2:
        raise LsonArityError("defmacro requires a name and parameter list")

    name, params, *body = tail
    if not isinstance(name, str):
        raise LsonTypeError(f"Macro name must be a string, got {name!r}")
    if not isinstance(params, list):
        raise LsonTypeError("Macro parameter list must be a list")
    if evaluator.macros.is_macro(name):
        raise LsonAlreadyDefined(f"macro {name} already defined")

    transformer = evaluator.evaluate(["fn", params, *body], env)
    evaluator.define_macro(name, transformer)
    return name
