from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression, LsonValue
from lson.errors import LsonAlreadyDefined, LsonArityError, LsonTypeError
from lson.types.environment import Environment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def def_form(tail: list[SExpression], env: Environment, evaluator: Evaluator) -> LsonValue:
    """
    ["def", name, value]
    Evaluates value in the current environment and binds it globally.
    Returns the value.
    """
    if len(tail) != 2:
        raise LsonArityError("def requires 2 args")

    name, val_expr = tail
    if not isinstance(name, str):
        raise LsonTypeError(f"def name must be a string, got {name!r}")
    # Checked before evaluating so a redefinition has no side effects
    if name in evaluator.globals:
        raise LsonAlreadyDefined(f"{name!r} already defined")

    value = evaluator.evaluate(val_expr, env)
    evaluator.define_global(name, value)
    return value
