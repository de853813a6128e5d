from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression, LsonValue
from lson.errors import LsonArityError
from lson.types.environment import Environment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def is_truthy(value: LsonValue) -> bool:
    # Only false and null are falsy; 0, "", [] and {} are all true
    return value is not False and value is not None


def if_form(tail: list[SExpression], env: Environment, evaluator: Evaluator) -> LsonValue:
    if not 2 <= len(tail) <= 3:
        raise LsonArityError("invalid if form: expected a test, a then-clause and an optional else-clause")

    if is_truthy(evaluator.evaluate(tail[0], env)):
        return evaluator.evaluate(tail[1], env)
    elif len(tail) == 3:
        return evaluator.evaluate(tail[2], env)
    else:
        return None
