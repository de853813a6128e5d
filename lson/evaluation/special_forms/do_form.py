from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression, LsonValue
from lson.types.environment import Environment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def do_form(tail: list[SExpression], env: Environment, evaluator: Evaluator) -> LsonValue:
    result: LsonValue = None
    for expr in tail:
        result = evaluator.evaluate(expr, env)
    return result
