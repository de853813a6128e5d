from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression, LsonValue
from lson.errors import LsonArityError
from lson.types.closure import Closure
from lson.types.environment import Environment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def fn_form(tail: list[SExpression], env: Environment, evaluator: Evaluator) -> LsonValue:
    # ["fn", params, body...] captures the form and the current environment.
    # Nothing is evaluated until the closure is applied; an empty body yields null.
    if not tail:
        raise LsonArityError("fn requires at least a parameter list")
    return Closure(["fn", *tail], env)
