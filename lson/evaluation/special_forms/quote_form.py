from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression, LsonValue
from lson.errors import LsonArityError
from lson.types.environment import Environment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def quote_form(tail: list[SExpression], env: Environment, evaluator: Evaluator) -> LsonValue:
    """
    ["quote", x] or ["", x] => x, unevaluated.
    With several arguments the whole argument list is returned unevaluated.
    """
    if not tail:
        raise LsonArityError("no arguments to quote")
    if len(tail) == 1:
        return tail[0]
    return tail
