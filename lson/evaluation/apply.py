"""Application engine for LSON.

Centralizes what it means to call a value with already-evaluated arguments:
- Closures bind their parameters and evaluate their body in the saved
  environment extended with those bindings.
- Builtin references dispatch by name to the primitive set.
- Mappings act as single-argument accessors.

Macro expansion goes through here as well, with the raw forms as arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lson import LsonValue
from lson.builtin.env_builtin import BUILTINS
from lson.codec import encode
from lson.errors import (
    LsonArityError,
    LsonInvalidKeyType,
    LsonNotAFunction,
    LsonTypeError,
    LsonUndefinedBuiltin,
)
from lson.types.bind import bind_arguments
from lson.types.closure import Builtin, Closure

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


def apply_closure(fn: Closure, args: list[LsonValue], evaluator: Evaluator) -> LsonValue:
    """Apply a Closure.

    The body is evaluated in order inside `fn.env` extended with the new
    bindings; the caller's environment plays no part. Returns the value of
    the last body expression, or None for an empty body.
    """
    params = fn.params
    if not isinstance(params, list):
        raise LsonTypeError(f"fn parameters must be a list, got {encode(params)}")

    local_env = fn.env.extend(bind_arguments(params, args))

    result: LsonValue = None
    for expr in fn.body:
        result = evaluator.evaluate(expr, local_env)
    return result


def apply_builtin(fn: Builtin, args: list[LsonValue], evaluator: Evaluator) -> LsonValue:
    primitive = BUILTINS.get(fn.name)
    if primitive is None:
        raise LsonUndefinedBuiltin(f"undefined builtin {fn.name!r}")
    return primitive(evaluator, args)


def apply_mapping(mapping: dict, args: list[LsonValue]) -> LsonValue:
    """A mapping called with a key returns the value stored under it (None if absent)."""
    if not args:
        raise LsonArityError("a mapping takes 1 argument, got 0")
    key = args[0]
    if not isinstance(key, str):
        raise LsonInvalidKeyType(f"invalid key type: {encode(key)}")
    return mapping.get(key)


def apply(function: LsonValue, args: list[LsonValue], evaluator: Evaluator) -> LsonValue:
    """Apply a mapping, a Closure or a Builtin; anything else is not callable."""
    if isinstance(function, dict):
        return apply_mapping(function, args)
    elif isinstance(function, Closure):
        return apply_closure(function, args, evaluator)
    elif isinstance(function, Builtin):
        return apply_builtin(function, args, evaluator)
    else:
        raise LsonNotAFunction(f"not a function {encode(function)}")
