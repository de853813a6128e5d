from __future__ import annotations

from typing import List

from lson import LsonValue, SExpression
from lson.errors import LsonDestructureError, LsonTooFewArguments, LsonTooManyArguments

REST_MARKER = "&"


def bind_arguments(
    params: List[SExpression],
    args: List[LsonValue],
) -> list[tuple[str, LsonValue]]:
    """
    Single source of truth for parameter destructuring in LSON.

    Supports:
    - Plain names, bound positionally
    - Nested parameter lists, matched against a list argument
    - `&` followed by exactly one name, capturing all remaining arguments
      as a list (possibly empty)

    Returns the ordered (name, value) bindings; the caller prepends them to
    the closure's saved environment.
    """
    bindings: list[tuple[str, LsonValue]] = []
    supplied = 0

    for index, param in enumerate(params):
        if param == REST_MARKER:
            names = params[index + 1:]
            if not names:
                raise LsonDestructureError("no name after &")
            if len(names) > 1:
                raise LsonDestructureError("too many names after &")
            rest_name = names[0]
            if not isinstance(rest_name, str):
                raise LsonDestructureError(f"& must be followed by a name, got {rest_name!r}")
            bindings.append((rest_name, list(args[supplied:])))
            return bindings

        if isinstance(param, str):
            if supplied >= len(args):
                missing = list(params[index:])
                raise LsonTooFewArguments(
                    f"Too few arguments; missing {len(missing)} parameter(s): {missing}"
                )
            bindings.append((param, args[supplied]))
        elif isinstance(param, list):
            if supplied >= len(args) or not isinstance(args[supplied], list):
                received = args[supplied] if supplied < len(args) else None
                raise LsonDestructureError(
                    f"cannot destructure a non-list value {received!r} with pattern {param!r}"
                )
            bindings.extend(bind_arguments(param, args[supplied]))
        else:
            raise LsonDestructureError(f"unsupported parameter {param!r}")
        supplied += 1

    if supplied < len(args):
        raise LsonTooManyArguments(f"Too many arguments: {list(args[supplied:])}")

    return bindings
