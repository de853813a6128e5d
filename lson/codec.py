"""JSON wire codec.

LSON programs are JSON documents, so reading is JSON decoding and printing a
result is JSON encoding. Closures and builtin references have no JSON form of
their own; they are written as tagged arrays:

    ["closure", fn_form, [[name, value], ...]]
    ["builtin", name]
"""

from __future__ import annotations

import json
import math
import re
from typing import Iterator

from lson import LsonValue
from lson.errors import LsonArithmeticError, LsonDecodeError
from lson.types.closure import Builtin, Closure

_WHITESPACE = re.compile(r"\s*")


def _reject_constant(name: str) -> float:
    raise LsonDecodeError(f"invalid JSON: {name} is not a JSON number")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise LsonDecodeError(f"invalid JSON: number {text} is out of range")
    return value


# NaN, Infinity and overflowing literals have no LSON value
_decoder = json.JSONDecoder(parse_float=_finite_float, parse_constant=_reject_constant)


def decode(text: str) -> LsonValue:
    """Decode exactly one JSON value."""
    try:
        return _decoder.decode(text)
    except ValueError as e:
        raise LsonDecodeError(f"invalid JSON: {e}")


def decode_all(text: str) -> Iterator[LsonValue]:
    """Decode a whitespace-separated sequence of JSON values, one at a time."""
    pos = _WHITESPACE.match(text, 0).end()
    while pos < len(text):
        try:
            value, pos = _decoder.raw_decode(text, pos)
        except ValueError as e:
            raise LsonDecodeError(f"invalid JSON: {e}")
        yield value
        pos = _WHITESPACE.match(text, pos).end()


def _to_wire(value: object) -> LsonValue:
    if isinstance(value, Closure):
        return ["closure", value.form, [[name, v] for name, v in value.env.items()]]
    if isinstance(value, Builtin):
        return ["builtin", value.name]
    raise TypeError(f"Object of type {type(value).__name__} is not an LSON value")


def encode(value: LsonValue) -> str:
    """Encode a runtime value as compact JSON text."""
    try:
        return json.dumps(
            value, default=_to_wire, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except ValueError as e:
        # non-finite floats and integers too long to print
        raise LsonArithmeticError(f"number has no JSON form: {e}")
