"""Callable runtime values for LSON: closures and builtin references."""

from __future__ import annotations

from io import StringIO

from lson import SExpression
from lson.types.environment import Environment


class Closure:
    """A first-class function: the literal `fn` form plus its defining environment."""

    __slots__ = ("form", "env")

    def __init__(self, form: list[SExpression], env: Environment):
        # form is ["fn", params, *body], kept exactly as written
        self.form: list[SExpression] = form
        self.env: Environment = env

    @property
    def params(self) -> SExpression:
        return self.form[1]

    @property
    def body(self) -> list[SExpression]:
        return self.form[2:]

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure (fn ")
            buffer.write(repr(self.params))
            for expr in self.body:
                buffer.write(" ")
                buffer.write(repr(expr))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Builtin:
    """Reference to one of the fixed primitives, dispatched by name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Builtin) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("builtin", self.name))

    def __repr__(self):
        return f"Builtin({self.name!r})"
