"""Binding tables for LSON.

Two kinds of table exist:

- `Environment`: the local scope chain. Each node holds the ordered bindings
  introduced by one function application and points at the environment the
  closure was created in. Nodes are never mutated after construction, so a
  parent chain can be shared freely by sibling closures.
- `GlobalEnvironment`: the single table written by `def`. It is append-only
  and name-unique; rebinding a name raises LsonAlreadyDefined.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from lson import LsonValue
from lson.errors import LsonAlreadyDefined, LsonTypeError, LsonUnboundName


class Environment:
    """Immutable node in a chain of local (name, value) bindings."""

    __slots__ = ("bindings", "outer")

    def __init__(
        self,
        bindings: Iterable[tuple[str, LsonValue]] = (),
        outer: Optional[Environment] = None,
    ):
        self.bindings: tuple[tuple[str, LsonValue], ...] = tuple(bindings)
        self.outer: Environment | None = outer

    def extend(self, bindings: Iterable[tuple[str, LsonValue]]) -> Environment:
        """Return a new scope with `bindings` in front of this one."""
        return Environment(bindings, self)

    def find(self, name: str) -> Optional[tuple[str, LsonValue]]:
        """Return the binding pair nearest the front for `name`, or None."""
        env: Optional[Environment] = self
        while env is not None:
            for pair in env.bindings:
                if pair[0] == name:
                    return pair
            env = env.outer
        return None

    def items(self) -> Iterator[tuple[str, LsonValue]]:
        """All bindings, nearest first, including shadowed ones."""
        env: Optional[Environment] = self
        while env is not None:
            yield from env.bindings
            env = env.outer

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.bindings))
            buffer.write("}")
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append("{" + ", ".join(f"{k}: {v!r}" for k, v in env.bindings) + "}")
            env = env.outer
        return "<Environment chain: " + " -> ".join(frames) + ">"


class GlobalEnvironment:
    """Append-only, name-unique table of global bindings."""

    __slots__ = ("vars", "_order")

    def __init__(self):
        self.vars: dict[str, LsonValue] = {}
        # definition order, oldest first
        self._order: list[str] = []

    def define(self, name: str, value: LsonValue) -> None:
        """Bind `name` to `value`.

        Raises LsonTypeError if `name` is not a string and LsonAlreadyDefined
        if it is already bound.
        """
        if not isinstance(name, str):
            raise LsonTypeError(f"Cannot define {name!r}: global names must be strings")
        if name in self.vars:
            raise LsonAlreadyDefined(f"{name!r} already defined")
        self.vars[name] = value
        self._order.append(name)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def lookup(self, name: str) -> LsonValue:
        try:
            return self.vars[name]
        except KeyError:
            raise LsonUnboundName(f"unbound name {name!r}")

    def names(self) -> list[str]:
        """Every global name, most recently defined first."""
        return list(reversed(self._order))

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"<GlobalEnvironment {len(self)} names>"
