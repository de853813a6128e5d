from __future__ import annotations

from typing import TYPE_CHECKING

from lson import SExpression
from lson.errors import LsonAlreadyDefined, LsonTypeError
from lson.types.closure import Builtin, Closure

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator


class MacroEnvironment:
    """
    Macro table mapping macro names to transformers.

    A transformer is either a Closure built by `defmacro` or a Builtin
    reference (the `let` primitive). Like the global table it is
    append-only: a name can be registered once.
    """

    def __init__(self):
        self.macros: dict[str, Closure | Builtin] = {}
        self._order: list[str] = []

    def define_macro(self, name: str, transformer: Closure | Builtin) -> None:
        if not isinstance(name, str):
            raise LsonTypeError(f"Macro name must be a string, got {name!r}")
        if name in self.macros:
            raise LsonAlreadyDefined(f"macro {name} already defined")
        self.macros[name] = transformer
        self._order.append(name)

    def is_macro(self, name: SExpression) -> bool:
        return isinstance(name, str) and name in self.macros

    def names(self) -> list[str]:
        """Macro names, most recently defined first."""
        return list(reversed(self._order))

    # Single-step expansion
    def expand_1(
        self, head: str, args: list[SExpression], evaluator: Evaluator
    ) -> SExpression:
        """
        Run the transformer for `head` once on the raw, unevaluated `args`.
        The result is returned as-is; evaluating it is the caller's job.
        """
        transformer = self.macros[head]
        return evaluator.apply(transformer, list(args))
