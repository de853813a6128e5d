"""Built-in primitives for the LSON runtime.

Every primitive is a plain function `(evaluator, args) -> value` taking
already-evaluated arguments. Globals hold `Builtin(name)` references and the
application engine dispatches on that name through `BUILTINS`.
"""
from __future__ import annotations

import functools
import math
import operator
import sys
from typing import TYPE_CHECKING, Callable

from lson import LsonValue
from lson.builtin.macro_builtin import let_macro
from lson.codec import encode
from lson.errors import LsonArithmeticError, LsonArityError, LsonTypeError
from lson.types.closure import Builtin
from lson.types.environment import GlobalEnvironment

if TYPE_CHECKING:
    from lson.evaluation.evaluator import Evaluator

Primitive = Callable[["Evaluator", list[LsonValue]], LsonValue]


# -------------------------------
# Arithmetic
# -------------------------------
def _check_numbers(name: str, args: list[LsonValue]) -> None:
    # bool is an int subclass in Python but not a number here
    if any(isinstance(a, bool) for a in args):
        raise LsonTypeError(f"unsupported operand types for {name}: {encode(args)}")


def _fold(name: str, op: Callable, args: list[LsonValue]) -> LsonValue:
    """Left fold of `op` over args. No arguments yield null, one is returned unchanged."""
    if not args:
        return None
    _check_numbers(name, args)
    try:
        result = functools.reduce(op, args)
    except TypeError:
        raise LsonTypeError(f"unsupported operand types for {name}: {encode(args)}")
    except ZeroDivisionError:
        raise LsonArithmeticError("Division by zero")
    except OverflowError:
        raise LsonArithmeticError(f"{name}: result out of range")
    if isinstance(result, float) and not math.isfinite(result):
        raise LsonArithmeticError(f"{name}: result out of range")
    return result


def add(evaluator: Evaluator, args: list[LsonValue]) -> LsonValue:
    return _fold("+", operator.add, args)


def sub(evaluator: Evaluator, args: list[LsonValue]) -> LsonValue:
    return _fold("-", operator.sub, args)


def mul(evaluator: Evaluator, args: list[LsonValue]) -> LsonValue:
    return _fold("*", operator.mul, args)


def div(evaluator: Evaluator, args: list[LsonValue]) -> LsonValue:
    return _fold("/", operator.truediv, args)


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, op: Callable, args: list[LsonValue], ordered: bool = True) -> bool:
    """True if every consecutive pair satisfies `op`: a0 op a1, a1 op a2, ..."""
    if len(args) < 2:
        raise LsonArityError(f"{name}: 2 or more arguments expected")
    if ordered and any(isinstance(a, bool) for a in args):
        raise LsonTypeError(f"cannot compare {encode(args)} with {name}")
    try:
        return all(op(a, b) for a, b in zip(args, args[1:]))
    except TypeError:
        raise LsonTypeError(f"cannot compare {encode(args)} with {name}")


def gte(evaluator: Evaluator, args: list[LsonValue]) -> bool:
    return _chain(">=", operator.ge, args)


def gt(evaluator: Evaluator, args: list[LsonValue]) -> bool:
    return _chain(">", operator.gt, args)


def is_equal(a: LsonValue, b: LsonValue) -> bool:
    """Structural equality for LSON values; booleans never equal numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(is_equal(a[k], b[k]) for k in a)
    return a == b


def eq(evaluator: Evaluator, args: list[LsonValue]) -> bool:
    return _chain("==", is_equal, args, ordered=False)


def ne(evaluator: Evaluator, args: list[LsonValue]) -> bool:
    return _chain("!=", lambda a, b: not is_equal(a, b), args, ordered=False)


def lt(evaluator: Evaluator, args: list[LsonValue]) -> bool:
    return _chain("<", operator.lt, args)


def lte(evaluator: Evaluator, args: list[LsonValue]) -> bool:
    return _chain("<=", operator.le, args)


# -------------------------------
# Lists
# -------------------------------
def make_list(evaluator: Evaluator, args: list[LsonValue]) -> list[LsonValue]:
    return args


def append(evaluator: Evaluator, args: list[LsonValue]) -> list[LsonValue]:
    """One-level concatenation of list arguments."""
    if not all(isinstance(a, list) for a in args):
        raise LsonTypeError(f"append: every argument must be a list, got {encode(args)}")
    result: list[LsonValue] = []
    for a in args:
        result.extend(a)
    return result


def conj(evaluator: Evaluator, args: list[LsonValue]) -> list[LsonValue]:
    """(conj xs a b ...) => xs with a, b, ... added as elements at the end."""
    if len(args) < 2:
        raise LsonArityError("conj: too few arguments")
    xs = args[0]
    if not isinstance(xs, list):
        raise LsonTypeError(f"conj: first argument must be a list, got {encode(xs)}")
    return xs + args[1:]


def cons(evaluator: Evaluator, args: list[LsonValue]) -> list[LsonValue]:
    """(cons x xs) => a new list with x in front of xs."""
    if len(args) != 2:
        raise LsonArityError("cons: wrong # of arguments")
    head, tail = args
    if not isinstance(tail, list):
        raise LsonTypeError(f"cons: second argument must be a list, got {encode(tail)}")
    return [head] + tail


# -------------------------------
# Introspection
# -------------------------------
def debug_print(evaluator: Evaluator, args: list[LsonValue]) -> LsonValue:
    """Write each argument on its own line to the diagnostic stream and pass the input through."""
    out = evaluator.out if evaluator.out is not None else sys.stdout
    for value in args:
        out.write(encode(value))
        out.write("\n")
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    return args


def global_names(evaluator: Evaluator, args: list[LsonValue]) -> list[str]:
    return evaluator.globals.names()


BUILTINS: dict[str, Primitive] = {
    ">=": gte,
    ">": gt,
    "==": eq,
    "!=": ne,
    "<": lt,
    "<=": lte,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "list": make_list,
    "p": debug_print,
    "globals": global_names,
    "append": append,
    "conj": conj,
    "cons": cons,
    # registered in the macro table, see macro_builtin.register
    "let": let_macro,
}

# Names bound in the global table, in listing order
GLOBAL_BUILTINS = (
    ">=", ">", "==", "!=", "<", "<=",
    "+", "-", "*", "/", "list", "p", "globals",
    "append", "conj", "cons",
)


def register(env: GlobalEnvironment) -> None:
    """Bind every global builtin name to its Builtin reference."""
    # globals are listed newest first; define in reverse so `globals` shows listing order
    for name in reversed(GLOBAL_BUILTINS):
        env.define(name, Builtin(name))
