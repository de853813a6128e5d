from lson import errors
import pytest


def test_closure_captures_lexical_environment(interp):
    interp.evaluate(["def", "f", ["do", [["fn", ["x"], ["fn", [], "x"]], 5]]])
    assert interp.evaluate(["f"]) == 5
    # a binding for x at the call site makes no difference
    assert interp.evaluate([["fn", ["x"], ["f"]], 99]) == 5


def test_closure_does_not_see_caller_locals(interp):
    interp.evaluate(["def", "peek", ["fn", [], "hidden"]])
    with pytest.raises(errors.LsonUnboundName):
        interp.evaluate([["fn", ["hidden"], ["peek"]], 1])


def test_closure_sees_globals_defined_later(interp):
    interp.evaluate(["def", "later-user", ["fn", [], "later"]])
    interp.evaluate(["def", "later", 3])
    assert interp.evaluate(["later-user"]) == 3


def test_make_adder(interp):
    interp.evaluate(["defun", "make-adder", ["n"], ["fn", ["x"], ["+", "x", "n"]]])
    interp.evaluate(["def", "add2", ["make-adder", 2]])
    interp.evaluate(["def", "add10", ["make-adder", 10]])
    assert interp.evaluate(["add2", 1]) == 3
    assert interp.evaluate(["add10", 1]) == 11


def test_sibling_closures_share_parent_scope(interp):
    interp.evaluate([
        "def", "pair",
        [["fn", ["shared"], ["list", ["fn", [], "shared"], ["fn", [], ["*", "shared", 2]]]], 4],
    ])
    first, second = interp.evaluate("pair")
    assert first.env is second.env
    assert interp.evaluate([["fn", [["a", "b"]], ["list", ["a"], ["b"]]], "pair"]) == [4, 8]


def test_inner_scope_shadows_outer(interp):
    expr = [["fn", ["x"], [["fn", ["x"], "x"], 2]], 1]
    assert interp.evaluate(expr) == 2


def test_local_shadows_builtin(interp):
    assert interp.evaluate([["fn", ["list"], "list"], 7]) == 7


def test_recursive_function(interp):
    interp.evaluate(["defun", "fact", ["n"], ["if", ["<=", "n", 1], 1, ["*", "n", ["fact", ["-", "n", 1]]]]])
    assert interp.evaluate(["fact", 10]) == 3628800


def test_mutual_recursion(interp):
    interp.evaluate(["defun", "even?", ["n"], ["if", ["==", "n", 0], True, ["odd?", ["-", "n", 1]]]])
    interp.evaluate(["defun", "odd?", ["n"], ["if", ["==", "n", 0], False, ["even?", ["-", "n", 1]]]])
    assert interp.evaluate(["even?", 10]) is True
    assert interp.evaluate(["odd?", 7]) is True


def test_interpreters_are_independent(out):
    from lson.interpreter import Interpreter

    a = Interpreter(prelude=None, out=out)
    b = Interpreter(prelude=None, out=out)
    a.evaluate(["def", "only-in-a", 1])
    a.evaluate(["defmacro", "m", [], 1])
    with pytest.raises(errors.LsonUnboundName):
        b.evaluate("only-in-a")
    assert not b.macros.is_macro("m")
    b.evaluate(["def", "only-in-a", 2])
    assert a.evaluate("only-in-a") == 1
