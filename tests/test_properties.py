import string
from functools import reduce

import pytest
from hypothesis import given, strategies as st

from lson import errors
from lson.interpreter import Interpreter

RESERVED = {"quote", "def", "if", "fn", "defmacro", "do", "not", "unused",
            "list", "p", "globals", "append", "conj", "cons"}

name_strat = st.text(alphabet=string.ascii_letters + "-?!", min_size=1, max_size=12).filter(
    lambda s: s not in RESERVED
)
number_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.floats(min_value=-1e6, max_value=1e6, allow_infinity=False, allow_nan=False),
)
literal_strat = st.one_of(number_strat, st.booleans(), st.none())


@given(name_strat, literal_strat, literal_strat)
def test_def_then_lookup_then_redefine(name, value, other):
    interp = Interpreter(prelude=None)
    assert interp.evaluate(["def", name, value]) == value
    assert interp.evaluate(name) == value
    assert interp.evaluate([["fn", ["unused"], name], 0]) == value
    with pytest.raises(errors.LsonAlreadyDefined):
        interp.evaluate(["def", name, other])


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=8))
def test_arithmetic_is_a_left_fold(xs):
    interp = Interpreter(prelude=None)
    assert interp.evaluate(["+", *xs]) == sum(xs)
    assert interp.evaluate(["-", *xs]) == reduce(lambda a, b: a - b, xs)


@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=2, max_size=8))
def test_comparison_is_chained(xs):
    interp = Interpreter(prelude=None)
    assert interp.evaluate(["<=", *xs]) is all(a <= b for a, b in zip(xs, xs[1:]))
    assert interp.evaluate([">", *xs]) is all(a > b for a, b in zip(xs, xs[1:]))


@given(st.lists(st.integers(), max_size=6), st.lists(st.integers(), max_size=6))
def test_rest_parameter_captures_remaining(prefix_values, rest_values):
    interp = Interpreter(prelude=None)
    params = [f"p{i}" for i in range(len(prefix_values))] + ["&", "rest"]
    fn = ["fn", params, ["list", ["list", *params[:-2]], "rest"]]
    assert interp.evaluate([fn, *prefix_values, *rest_values]) == [prefix_values, rest_values]


@given(literal_strat)
def test_not_matches_truthiness(value):
    interp = Interpreter(prelude=None)
    assert interp.evaluate(["not", value]) is (value is False or value is None)
