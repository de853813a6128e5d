import pytest

from lson import errors
from lson.types.bind import bind_arguments


@pytest.mark.parametrize(
    "params,args,expected",
    [
        ([], [], []),
        (["a"], [1], [("a", 1)]),
        (["a", "b"], [1, 2], [("a", 1), ("b", 2)]),
        (["&", "rest"], [], [("rest", [])]),
        (["&", "rest"], [1, 2], [("rest", [1, 2])]),
        (["a", "&", "rest"], [1, 2, 3], [("a", 1), ("rest", [2, 3])]),
        (["a", "&", "rest"], [1], [("a", 1), ("rest", [])]),
        ([["a", "b"], "c"], [[1, 2], 3], [("a", 1), ("b", 2), ("c", 3)]),
        ([["a", ["b", "c"]]], [[1, [2, 3]]], [("a", 1), ("b", 2), ("c", 3)]),
        ([["h", "&", "t"]], [[1, 2, 3]], [("h", 1), ("t", [2, 3])]),
        ([[]], [[]], []),
    ],
)
def test_bind_shapes(params, args, expected):
    assert bind_arguments(params, args) == expected


def test_rest_binding_is_a_fresh_list():
    args = [1, 2, 3]
    bindings = bind_arguments(["&", "xs"], args)
    assert bindings[0][1] == args
    assert bindings[0][1] is not args


def test_too_many_arguments():
    with pytest.raises(errors.LsonTooManyArguments):
        bind_arguments(["a"], [1, 2])
    with pytest.raises(errors.LsonArityError):
        bind_arguments([], [1])


def test_too_few_arguments():
    with pytest.raises(errors.LsonTooFewArguments):
        bind_arguments(["a", "b"], [1])
    with pytest.raises(errors.LsonArityError):
        bind_arguments(["a"], [])


def test_nested_pattern_needs_list_argument():
    with pytest.raises(errors.LsonDestructureError):
        bind_arguments([["a", "b"]], [5])


def test_nested_pattern_needs_an_argument():
    with pytest.raises(errors.LsonDestructureError):
        bind_arguments(["x", ["a", "b"]], [1])


def test_nested_pattern_arity_is_checked():
    with pytest.raises(errors.LsonTooManyArguments):
        bind_arguments([["a"]], [[1, 2]])


@pytest.mark.parametrize(
    "params",
    [
        ["&"],
        ["a", "&"],
        ["&", "x", "y"],
        ["&", 1],
    ],
)
def test_malformed_rest(params):
    with pytest.raises(errors.LsonDestructureError):
        bind_arguments(params, [1, 2])


@pytest.mark.parametrize("param", [1, None, True, {"a": 1}])
def test_unsupported_parameter(param):
    with pytest.raises(errors.LsonDestructureError):
        bind_arguments([param], [1])


def test_duplicate_names_first_wins_on_lookup(interp):
    assert interp.evaluate([["fn", ["x", "x"], "x"], 1, 2]) == 1
