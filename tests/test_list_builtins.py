import pytest

from qlisp.types import Number, Symbol, Error, SExpr, QExpr


def q(*xs):
    return QExpr(Number(x) if isinstance(x, (int, float)) else x for x in xs)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("list 1 2 3", q(1, 2, 3)),
        ("head {1 2 3}", q(1)),
        ("tail {1 2 3}", q(2, 3)),
        ("init {1 2 3}", q(1, 2)),
        ("tail {1}", q()),
        ("head {x y}", q(Symbol("x"))),
        ("join {1 2} {3} {}", q(1, 2, 3)),
        ("join {1}", q(1)),
        ("cons 1 {2 3}", q(1, 2, 3)),
        ("cons {1} {}", q(q(1))),
        ("len {1 2 3}", Number(3)),
        ("len {}", Number(0)),
        ("eval {+ 1 2}", Number(3)),
        ("eval {head {1 2}}", q(1)),
        ("eval (tail {tail tail {5 6 7}})", q(6, 7)),
        ("eval {}", SExpr()),
        ("head (list 1 2 3)", q(1)),
    ],
)
def test_list_builtins(lisp, source, expected):
    assert lisp(source) == expected


def test_builtin_alone_in_parens_is_returned_not_called(lisp):
    # a one-element S-Expression reduces to its element
    assert lisp("(list)").type_name == "Function"


@pytest.mark.parametrize(
    "source,message",
    [
        ("head {}", "Function 'head' passed empty Q-Expression, must contain at least one element"),
        ("tail {}", "Function 'tail' passed empty Q-Expression, must contain at least one element"),
        ("init {}", "Function 'init' passed empty Q-Expression, must contain at least one element"),
        ("head {1} {2}", "Function 'head' passed incorrect number of arguments. Expected 1, was given 2"),
        ("head 1", "Function 'head' passed incorrect type for argument 0. Expected Q-Expression, was given Number"),
        ("eval 1", "Function 'eval' passed incorrect type for argument 0. Expected Q-Expression, was given Number"),
        ("eval {1} {2}", "Function 'eval' passed incorrect number of arguments. Expected 1, was given 2"),
        ("join {1} 2", "Function 'join' passed incorrect type for argument 1. Expected Q-Expression, was given Number"),
        ("cons 1 2", "Function 'cons' passed incorrect type for argument 1. Expected Q-Expression, was given Number"),
        ("cons 1 {} {}", "Function 'cons' passed incorrect number of arguments. Expected 2, was given 3"),
        ("len 5", "Function 'len' passed incorrect type for argument 0. Expected Q-Expression, was given Number"),
        ("eval {1 2}", "S-Expression starts with incorrect type. Expected Function, was given Number"),
    ],
)
def test_list_builtin_errors(lisp, source, message):
    assert lisp(source) == Error(message)


def test_quoted_lists_are_not_evaluated(lisp):
    # `undefined` would be an unbound symbol if it were looked up
    assert lisp("{undefined (1 2)}") == QExpr([Symbol("undefined"), SExpr([Number(1), Number(2)])])


def test_list_builtins_do_not_touch_bound_values(lisp):
    lisp("def {xs} {1 2 3}")
    assert lisp("tail xs") == q(2, 3)
    assert lisp("cons 0 xs") == q(0, 1, 2, 3)
    assert lisp("xs") == q(1, 2, 3)
