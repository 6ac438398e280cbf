import math

import pytest

from qlisp.types import Number, Error, SExpr, Symbol
from qlisp.builtin.env_builtin import add
from qlisp.errors import QlispArityError
from qlisp.evaluation.evaluator import call
from qlisp.printer import to_string


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("+ 1 2 3", 6),
        ("(- 5)", -5),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 1 2)", 0.5),
        ("(+ 1.5 2.25)", 3.75),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(% 10 3)", 1),
        ("(% 5 3)", -1),  # IEEE remainder rounds the quotient to nearest
        ("(% 7.5 2)", math.remainder(7.5, 2)),
        ("(- (- 3))", 3),
    ],
)
def test_arithmetic(lisp, source, expected):
    assert lisp(source) == Number(expected)


@pytest.mark.parametrize(
    "source,message",
    [
        ("(/ 1 0)", "Division by zero"),
        ("(/ 10 2 0 4)", "Division by zero"),
        ("(% 1 0)", "Remainder on division by zero"),
        (
            "(+ 1 {2})",
            "Function '+' passed incorrect type for argument 1. Expected Number, was given Q-Expression",
        ),
        (
            "(* x 2)",
            "Unbound symbol 'x'",
        ),
    ],
)
def test_arithmetic_errors(lisp, source, message):
    assert lisp(source) == Error(message)


def test_division_by_zero_mentions_division(lisp):
    result = lisp("(/ 1 0)")
    assert isinstance(result, Error)
    assert "division by zero" in result.message.lower()


def test_builtin_raises_and_call_converts(env):
    with pytest.raises(QlispArityError):
        add(env, SExpr())
    plus = env.lookup(Symbol("+"))
    assert call(env, plus, SExpr()) == Error("Function '+' passed no arguments")


BIG = "1" + "0" * 300  # 1e300 written out, the grammar has no exponents
INF = f"(* {BIG} {BIG})"


@pytest.mark.parametrize(
    "source,printed",
    [
        (INF, "inf"),
        (f"(- {INF})", "-inf"),
        (f"(- {INF} {INF})", "nan"),
        (f"(% {INF} 2)", "nan"),
        (f"(% (- {INF}) 3)", "nan"),
        (f"(% 3 {INF})", "3"),
        (f"(/ 1 {INF})", "0"),
    ],
)
def test_non_finite_results_are_values(lisp, source, printed):
    result = lisp(source)
    assert isinstance(result, Number)
    assert to_string(result) == printed


def test_remainder_of_infinity_is_nan(lisp):
    assert math.isnan(lisp(f"% {INF} 2").value)


def test_remainder_of_infinity_through_interpreter(interp):
    result = interp.eval(f"% {INF} 2")
    assert not result.terminated
    assert interp.print(result.value) == "nan"
