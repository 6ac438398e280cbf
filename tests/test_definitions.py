import pytest

from qlisp.types import Environment, Number, Error, SExpr, QExpr, Symbol, Lambda
from qlisp.evaluation.evaluator import evaluate


def test_def_binds_several_symbols(lisp):
    assert lisp("def {x y} 1 2") == SExpr()
    assert lisp("+ x y") == Number(3)


def test_def_is_visible_from_descendant_environments(lisp, env):
    lisp("(def {x} 5)")
    assert lisp("x") == Number(5)
    child = Environment(Environment(env))
    assert evaluate(child, Symbol("x")) == Number(5)


def test_def_overwrites(lisp):
    lisp("def {x} 1")
    lisp("def {x} {2}")
    assert lisp("x") == QExpr([Number(2)])


def test_local_assignment_does_not_leak_from_closure(lisp):
    lisp("def {setlocal} (lambda {v} {= {y} v})")
    assert lisp("setlocal 1") == SExpr()
    assert lisp("y") == Error("Unbound symbol 'y'")


def test_def_inside_closure_leaks_to_global(lisp):
    lisp("def {setglobal} (lambda {v} {def {z} v})")
    lisp("setglobal 2")
    assert lisp("z") == Number(2)


def test_local_assignment_at_top_level_binds_in_root(lisp, env):
    lisp("= {w} 9")
    assert env.lookup(Symbol("w")) == Number(9)


def test_definitions_run_in_order(lisp):
    # every child is evaluated before the error is picked, so b gets defined
    result = lisp("list (def {a} 1) (head {}) (def {b} 2)")
    assert isinstance(result, Error)
    assert lisp("a") == Number(1)
    assert lisp("b") == Number(2)


@pytest.mark.parametrize(
    "source,message",
    [
        (
            "def {x} 1 2",
            "Function 'def' cannot define mismatched number of values to symbols. "
            "Was given 1 symbol(s) but 2 value(s).",
        ),
        ("def {1} 2", "Function 'def' cannot define non-symbols. Expected Symbol, was given Number"),
        ("def 1 2", "Function 'def' passed incorrect type for argument 0. Expected Q-Expression, was given Number"),
        (
            "= {a b} 1",
            "Function '=' cannot define mismatched number of values to symbols. "
            "Was given 2 symbol(s) but 1 value(s).",
        ),
        ("fun {} {1}", "Function 'fun' passed empty Q-Expression, must contain at least one element"),
        ("fun {1 a} {a}", "Function 'fun' cannot define non-symbols. Expected Symbol, was given Number"),
        ("fun {f 1} {1}", "Cannot define non-symbol. Got Number, Expected Symbol."),
        ("fun {f a} 1", "Function 'fun' passed incorrect type for argument 1. Expected Q-Expression, was given Number"),
    ],
)
def test_definition_errors(lisp, source, message):
    assert lisp(source) == Error(message)


def test_fun_defines_a_global_lambda(lisp, env):
    assert lisp("fun {add a b} {+ a b}") == SExpr()
    assert isinstance(env.lookup(Symbol("add")), Lambda)
    assert lisp("add 1 2") == Number(3)


def test_fun_is_sugar_for_def_lambda(lisp, env):
    lisp("fun {f a b} {- a b}")
    lisp("def {g} (lambda {a b} {- a b})")
    assert env.lookup(Symbol("f")) == env.lookup(Symbol("g"))
    assert lisp("f 10 4") == lisp("g 10 4") == Number(6)
