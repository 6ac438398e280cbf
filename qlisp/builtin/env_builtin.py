"""Built-in functions for the qlisp runtime environment.

This module defines list manipulation, arithmetic, variable and function
definition, environment introspection and the session exit request. Every
builtin receives the calling Environment and its argument S-Expression, which
it consumes. Precondition failures are raised as QlispError subclasses; the
application engine turns them into Error values.
"""
from __future__ import annotations

import logging
import math
import operator

from qlisp import LispValue
from qlisp.errors import QlispArityError, QlispTypeError, QlispValueError, QlispZeroDivisionError
from qlisp.evaluation.evaluator import evaluate
from qlisp.types import (
    Builtin,
    Environment,
    Error,
    Lambda,
    Number,
    QExpr,
    SExpr,
    SessionControl,
    Symbol,
)

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checks
# -------------------------------
def expect_count(name: str, args: SExpr, n: int) -> None:
    if len(args) != n:
        raise QlispArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Expected {n}, was given {len(args)}"
        )


def expect_type(name: str, args: SExpr, index: int, expected: type) -> None:
    if index >= len(args):
        raise QlispArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Expected at least {index + 1}, was given {len(args)}"
        )
    given = args[index]
    if not isinstance(given, expected):
        raise QlispTypeError(
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Expected {expected.type_name}, was given {given.type_name}"
        )


def expect_non_empty(name: str, args: SExpr, index: int) -> None:
    if len(args[index]) == 0:
        raise QlispValueError(
            f"Function '{name}' passed empty {args[index].type_name}, "
            "must contain at least one element"
        )


def expect_symbols(name: str, syms: QExpr) -> None:
    for sym in syms:
        if not isinstance(sym, Symbol):
            raise QlispTypeError(
                f"Function '{name}' cannot define non-symbols. "
                f"Expected Symbol, was given {sym.type_name}"
            )


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: SExpr) -> QExpr:
    """Relabel the argument list as a Q-Expression."""
    return args.to_qexpr()


def head(env: Environment, args: SExpr) -> QExpr:
    """Q-Expression holding only the first element."""
    expect_count("head", args, 1)
    expect_type("head", args, 0, QExpr)
    expect_non_empty("head", args, 0)
    q = args.take(0)
    del q.cells[1:]
    return q


def tail(env: Environment, args: SExpr) -> QExpr:
    """Q-Expression without its first element."""
    expect_count("tail", args, 1)
    expect_type("tail", args, 0, QExpr)
    expect_non_empty("tail", args, 0)
    q = args.take(0)
    q.pop(0)
    return q


def init(env: Environment, args: SExpr) -> QExpr:
    """Q-Expression without its last element."""
    expect_count("init", args, 1)
    expect_type("init", args, 0, QExpr)
    expect_non_empty("init", args, 0)
    q = args.take(0)
    q.pop(-1)
    return q


def eval_builtin(env: Environment, args: SExpr) -> LispValue:
    """Evaluate a Q-Expression as if it were an S-Expression."""
    expect_count("eval", args, 1)
    expect_type("eval", args, 0, QExpr)
    return evaluate(env, args.take(0).to_sexpr())


def join(env: Environment, args: SExpr) -> QExpr:
    """Concatenate Q-Expressions left to right."""
    if not len(args):
        raise QlispArityError("Function 'join' passed no arguments")
    for i in range(len(args)):
        expect_type("join", args, i, QExpr)
    q = args.pop(0)
    while len(args):
        q.join(args.pop(0))
    return q


def cons(env: Environment, args: SExpr) -> QExpr:
    """Prepend a value to a Q-Expression."""
    expect_count("cons", args, 2)
    expect_type("cons", args, 1, QExpr)
    q = args.pop(1)
    q.cons(args.take(0))
    return q


def len_builtin(env: Environment, args: SExpr) -> Number:
    expect_count("len", args, 1)
    expect_type("len", args, 0, QExpr)
    return Number(len(args[0]))


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(x: float, y: float) -> float:
    if y == 0:
        raise QlispZeroDivisionError("Division by zero")
    return x / y


def _remainder(x: float, y: float) -> float:
    if y == 0:
        raise QlispZeroDivisionError("Remainder on division by zero")
    if math.isinf(x):
        return math.nan
    return math.remainder(x, y)


OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _remainder,
}


def arithmetic(name: str, args: SExpr) -> Number:
    """Left fold of `name` over Number arguments; a lone `-` negates."""
    if not len(args):
        raise QlispArityError(f"Function '{name}' passed no arguments")
    for i in range(len(args)):
        expect_type(name, args, i, Number)

    fold = OPERATORS[name]
    x = args.pop(0).value
    if name == "-" and not len(args):
        x = -x
    while len(args):
        x = fold(x, args.pop(0).value)
    return Number(x)


def add(env: Environment, args: SExpr) -> Number:
    return arithmetic("+", args)


def sub(env: Environment, args: SExpr) -> Number:
    return arithmetic("-", args)


def mul(env: Environment, args: SExpr) -> Number:
    return arithmetic("*", args)


def div(env: Environment, args: SExpr) -> Number:
    return arithmetic("/", args)


def mod(env: Environment, args: SExpr) -> Number:
    """IEEE remainder: the quotient is rounded to the nearest integer."""
    return arithmetic("%", args)


# -------------------------------
# Variables and functions
# -------------------------------
def bind_variables(env: Environment, args: SExpr, name: str) -> SExpr:
    """Shared body of `def` (global) and `=` (local)."""
    expect_type(name, args, 0, QExpr)
    syms = args[0]
    expect_symbols(name, syms)
    if len(syms) != len(args) - 1:
        raise QlispArityError(
            f"Function '{name}' cannot define mismatched number of values to symbols. "
            f"Was given {len(syms)} symbol(s) but {len(args) - 1} value(s)."
        )

    for i, sym in enumerate(syms):
        if name == "def":
            env.define(sym, args[i + 1])
        else:
            env.put(sym, args[i + 1])
    logger.debug("%s bound %s", name, " ".join(str(s) for s in syms))
    return SExpr()


def def_builtin(env: Environment, args: SExpr) -> SExpr:
    return bind_variables(env, args, "def")


def put_builtin(env: Environment, args: SExpr) -> SExpr:
    return bind_variables(env, args, "=")


def _lambda_formals(formals: QExpr) -> None:
    for sym in formals:
        if not isinstance(sym, Symbol):
            raise QlispTypeError(f"Cannot define non-symbol. Got {sym.type_name}, Expected Symbol.")


def lambda_builtin(env: Environment, args: SExpr) -> Lambda:
    """(lambda {formals} {body})"""
    expect_count("lambda", args, 2)
    expect_type("lambda", args, 0, QExpr)
    expect_type("lambda", args, 1, QExpr)
    _lambda_formals(args[0])

    formals = args.pop(0)
    body = args.pop(0)
    return Lambda(formals, body)


def fun(env: Environment, args: SExpr) -> SExpr:
    """(fun {name formals...} {body}) is (def {name} (lambda {formals...} {body}))."""
    expect_count("fun", args, 2)
    expect_type("fun", args, 0, QExpr)
    expect_type("fun", args, 1, QExpr)
    expect_non_empty("fun", args, 0)

    header = args.pop(0)
    body = args.pop(0)
    name = header.pop(0)
    if not isinstance(name, Symbol):
        raise QlispTypeError(
            f"Function 'fun' cannot define non-symbols. Expected Symbol, was given {name.type_name}"
        )
    _lambda_formals(header)
    return def_builtin(env, SExpr([QExpr([name]), Lambda(header, body)]))


# -------------------------------
# Session
# -------------------------------
def print_env(env: Environment, args: SExpr) -> SExpr:
    """Print every name bound in the current environment frame."""
    print("Named values in current environment:")
    for name, value in env.bindings():
        print(f"{value.type_name} {name}")
    return SExpr()


def exit_builtin(env: Environment, args: SExpr) -> Error:
    """Ask the session to terminate; see qlisp.evaluation.evaluator.run."""
    return Error("exit requested", SessionControl.TERMINATE)


BUILTINS = {
    # Session
    "exit": exit_builtin,
    "env": print_env,
    # Variables and functions
    "def": def_builtin,
    "=": put_builtin,
    "lambda": lambda_builtin,
    "fun": fun,
    # Lists
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "init": init,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "len": len_builtin,
    # Arithmetic
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
