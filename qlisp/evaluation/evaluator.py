"""Core evaluator for the qlisp interpreter.

Symbols are resolved against the environment, S-Expressions are reduced by
evaluating every child and applying the head to the rest, and everything else
evaluates to itself. Errors are values: the first Error among the evaluated
children becomes the result of the whole S-Expression.
"""

from __future__ import annotations

import logging

from qlisp import LispValue
from qlisp.evaluation.apply import apply
from qlisp.types import Environment, Error, Symbol, SExpr, SessionControl, FUNCTION_TYPES

logger = logging.getLogger(__name__)


def evaluate(env: Environment, value: LispValue) -> LispValue:
    """Reduce `value` in `env`. The value is consumed."""
    match value:
        case Symbol():
            return env.get(value)
        case SExpr():
            return evaluate_sexpr(env, value)
    # Numbers, Errors, Functions and Q-Expressions are already reduced
    return value


def evaluate_sexpr(env: Environment, expr: SExpr) -> LispValue:
    # Children are evaluated eagerly and in order: `def` relies on it.
    expr.cells = [evaluate(env, cell) for cell in expr.cells]

    for i, cell in enumerate(expr.cells):
        if isinstance(cell, Error):
            return expr.take(i)

    if len(expr) == 0:
        return expr
    if len(expr) == 1:
        return expr.take(0)

    head = expr.pop(0)
    if not isinstance(head, FUNCTION_TYPES):
        return Error(
            f"S-Expression starts with incorrect type. Expected Function, was given {head.type_name}"
        )
    return apply(head, expr, env, evaluate)


def call(env: Environment, fn: LispValue, args: SExpr) -> LispValue:
    """Apply `fn` to the argument list `args` from the calling environment `env`."""
    return apply(fn, args, env, evaluate)


def run(env: Environment, value: LispValue) -> tuple[LispValue, SessionControl]:
    """Top-level evaluation: the result plus what the session should do next.

    An exit request surfaces as TERMINATE with an empty S-Expression as value,
    never as an error the caller has to recognise.
    """
    result = evaluate(env, value)
    if isinstance(result, Error) and result.terminates:
        logger.debug("session termination requested")
        return SExpr(), SessionControl.TERMINATE
    return result, SessionControl.CONTINUE
