"""Application engine for qlisp.

This module centralizes function application semantics:
- Builtins are invoked with the calling environment and the argument list.
  Precondition failures are raised as QlispError subclasses and turned into
  Error values here, so callers always get a value back.
- Lambdas bind formals to arguments positionally in their own environment,
  collect a variadic tail after `&`, and either evaluate their body (all
  formals bound) or come back as a partially applied copy (currying).
"""

from __future__ import annotations

import logging

from qlisp import LispValue, EvaluatorFn
from qlisp.errors import QlispError
from qlisp.types import Builtin, Lambda, Environment, Error, SExpr, QExpr, VARIADIC

logger = logging.getLogger(__name__)

VARIADIC_FORMAT_ERROR = "Function format invalid. Symbol '&' not followed by single symbol."


def apply_builtin(fn: Builtin, args: SExpr, env: Environment) -> LispValue:
    try:
        return fn.fn(env, args)
    except QlispError as exc:
        return Error(str(exc))


def apply_lambda(
    fn: Lambda,
    args: SExpr,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda value to already-evaluated arguments.

    `fn` is consumed: its formals are popped as they are bound and its
    environment receives the bindings. Values fetched from an Environment are
    copies, so the stored definition is never touched.
    """
    given = len(args)
    total = len(fn.formals)

    while len(args):
        if not len(fn.formals):
            return Error(f"Function passed too many arguments. Got {given}, Expected {total}.")

        sym = fn.formals.pop(0)
        if sym == VARIADIC:
            if len(fn.formals) != 1:
                return Error(VARIADIC_FORMAT_ERROR)
            rest = fn.formals.pop(0)
            fn.env.put(rest, args.to_qexpr())
            fn.bound += 1
            break

        fn.env.put(sym, args.pop(0))
        fn.bound += 1

    # Variadic tail with nothing left to collect binds to an empty list.
    if len(fn.formals) and fn.formals[0] == VARIADIC:
        if len(fn.formals) != 2:
            return Error(VARIADIC_FORMAT_ERROR)
        fn.formals.pop(0)
        fn.env.put(fn.formals.pop(0), QExpr())

    if not fn.is_saturated:
        logger.debug("partial application: %d bound, %d formals pending", fn.bound, len(fn.formals))
        return fn.copy()

    # Globals and builtins are reached through the caller's scope chain.
    fn.env.parent = env
    logger.debug("invoking lambda body %r", fn.body)
    return evaluate_fn(fn.env, fn.body.copy().to_sexpr())


def apply(
    head: LispValue,
    args: SExpr,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Builtin or a Lambda.

    Anything else yields an Error value naming the offending type.
    """
    if isinstance(head, Builtin):
        return apply_builtin(head, args, env)
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    return Error(f"Cannot apply non-function. Expected Function, was given {head.type_name}")
