# Core type aliases for qlisp's data model.
# Every runtime datum is one of the six Value variants defined in qlisp.types
# (Number, Symbol, Error, Builtin/Lambda, SExpr, QExpr). Code and data share the
# same representation: an SExpr read from source is evaluated, a QExpr is data.
#
# Naming guidance:
# - LispValue: Use in evaluator/runtime code to denote any Value variant.
# - BuiltinFn: Signature of the Python callables wrapped by Builtin values.
#
# The aliases are defined before the public API is imported below, so that the
# submodules can import them from a partially initialised package.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Builtin function type: (environment, argument s-expression) -> value
BuiltinFn = Callable[[Any, Any], LispValue]

# Evaluator function type: passed to the application engine
EvaluatorFn = Callable[[Any, LispValue], LispValue]


from qlisp.types import (  # noqa: E402
    Number,
    Symbol,
    Error,
    Builtin,
    Lambda,
    SExpr,
    QExpr,
    Environment,
    SessionControl,
)
from qlisp.reader.reader import read  # noqa: E402
from qlisp.evaluation.evaluator import evaluate, call, run  # noqa: E402
from qlisp.printer import to_string  # noqa: E402
from qlisp.interpreter import Interpreter, EvalResult  # noqa: E402

__all__ = (
    "LispValue",
    "BuiltinFn",
    "EvaluatorFn",
    "Number",
    "Symbol",
    "Error",
    "Builtin",
    "Lambda",
    "SExpr",
    "QExpr",
    "Environment",
    "SessionControl",
    "read",
    "evaluate",
    "call",
    "run",
    "to_string",
    "Interpreter",
    "EvalResult",
)
