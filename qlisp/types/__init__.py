"""The six value variants of qlisp plus the environment they live in."""

from qlisp.types.symbol import Symbol, VARIADIC
from qlisp.types.number import Number
from qlisp.types.error import Error
from qlisp.types.session import SessionControl
from qlisp.types.expression import Expression, SExpr, QExpr
from qlisp.types.environment import Environment
from qlisp.types.lambda_fn import Builtin, Lambda

FUNCTION_TYPES = (Builtin, Lambda)

__all__ = (
    "Symbol",
    "VARIADIC",
    "Number",
    "Error",
    "SessionControl",
    "Expression",
    "SExpr",
    "QExpr",
    "Environment",
    "Builtin",
    "Lambda",
    "FUNCTION_TYPES",
)
