"""Render values as text."""

from __future__ import annotations

import math

from qlisp import LispValue
from qlisp.types import Number, Symbol, Error, Builtin, Lambda, Expression, SExpr, QExpr


def format_number(x: float) -> str:
    """Shortest decimal that reads back as the same float; integral values drop '.0'."""
    if math.isfinite(x) and x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def _join(expr: Expression, open_: str, close: str) -> str:
    return open_ + " ".join(to_string(cell) for cell in expr) + close


def to_string(value: LispValue) -> str:
    match value:
        case Number(x):
            return format_number(x)
        case Symbol(name):
            return name
        case Error(message):
            return f"Error: {message}"
        case Builtin():
            return "builtin function"
        case Lambda(formals, body):
            return f"function ({to_string(formals)} -> {to_string(body)})"
        case SExpr():
            return _join(value, "(", ")")
        case QExpr():
            return _join(value, "{", "}")
    raise TypeError(f"Cannot print {value!r}")
