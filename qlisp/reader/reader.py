"""Reader: converts a tagged parse tree into qlisp values."""

from __future__ import annotations

import math

from qlisp import LispValue
from qlisp.reader.parser import ParseNode, ROOT, NUMBER, SYMBOL, LIST_PAREN, LIST_BRACE, REGEX
from qlisp.types import Number, Symbol, Error, SExpr, QExpr

PUNCTUATION = frozenset({"(", ")", "{", "}"})


def read_number(node: ParseNode) -> LispValue:
    try:
        x = float(node.contents)
    except ValueError:
        return Error(f"Invalid number: {node.contents}")
    # strtod reports ERANGE where float() silently gives inf
    if math.isinf(x) or math.isnan(x):
        return Error(f"Invalid number: {node.contents}")
    return Number(x)


def _skipped(node: ParseNode) -> bool:
    if node.tag == REGEX or node.contents in PUNCTUATION:
        return True
    return not node.children and node.tag not in (LIST_PAREN, LIST_BRACE) and not node.contents.strip()


def read(node: ParseNode) -> LispValue:
    """Turn `node` (and its children) into a value tree.

    The root of a document and ( ... ) groups become S-Expressions, { ... }
    groups become Q-Expressions. Delimiters and anchor nodes are dropped.
    """
    if node.tag == NUMBER:
        return read_number(node)
    if node.tag == SYMBOL:
        return Symbol(node.contents)

    if node.tag in (ROOT, LIST_PAREN):
        expr = SExpr()
    elif node.tag == LIST_BRACE:
        expr = QExpr()
    else:
        return Error(f"Unknown parse node '{node.tag}'")

    for child in node.children:
        if _skipped(child):
            continue
        expr.add(read(child))
    return expr
