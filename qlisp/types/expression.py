"""S-Expressions and Q-Expressions.

Both variants hold an ordered, mutable list of child values that they own
exclusively. The evaluator and builtins work on them destructively (pop,
take, join), so a value that has to live in two places must be copied first.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from qlisp import LispValue


class Expression:
    __slots__ = ("cells",)
    __match_args__ = ("cells",)
    type_name = "Expression"

    def __init__(self, cells: Iterable[LispValue] | None = None):
        self.cells: list[LispValue] = list(cells) if cells is not None else []

    # --- Sequence protocol ---
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> LispValue:
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.cells == other.cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"

    # --- List primitives ---
    def add(self, value: LispValue) -> Expression:
        """Append `value` and return self."""
        self.cells.append(value)
        return self

    def pop(self, index: int = 0) -> LispValue:
        """Remove and return the child at `index`."""
        return self.cells.pop(index)

    def take(self, index: int) -> LispValue:
        """Remove the child at `index` and drop the remaining children."""
        value = self.cells.pop(index)
        self.cells.clear()
        return value

    def join(self, other: Expression) -> Expression:
        """Move every child of `other` onto the end of self."""
        self.cells.extend(other.cells)
        other.cells = []
        return self

    def cons(self, value: LispValue) -> Expression:
        """Prepend `value` and return self."""
        self.cells.insert(0, value)
        return self

    def copy(self) -> Expression:
        return type(self)(cell.copy() for cell in self.cells)

    # --- Relabeling: cells move, nothing is copied ---
    def to_qexpr(self) -> QExpr:
        q = QExpr()
        q.cells, self.cells = self.cells, []
        return q

    def to_sexpr(self) -> SExpr:
        s = SExpr()
        s.cells, self.cells = self.cells, []
        return s


class SExpr(Expression):
    """Evaluable list: the head must reduce to a function."""

    __slots__ = ()
    type_name = "S-Expression"


class QExpr(Expression):
    """Quoted list: never evaluated automatically."""

    __slots__ = ()
    type_name = "Q-Expression"
