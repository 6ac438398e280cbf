"""Function values: primitive builtins and user-defined lambdas."""

from __future__ import annotations

from qlisp import BuiltinFn
from qlisp.types.environment import Environment
from qlisp.types.expression import QExpr


class Builtin:
    """Opaque reference to a primitive operation."""

    __slots__ = ("name", "fn")
    __match_args__ = ("name",)
    type_name = "Function"

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"

    def copy(self) -> Builtin:
        return Builtin(self.name, self.fn)


class Lambda:
    """A first-class closure with formal parameters, body, and its own environment.

    `bound` counts the arguments already bound into `env` by earlier partial
    applications. A Lambda with `bound > 0` and formals still pending is a
    partially applied function; once every formal is bound it is saturated and
    its body can be evaluated.
    """

    __slots__ = ("formals", "body", "env", "bound")
    __match_args__ = ("formals", "body")
    type_name = "Function"

    def __init__(
        self,
        formals: QExpr,
        body: QExpr,
        env: Environment | None = None,
        bound: int = 0,
    ):
        self.formals: QExpr = formals
        self.body: QExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()
        self.bound = bound

    @property
    def is_partial(self) -> bool:
        return self.bound > 0 and len(self.formals) > 0

    @property
    def is_saturated(self) -> bool:
        return len(self.formals) == 0

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Lambda {self.formals!r} -> {self.body!r}>"

    def copy(self) -> Lambda:
        return Lambda(self.formals.copy(), self.body.copy(), self.env.copy(), self.bound)
