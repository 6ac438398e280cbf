"""Runtime environment for qlisp.

The Environment stores bindings of Symbols to values and supports nested
scopes via a `parent` link. The parent is a back-reference, never owned: a
Lambda's environment gets its parent assigned each time the Lambda is called.
Values going in and coming out are copied, so no two containers ever share a
value.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from qlisp import LispValue
from qlisp.errors import QlispInvalidSymbol, QlispUnboundSymbol
from qlisp.types.error import Error
from qlisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.parent: Environment | None = parent

    def _find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def get(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`, or an Error value if unbound."""
        env = self._find(name)
        if env is None:
            return Error(f"Unbound symbol '{name}'")
        return env.vars[name].copy()

    def lookup(self, name: Symbol) -> LispValue:
        """Like `get`, but raises QlispUnboundSymbol instead of returning an Error."""
        env = self._find(name)
        if env is None:
            raise QlispUnboundSymbol(f"Unbound symbol '{name}'")
        return env.vars[name].copy()

    def put(self, name: Symbol, value: LispValue) -> None:
        """Bind a copy of `value` to `name` in this frame, replacing any old binding."""
        if not isinstance(name, Symbol):
            raise QlispInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value.copy()

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the outermost (global) environment."""
        self.root().put(name, value)

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-put a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.put(k, v)

    def bindings(self) -> Iterator[tuple[Symbol, LispValue]]:
        """Bindings of this frame only, in insertion order."""
        return iter(self.vars.items())

    def copy(self) -> Environment:
        """Deep-copy this frame's bindings; the parent reference is shared."""
        env = Environment(self.parent)
        for k, v in self.vars.items():
            env.vars[k] = v.copy()
        return env

    def __contains__(self, name: Symbol) -> bool:
        return self._find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.parent
        return f"<Environment chain: {' -> '.join(chain)}>"
