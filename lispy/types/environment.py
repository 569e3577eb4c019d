"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to evaluated values and supports
lexical scoping via an `outer` link. The frame with no `outer` is the root
frame, which holds the global bindings and is the target of `def`.

Values are copied on the way in and on the way out, so a binding never
aliases a value held anywhere else.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.errors import LispyInvalidSymbol
from lispy.types.error import Error, ErrorKind
from lispy.types.symbol import Symbol
from lispy.types.value import copy_value


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        """Climb the `outer` chain to the root frame."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        A miss in every frame yields an UnknownSymbol Error value rather than
        raising.
        """
        env = self.find(name)
        if env is None:
            return Error(ErrorKind.UNKNOWN_SYMBOL, f"Unbound Symbol '{name}'")
        return copy_value(env.vars[name])

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind a copy of `value` to `name` in this frame only.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = copy_value(value)

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind a copy of `value` to `name` in the root frame."""
        self.root().define(name, value)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def copy(self) -> Environment:
        """Copy this frame's bindings; the `outer` link is shared, not copied."""
        env = Environment(self.outer)
        for k, v in self.vars.items():
            env.vars[k] = copy_value(v)
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!s}")
            first = False
        buffer.write("}")

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
