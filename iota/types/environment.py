"""Runtime environment for Iota.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. A scope is shared by reference between every
closure created while it was active and every child scope it spawns, so a later
`define` in it is visible to all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from iota import LispValue
from iota.errors import IotaInvalidSymbol, IotaUnboundSymbol
from iota.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        # Fixed at creation, so the chain can never become cyclic.
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        Outer bindings of the same name are shadowed, never mutated.
        Raises IotaInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise IotaInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises IotaUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise IotaUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def child(self) -> Environment:
        """Create a new scope whose parent is this environment."""
        return Environment(outer=self)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the root."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
