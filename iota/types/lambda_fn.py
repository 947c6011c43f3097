"""Lambda (closure) representation and argument binding for Iota."""

from __future__ import annotations

from io import StringIO

from iota import SExpression, LispValue
from iota.errors import IotaArityError
from iota.types.environment import Environment
from iota.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Shared with the defining scope, never copied.
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters in a
        fresh child of the captured environment, and return it.

        Raises IotaArityError when the argument count differs from the number
        of formals. Duplicate formals are bound in order, so the last one wins.
        """
        if len(args) != len(self.formals):
            raise IotaArityError(
                f"Expected {len(self.formals)} argument(s), got {len(args)}: {args}"
            )
        new_env = self.env.child()
        for name, value in zip(self.formals, args):
            new_env.define(name, value)
        return new_env
