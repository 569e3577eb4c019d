"""Function values: native builtins and user-defined closures."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Callable, ClassVar

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.expr import QExpr, SExpr


@dataclass(frozen=True, eq=False)
class Builtin:
    """A native operation. Stateless, so copies share the same object."""

    TYPE_NAME: ClassVar[str] = "Function"

    name: str
    fn: Callable[[Environment, list[LispValue]], LispValue]

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def copy(self) -> Builtin:
        return self

    def __str__(self) -> str:
        return "<builtin>"


class Lambda:
    """A closure: formal parameters, a body, and a private environment.

    `formals` holds the parameters still awaiting an argument; a partially
    applied closure has already bound the others into `env`.
    """

    __slots__ = ("formals", "body", "env")

    TYPE_NAME = "Function"

    def __init__(
        self, formals: QExpr, body: SExpr, env: Environment | None = None
    ):
        self.formals: QExpr = formals
        self.body: SExpr = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Lambda:
        return Lambda(self.formals.copy(), self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        # Bound arguments live in env.vars, so partial applications differ by them
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
            and self.env.vars == other.env.vars
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fun ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
