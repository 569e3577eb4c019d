"""S-expressions and Q-expressions.

Both are ordered lists of values that own their children. They differ only
in how the evaluator treats them: an SExpr is reduced, a QExpr is inert data.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from lispy import LispValue
from lispy.types.value import copy_value


class Expr:
    """Common list behaviour for the two list variants."""

    __slots__ = ("cells",)

    TYPE_NAME = "S-Expression"
    OPEN = "("
    CLOSE = ")"

    def __init__(self, cells: Iterable[LispValue] = ()):
        self.cells: list[LispValue] = list(cells)

    def append(self, value: LispValue) -> Expr:
        self.cells.append(value)
        return self

    def pop(self, index: int = 0) -> LispValue:
        return self.cells.pop(index)

    def copy(self) -> Expr:
        return type(self)(copy_value(c) for c in self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> LispValue:
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.OPEN)
            buffer.write(" ".join(str(c) for c in self.cells))
            buffer.write(self.CLOSE)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    __slots__ = ()


class QExpr(Expr):
    __slots__ = ()

    TYPE_NAME = "Q-Expression"
    OPEN = "{"
    CLOSE = "}"
