"""Error values.

Errors are ordinary first-class values: builtins return them, lists hold
them, and the evaluator propagates the first one it finds in a form.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    TYPE_ERROR = "TypeError"
    ARITY_MISMATCH = "ArityMismatch"
    EMPTY_LIST = "EmptyList"
    DIVISION_BY_ZERO = "DivisionByZero"
    UNKNOWN_SYMBOL = "UnknownSymbol"
    NOT_CALLABLE = "NotCallable"
    INVALID_NUMBER = "InvalidNumber"
    RECURSION_LIMIT = "RecursionLimit"


@dataclass(frozen=True)
class Error:
    TYPE_NAME: ClassVar[str] = "Error"

    kind: ErrorKind
    message: str

    def copy(self) -> Error:
        return self

    def __str__(self) -> str:
        return f"Error: {self.message}"
