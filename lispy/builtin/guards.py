"""Argument guards for builtins.

Each guard returns None when the check passes, or the Error value the
builtin should return. Builtins run every guard before doing any work:

    if err := check_count("head", args, 1):
        return err
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import QExpr
from lispy.types.symbol import Symbol
from lispy.types.value import type_name


def check_count(name: str, args: list[LispValue], expected: int) -> Error | None:
    if len(args) != expected:
        return Error(
            ErrorKind.ARITY_MISMATCH,
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {expected}.",
        )
    return None


def check_not_empty_args(name: str, args: list[LispValue]) -> Error | None:
    if not args:
        return Error(ErrorKind.ARITY_MISMATCH, f"Function '{name}' passed no arguments.")
    return None


def check_type(
    name: str, args: list[LispValue], index: int, expected: type, expected_name: str
) -> Error | None:
    value = args[index]
    # bool is an int subclass but never a Lispy Number
    if not isinstance(value, expected) or isinstance(value, bool):
        return Error(
            ErrorKind.TYPE_ERROR,
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Got {type_name(value)}, Expected {expected_name}.",
        )
    return None


def check_all_types(
    name: str, args: list[LispValue], expected: type, expected_name: str
) -> Error | None:
    for i in range(len(args)):
        if err := check_type(name, args, i, expected, expected_name):
            return err
    return None


def check_not_empty(name: str, args: list[LispValue], index: int) -> Error | None:
    if len(args[index]) == 0:
        return Error(
            ErrorKind.EMPTY_LIST, f"Function '{name}' passed {{}} for argument {index}."
        )
    return None


def check_symbols(name: str, names: QExpr) -> Error | None:
    """Every entry of a name list must be a Symbol."""
    for entry in names:
        if not isinstance(entry, Symbol):
            return Error(
                ErrorKind.TYPE_ERROR,
                f"Function '{name}' cannot define non-symbol. "
                f"Got {type_name(entry)}, Expected Symbol.",
            )
    return None
