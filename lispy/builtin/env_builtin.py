"""Built-in functions for the Lispy runtime environment.

This module defines the fixed primitive catalogue: integer arithmetic, the
Q-expression list operations, variable definition and lambda construction.
Every builtin takes the calling environment and a list of evaluated
arguments, validates them with the guards before doing any work, and returns
a value (an Error value on failure).
"""
from __future__ import annotations

import logging
from typing import Callable

from lispy import LispValue
from lispy.builtin.guards import (
    check_all_types,
    check_count,
    check_not_empty,
    check_not_empty_args,
    check_symbols,
    check_type,
)
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import QExpr, SExpr
from lispy.types.function import Builtin, Lambda
from lispy.types.number import truncate_div, wrap
from lispy.types.symbol import Symbol

logger = logging.getLogger(__name__)


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(name: str, op: Callable[[int, int], int], args: list[LispValue]) -> LispValue:
    """Fold `op` left to right over Number arguments; unary minus negates."""
    if err := check_not_empty_args(name, args):
        return err
    if err := check_all_types(name, args, int, "Number"):
        return err

    result = args[0]
    if name == "-" and len(args) == 1:
        return wrap(-result)
    for y in args[1:]:
        if name == "/" and y == 0:
            return Error(ErrorKind.DIVISION_BY_ZERO, "Division By Zero!")
        result = op(result, y)
    return result


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the sum of all arguments."""
    return _fold("+", lambda a, b: wrap(a + b), args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    return _fold("-", lambda a, b: wrap(a - b), args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    return _fold("*", lambda a, b: wrap(a * b), args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left to right, truncating toward zero; a zero divisor is an error."""
    return _fold("/", truncate_div, args)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> QExpr:
    """Relabel the evaluated arguments as a Q-expression."""
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """Return a Q-expression holding only the first element of the argument."""
    if err := check_count("head", args, 1):
        return err
    if err := check_type("head", args, 0, QExpr, "Q-Expression"):
        return err
    if err := check_not_empty("head", args, 0):
        return err
    return QExpr(args[0].cells[:1])


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the argument with its first element removed."""
    if err := check_count("tail", args, 1):
        return err
    if err := check_type("tail", args, 0, QExpr, "Q-Expression"):
        return err
    if err := check_not_empty("tail", args, 0):
        return err
    return QExpr(args[0].cells[1:])


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate a Q-expression as an S-expression in the calling environment."""
    if err := check_count("eval", args, 1):
        return err
    if err := check_type("eval", args, 0, QExpr, "Q-Expression"):
        return err
    return evaluate(SExpr(args[0].cells), env)


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate Q-expressions in argument order."""
    if err := check_all_types("join", args, QExpr, "Q-Expression"):
        return err
    result = QExpr()
    for item in args:
        result.cells.extend(item.cells)
    return result


# -------------------------------
# Definitions
# -------------------------------
def _bind(name: str, env: Environment, args: list[LispValue],
          define: Callable[[Symbol, LispValue], None]) -> LispValue:
    """Shared body of `def` and `=`: pair a Q-expression of names with values."""
    if err := check_not_empty_args(name, args):
        return err
    if err := check_type(name, args, 0, QExpr, "Q-Expression"):
        return err
    names, values = args[0], args[1:]
    if err := check_symbols(name, names):
        return err
    if len(names) != len(values):
        return Error(
            ErrorKind.ARITY_MISMATCH,
            f"Function '{name}' passed too many arguments for symbols. "
            f"Got {len(names)}, Expected {len(values)}.",
        )
    for sym, value in zip(names, values):
        define(sym, value)
    return SExpr()


def def_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(def {names...} values...) binds each name in the root frame."""
    return _bind("def", env, args, env.define_global)


def put_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(= {names...} values...) binds each name in the calling frame."""
    return _bind("=", env, args, env.define)


def fun(env: Environment, args: list[LispValue]) -> LispValue:
    """(fun {formals} {body}) builds a closure with a fresh private environment."""
    if err := check_count("fun", args, 2):
        return err
    if err := check_all_types("fun", args, QExpr, "Q-Expression"):
        return err
    formals, body = args
    if err := check_symbols("fun", formals):
        return err
    return Lambda(formals.copy(), SExpr(body.copy().cells), Environment())


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    "def": def_builtin,
    "=": put_builtin,
    "fun": fun,
}


def register(env: Environment) -> None:
    """Register the builtin catalogue, and nothing else, into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    logger.debug("Registered %d builtins", len(BUILTINS))
