"""Application engine for Lispy.

This module centralizes function application semantics:
- Builtins are invoked directly with the calling environment.
- Closures bind arguments positionally into a copy of their private
  environment. Too few arguments yields a partially applied closure; too
  many is an ArityMismatch error; an exact match evaluates the body with the
  closure frame re-parented onto the calling environment.

The evaluator is passed in as `evaluate_fn` so this module does not import it.
"""

from __future__ import annotations

import logging

from lispy import LispValue, EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import SExpr
from lispy.types.function import Builtin, Lambda
from lispy.types.value import type_name

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Parameters:
    - fn: The Lambda being applied. It is never mutated; binding happens on a copy.
    - args: The already-evaluated argument values.
    - env: The calling environment, which becomes the parent of the closure
      frame when the body runs.
    - evaluate_fn: Evaluator used to reduce the body.
    """
    given = len(args)
    expected = len(fn.formals)
    if given > expected:
        return Error(
            ErrorKind.ARITY_MISMATCH,
            f"Function passed too many arguments. Got {given}, Expected {expected}.",
        )

    fn = fn.copy()
    for value in args:
        fn.env.define(fn.formals.pop(0), value)

    if len(fn.formals) > 0:
        # Curried: the copy carries the bound arguments and awaits the rest
        return fn

    fn.env.outer = env
    return evaluate_fn(SExpr(fn.body.cells), fn.env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin; anything else is NotCallable."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    logger.debug("Cannot apply non-function %s", head)
    return Error(
        ErrorKind.NOT_CALLABLE,
        f"S-Expression starts with incorrect type. Got {type_name(head)}, Expected Function.",
    )
