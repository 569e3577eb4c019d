"""Core evaluator for the Lispy interpreter.

Reduces a value tree to a single value. Symbols resolve through the
environment, S-expressions reduce by applying their head to the rest, and
every other value evaluates to itself. Errors are values: the first Error
among a form's evaluated children becomes the result of the whole form.
"""

from __future__ import annotations

import logging

from lispy import LispValue
from lispy.config import get_max_depth
from lispy.runtime_context import enter_evaluation, exit_evaluation
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import SExpr
from lispy.types.symbol import Symbol
from lispy.evaluation.apply import apply

logger = logging.getLogger(__name__)


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return exactly one value."""
    match expr:
        case Symbol():
            value = env.lookup(expr)
            if isinstance(value, Error):
                logger.debug("Lookup of %s failed in %r", expr, env)
            return value
        case SExpr():
            limit = get_max_depth()
            try:
                if enter_evaluation() > limit:
                    logger.debug("Evaluation depth limit %d reached", limit)
                    return Error(
                        ErrorKind.RECURSION_LIMIT,
                        f"Maximum evaluation depth of {limit} exceeded!",
                    )
                return eval_sexpr(expr, env)
            finally:
                exit_evaluation()

    # --- Numbers, errors, functions and Q-expressions are self-evaluating ---
    return expr


def eval_sexpr(expr: SExpr, env: Environment) -> LispValue:
    """Reduce an S-expression.

    1) Evaluate every child left to right.
    2) The first Error among the results is the result.
    3) () evaluates to itself; a single child evaluates to that child.
    4) Otherwise apply the head to the remaining children.
    """
    cells = [evaluate(cell, env) for cell in expr.cells]

    for cell in cells:
        if isinstance(cell, Error):
            logger.debug("Propagating %s", cell)
            return cell

    if not cells:
        return SExpr()
    if len(cells) == 1:
        return cells[0]

    head, *args = cells
    return apply(head, args, env, evaluate)
