# Core type aliases for Lispy's data model.
# Numbers are plain Python ints; every other runtime datum (Symbol, Error,
# SExpr, QExpr, Builtin, Lambda) lives in lispy.types.
#
# Naming guidance:
# - LispValue: any evaluated runtime value.
# - EvaluatorFn: the evaluator entry point, passed into the application
#   engine so that it does not import the evaluator module directly.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Evaluator function type: evaluate(expr, env) -> LispValue
EvaluatorFn = Callable[..., LispValue]
