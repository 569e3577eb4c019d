from lispy.types.symbol import Symbol
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import Expr, SExpr, QExpr
from lispy.types.environment import Environment
from lispy.types.function import Builtin, Lambda
from lispy.types.value import copy_value, type_name

__all__ = [
    "Symbol",
    "Error",
    "ErrorKind",
    "Expr",
    "SExpr",
    "QExpr",
    "Environment",
    "Builtin",
    "Lambda",
    "copy_value",
    "type_name",
]
