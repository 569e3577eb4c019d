"""Helpers that apply to every runtime value.

Numbers are plain ints; every other variant implements `copy()` and carries
a `TYPE_NAME` used in diagnostics.
"""

from __future__ import annotations

from lispy import LispValue


def copy_value(v: LispValue) -> LispValue:
    """Deep copy with no shared mutable state, except builtins which are stateless."""
    if isinstance(v, int):
        return v
    return v.copy()


def type_name(v: LispValue) -> str:
    if isinstance(v, int):
        return "Number"
    return type(v).TYPE_NAME
