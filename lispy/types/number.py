"""Fixed-width integer arithmetic.

Numbers are plain Python ints kept inside the signed 64-bit range. Results
wrap modulo 2**64 in two's complement, and division truncates toward zero.
"""

from __future__ import annotations

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1
_MODULUS = 1 << INT_BITS


def in_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def wrap(n: int) -> int:
    """Reduce an unbounded int to the signed 64-bit range."""
    n &= _MODULUS - 1
    return n - _MODULUS if n > INT_MAX else n


def truncate_div(a: int, b: int) -> int:
    """Integer division rounding toward zero. `b` must be non-zero."""
    q = abs(a) // abs(b)
    return wrap(q if (a < 0) == (b < 0) else -q)
