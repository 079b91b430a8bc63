"""
Exact counting: factorial, permutations, combinations.

All counts are computed with Python's unbounded integers and returned as
``int``. Converting a very large count to float loses precision (or
overflows); to_float() does that conversion explicitly.
"""

from __future__ import annotations

from edustats.core.exceptions import InvalidArgumentError
from edustats.core.validation import is_integral


def _as_int(value: object, name: str) -> int:
    if not is_integral(value):
        raise InvalidArgumentError(
            f"{name}: expected an integer, got {value!r}", argument=name, value=value,
        )
    return int(value)


def factorial(n: int) -> int:
    """
    n! for a non-negative integer n (``0! = 1! = 1``).

    Raises
    ------
    InvalidArgumentError
        If n is negative or not an integer.
    """
    n = _as_int(n, "n")
    if n < 0:
        raise InvalidArgumentError(
            f"n: factorial is undefined for negative numbers, got {n}", argument="n", value=n,
        )
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def permutation(n: int, r: int) -> int:
    """
    Ordered selections P(n, r) = n (n-1) ... (n-r+1).

    0 when ``r > n`` or either argument is negative.
    """
    n = _as_int(n, "n")
    r = _as_int(r, "r")
    if r > n or n < 0 or r < 0:
        return 0
    result = 1
    for i in range(n, n - r, -1):
        result *= i
    return result


def combination(n: int, r: int) -> int:
    """
    Unordered selections C(n, r).

    0 when ``r > n`` or either argument is negative; 1 when r is 0 or n.
    Uses C(n, r) = C(n, n-r) and the recurrence
    ``c = c * (n - i + 1) // i``, every step of which divides exactly.
    """
    n = _as_int(n, "n")
    r = _as_int(r, "r")
    if r > n or n < 0 or r < 0:
        return 0
    if r == 0 or r == n:
        return 1
    r = min(r, n - r)
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result


def to_float(count: int) -> float:
    """Lossy float value of an exact count; ``inf`` past the float range."""
    try:
        return float(count)
    except OverflowError:
        return float('inf')
