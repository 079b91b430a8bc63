"""
Free-form text to Sample conversion.

parse_numbers() is deliberately forgiving: anything that is not a finite
number is dropped, and an input without any numbers gives an empty array.
Deciding whether an empty result is an error belongs to the caller.
"""

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

_SEPARATORS = re.compile(r"[\s,]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INVALID_CHARACTERS = re.compile(r"[^0-9,.\s-]")


def parse_numbers(text: str) -> NDArray[np.floating[Any]]:
    """
    Parse comma/whitespace separated numbers.

    Parameters
    ----------
    text : str
        Free-form input such as ``"12, 15 18,,20\\n7"``.

    Returns
    -------
    1D float64 array of the finite numbers found, in input order. Tokens
    that are not plain ASCII decimal literals (optionally with an
    exponent) are dropped, as are literals that overflow to infinity.
    """
    values = []
    for token in _SEPARATORS.split(text or ""):
        # ASCII decimal literals only
        if not _NUMBER.fullmatch(token):
            continue
        value = float(token)
        if math.isfinite(value):
            values.append(value)
    return np.array(values, dtype=np.float64)


def find_invalid_characters(text: str) -> list[str]:
    """
    Characters outside digits, separators, '.' and '-'.

    Returns the distinct offending characters in order of first
    occurrence; an empty list means the text is well formed.
    """
    seen: dict[str, None] = {}
    for match in _INVALID_CHARACTERS.finditer(text or ""):
        seen.setdefault(match.group(), None)
    return list(seen)


def format_numbers(values: ArrayLike, decimals: int | None = None) -> str:
    """Join values with ", ", optionally rounded to a fixed number of decimals."""
    arr = np.asarray(values, dtype=np.float64).ravel()
    if decimals is None:
        return ", ".join(_plain(v) for v in arr)
    return ", ".join(f"{v:.{decimals}f}" for v in arr)


def _plain(value: float) -> str:
    # 18.0 -> "18", 18.5 -> "18.5"
    if value.is_integer():
        return str(int(value))
    return repr(float(value))
