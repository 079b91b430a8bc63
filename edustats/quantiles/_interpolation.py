"""
Linear-interpolation quantiles.

For a proportion p of a sorted sample of length n the position is
``pos = p * (n - 1)`` (0-indexed); integral positions return that element,
otherwise the two neighbours are interpolated. This is Hyndman & Fan
type 7, the default of R, NumPy and spreadsheet PERCENTILE.INC.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray


def linear_quantile(x: NDArray[np.floating[Any]], p: float) -> float:
    """
    Quantile of a sorted, non-empty sample at proportion ``p`` in [0, 1].
    """
    n = x.shape[0]
    pos = p * (n - 1)
    lo = math.floor(pos)
    hi = math.ceil(pos)
    if lo == hi:
        return float(x[lo])
    return float(x[lo] + (x[hi] - x[lo]) * (pos - lo))
