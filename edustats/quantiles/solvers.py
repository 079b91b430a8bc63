"""
Quartiles, percentiles, Tukey outliers and related position measures.

Every function accepts the sample in any order; a sorted copy is taken
where ordering matters, so callers may pass an already sorted sample
without cost to correctness.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from edustats.core.exceptions import ValidationError
from edustats.core.validation import as_sample, check_not_empty
from edustats.quantiles.solution import Quartiles, FiveNumberSummary, StemRow
from edustats.quantiles._interpolation import linear_quantile


def _sorted_nonempty(sample: ArrayLike, name: str = "sample") -> NDArray[np.floating[Any]]:
    x = as_sample(sample, name)
    check_not_empty(x, name)
    return np.sort(x)


def compute_quartiles(sorted_sample: ArrayLike) -> Quartiles:
    """
    Q1, Q3 and IQR by linear interpolation.

    Raises
    ------
    EmptyDataError
        If the sample is empty.
    """
    x = _sorted_nonempty(sorted_sample)
    q1 = linear_quantile(x, 0.25)
    q3 = linear_quantile(x, 0.75)
    return Quartiles(q1=q1, q3=q3, iqr=q3 - q1)


def percentile(sorted_sample: ArrayLike, p: float) -> float:
    """
    Value below which ``p`` percent of the sample falls.

    ``p = 0`` returns the minimum and ``p = 100`` the maximum exactly.

    Raises
    ------
    ValidationError
        If ``p`` is outside [0, 100].
    EmptyDataError
        If the sample is empty.
    """
    if not (0 <= p <= 100):
        raise ValidationError(f"p: must be in [0, 100], got {p}")
    x = _sorted_nonempty(sorted_sample)
    if p == 0:
        return float(x[0])
    if p == 100:
        return float(x[-1])
    return linear_quantile(x, p / 100)


def detect_outliers(
    sample: ArrayLike,
    quartiles: Quartiles | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Values outside the Tukey fences ``[Q1 - 1.5 IQR, Q3 + 1.5 IQR]``.

    Parameters
    ----------
    sample : array-like
        The full sample, in its original order.
    quartiles : Quartiles, optional
        Precomputed quartiles; computed from ``sample`` when omitted.

    Returns
    -------
    The outlying values in their original order (possibly empty).
    """
    x = as_sample(sample)
    if quartiles is None:
        if x.size == 0:
            return x
        quartiles = compute_quartiles(x)
    mask = (x < quartiles.lower_fence) | (x > quartiles.upper_fence)
    return x[mask]


def percentile_rank(sorted_sample: ArrayLike, value: float) -> float:
    """
    Percentage of the sample below ``value``, counting ties as half.

    ``(count_below + 0.5 * count_equal) / n * 100``.

    Raises
    ------
    EmptyDataError
        If the sample is empty.
    """
    x = _sorted_nonempty(sorted_sample)
    below = int(np.sum(x < value))
    equal = int(np.sum(x == value))
    return (below + 0.5 * equal) / x.size * 100.0


def five_number_summary(sample: ArrayLike) -> FiveNumberSummary:
    """Minimum, Q1, median, Q3 and maximum."""
    x = _sorted_nonempty(sample)
    return FiveNumberSummary(
        minimum=float(x[0]),
        q1=linear_quantile(x, 0.25),
        median=linear_quantile(x, 0.5),
        q3=linear_quantile(x, 0.75),
        maximum=float(x[-1]),
    )


def proportion_in_range(sample: ArrayLike, low: float, high: float) -> float:
    """Percentage of values with ``low <= x <= high`` (0 for an empty sample)."""
    x = as_sample(sample)
    if x.size == 0:
        return 0.0
    inside = int(np.sum((x >= low) & (x <= high)))
    return inside / x.size * 100.0


def stem_and_leaf(sample: ArrayLike) -> tuple[StemRow, ...]:
    """
    Stem-and-leaf rows for the sample rounded to whole numbers.

    ``stem = floor(v / 10)`` and ``leaf = v - 10 * stem``, so negative
    values read as e.g. ``-1 | 7`` for -3. Stems and leaves ascend.
    """
    x = as_sample(sample)
    # Halves round up
    rounded = np.floor(x + 0.5).astype(np.int64)
    rounded.sort()
    rows: dict[int, list[int]] = {}
    for v in rounded:
        stem = int(v // 10)
        rows.setdefault(stem, []).append(int(v - 10 * stem))
    return tuple(
        StemRow(stem=stem, leaves=tuple(sorted(leaves)))
        for stem, leaves in sorted(rows.items())
    )
