"""
Class edges, value assignment and frequency conservation.

Classes are ``[lower, upper)`` except the last, which is closed. Values are
placed by a right-sided search among the edges and clipped into the last
class, so every value lands in exactly one class and the counts sum to n
by construction. reconcile_counts() remains as an explicit check.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def class_edges(minimum: float, width: float, num_classes: int) -> NDArray[np.floating[Any]]:
    """Edges ``min + i * width`` for ``i = 0..num_classes`` (k + 1 values)."""
    return minimum + np.arange(num_classes + 1, dtype=np.float64) * width


def assign_classes(
    values: NDArray[np.floating[Any]],
    edges: NDArray[np.floating[Any]],
) -> NDArray[np.intp]:
    """Class index of every value; the maximum goes to the last class."""
    num_classes = edges.shape[0] - 1
    index = np.searchsorted(edges, values, side='right') - 1
    return np.clip(index, 0, num_classes - 1)


def count_classes(
    values: NDArray[np.floating[Any]],
    edges: NDArray[np.floating[Any]],
) -> NDArray[np.int64]:
    num_classes = edges.shape[0] - 1
    index = assign_classes(values, edges)
    return np.bincount(index, minlength=num_classes).astype(np.int64)


def reconcile_counts(
    counts: NDArray[np.int64],
    n: int,
) -> tuple[NDArray[np.int64], int]:
    """
    Make the counts sum to ``n`` by adjusting the last class.

    Returns the (new) counts and the adjustment applied to the last class
    (0 when the counts already conserve n).
    """
    shortfall = int(n - counts.sum())
    if shortfall == 0:
        return counts, 0
    adjusted = counts.copy()
    adjusted[-1] += shortfall
    return adjusted, shortfall
