"""
Quantile and outlier module.

Public API:
    compute_quartiles(x)          - Q1, Q3, IQR (linear interpolation)
    percentile(x, p)              - p-th percentile, p in [0, 100]
    detect_outliers(x)            - Tukey fence outliers, original order
    percentile_rank(x, v)         - Mid-rank percentile of a value
    five_number_summary(x)        - Box plot skeleton
    proportion_in_range(x, a, b)  - Percentage of values in [a, b]
    stem_and_leaf(x)              - Stem-and-leaf rows
"""

from edustats.quantiles.solution import Quartiles, FiveNumberSummary, StemRow
from edustats.quantiles.solvers import (
    compute_quartiles,
    percentile,
    detect_outliers,
    percentile_rank,
    five_number_summary,
    proportion_in_range,
    stem_and_leaf,
)

__all__ = [
    "compute_quartiles",
    "percentile",
    "detect_outliers",
    "percentile_rank",
    "five_number_summary",
    "proportion_in_range",
    "stem_and_leaf",
    "Quartiles",
    "FiveNumberSummary",
    "StemRow",
]
