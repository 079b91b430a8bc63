"""
Descriptive statistics module.

Central tendency, dispersion and shape for raw samples and grouped
frequency tables.

Public API:
    compute_descriptive_stats(data)  - All statistics at once
    deviation_table(x)               - Per-value deviations from the mean
    classify_skewness(sk)            - Direction/strength label
    classify_cv(cv)                  - Low/moderate/high dispersion band
"""

from edustats.descriptive.design import (
    DescriptiveDesign, GroupedDatum, variance_denominator,
)
from edustats.descriptive.solution import (
    Statistic, DescriptiveParams, DescriptiveSolution, DeviationRow, DeviationTable,
)
from edustats.descriptive.solvers import (
    compute_descriptive_stats,
    deviation_table,
    classify_skewness,
    classify_cv,
)

__all__ = [
    "compute_descriptive_stats",
    "deviation_table",
    "classify_skewness",
    "classify_cv",
    "variance_denominator",
    "DescriptiveDesign",
    "GroupedDatum",
    "Statistic",
    "DescriptiveParams",
    "DescriptiveSolution",
    "DeviationRow",
    "DeviationTable",
]
