"""
Frequency distribution module.

Public API:
    build_frequency_distribution(x, k)  - Class table and histogram points
    sturges_classes(n)                  - Class count by Sturges' rule
    recompute_rows(rows, freqs)         - Table with edited frequencies
    normal_curve_overlay(rows, ...)     - Expected frequencies under a normal
"""

from edustats.frequency.design import FrequencyDesign, sturges_classes
from edustats.frequency.solution import (
    ClassRow, HistogramPoint, DistributionParams, DistributionSolution,
)
from edustats.frequency.solvers import (
    build_frequency_distribution,
    histogram_points,
    recompute_rows,
    normal_curve_overlay,
)

__all__ = [
    "build_frequency_distribution",
    "sturges_classes",
    "histogram_points",
    "recompute_rows",
    "normal_curve_overlay",
    "FrequencyDesign",
    "ClassRow",
    "HistogramPoint",
    "DistributionParams",
    "DistributionSolution",
]
