"""
Solver dispatch for descriptive statistics.

Provides compute_descriptive_stats() as the entry point for raw samples
and grouped tables, plus the teaching helpers deviation_table(),
classify_skewness() and classify_cv().
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike

from edustats.core.constants import (
    SKEWNESS_STRONG, SKEWNESS_MILD, CV_HIGH, CV_MODERATE,
)
from edustats.core.validation import as_sample, check_not_empty
from edustats.descriptive.design import DescriptiveDesign
from edustats.descriptive.solution import (
    DescriptiveSolution, DeviationRow, DeviationTable,
)
from edustats.descriptive.backends.cpu import CPUDescriptiveBackend


SkewnessLabel = Literal['strong_right', 'right', 'symmetric', 'left', 'strong_left']
CVLabel = Literal['low', 'moderate', 'high']


def _ensure_design(data: Any, is_sample: bool | None) -> DescriptiveDesign:
    """Convert a sample or grouped table to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_input(data, is_sample=is_sample)


def compute_descriptive_stats(
    data: Any,
    is_sample: bool | None = None,
) -> DescriptiveSolution:
    """
    Compute mean, median, mode, variance, sd, range, cv and skewness.

    Parameters
    ----------
    data : array-like, grouped table or DescriptiveDesign
        A flat sample of numbers, or a sequence of grouped rows
        (GroupedDatum, ``(lower, upper, frequency)`` tuples or mappings).
    is_sample : bool, optional
        Force the sample (n-1) or population (n) variance. By default the
        sample form is used when 1 < n < 30.

    Returns
    -------
    DescriptiveSolution

    Raises
    ------
    EmptyDataError
        No observations, or a grouped table with zero total frequency.
    InsufficientDataError
        Sample variance requested with fewer than 2 observations.
    ValidationError
        Non-numeric or non-finite input, invalid grouped rows.
    """
    design = _ensure_design(data, is_sample)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def deviation_table(sample: ArrayLike) -> DeviationTable:
    """
    Deviations ``x - mean`` and their squares for every value.

    The squared deviations sum to the numerator of the variance.
    """
    x = as_sample(sample)
    check_not_empty(x, "sample")
    mean = float(np.mean(x))
    deviations = x - mean
    squared = deviations ** 2
    rows = tuple(
        DeviationRow(value=float(v), deviation=float(d), squared_deviation=float(s))
        for v, d, s in zip(x, deviations, squared)
    )
    return DeviationTable(
        mean=mean,
        rows=rows,
        sum_squared_deviations=float(np.sum(squared)),
    )


def classify_skewness(value: float) -> SkewnessLabel:
    """Label a Pearson skewness coefficient by direction and strength."""
    if value > SKEWNESS_STRONG:
        return 'strong_right'
    if value > SKEWNESS_MILD:
        return 'right'
    if value < -SKEWNESS_STRONG:
        return 'strong_left'
    if value < -SKEWNESS_MILD:
        return 'left'
    return 'symmetric'


def classify_cv(value: float) -> CVLabel:
    """Band a coefficient of variation (percent) as low, moderate or high."""
    if value > CV_HIGH:
        return 'high'
    if value > CV_MODERATE:
        return 'moderate'
    return 'low'
