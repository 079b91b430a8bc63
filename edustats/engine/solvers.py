"""
One-pass analysis combining every engine.

analyze() is what an input form calls on each change: it parses the
text, computes the descriptive statistics, quartiles and outliers, and
builds the frequency table. Failures of the frequency stage are reported
on the result instead of raised, so the statistics can still be shown.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from edustats.core.exceptions import EduStatsError
from edustats.core.validation import as_sample, check_min_samples
from edustats.data.parser import parse_numbers
from edustats.descriptive.solvers import compute_descriptive_stats
from edustats.engine.solution import EngineSolution
from edustats.frequency.solvers import build_frequency_distribution
from edustats.quantiles.solvers import compute_quartiles, detect_outliers


def analyze(
    data: str | ArrayLike,
    is_sample: bool | None = None,
    num_classes: int | None = None,
) -> EngineSolution:
    """
    Full dashboard analysis of a sample.

    Parameters
    ----------
    data : str or array-like
        Free-form text (parsed with parse_numbers) or a sample.
    is_sample : bool, optional
        Variance form; see compute_descriptive_stats().
    num_classes : int, optional
        Class count for the frequency table; Sturges' rule by default.

    Raises
    ------
    InsufficientDataError
        Fewer than 2 numbers.
    """
    x = parse_numbers(data) if isinstance(data, str) else as_sample(data)
    check_min_samples(x, 2, "sample")

    statistics = compute_descriptive_stats(x, is_sample=is_sample)
    ordered = np.sort(x)
    quartiles = compute_quartiles(ordered)
    outliers = detect_outliers(x, quartiles)

    try:
        distribution = build_frequency_distribution(x, num_classes=num_classes)
    except EduStatsError as e:
        return EngineSolution(
            statistics=statistics,
            quartiles=quartiles,
            outliers=outliers,
            sorted_data=ordered,
            distribution=None,
            error=str(e),
            error_code=e.code,
        )

    return EngineSolution(
        statistics=statistics,
        quartiles=quartiles,
        outliers=outliers,
        sorted_data=ordered,
        distribution=distribution,
    )
