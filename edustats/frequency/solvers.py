"""
Solver dispatch for frequency distributions.

Provides build_frequency_distribution() plus the pure table helpers
recompute_rows() (edited frequencies) and normal_curve_overlay().
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from edustats.core.constants import HISTOGRAM_LABEL_DECIMALS, NORMAL_OVERLAY_MIN
from edustats.core.compute.timing import Timer
from edustats.core.exceptions import ValidationError
from edustats.core.result import Result
from edustats.core.validation import check_non_negative_int
from edustats.frequency.design import FrequencyDesign
from edustats.frequency.solution import (
    ClassRow, HistogramPoint, DistributionParams, DistributionSolution,
)
from edustats.frequency._binning import class_edges, count_classes, reconcile_counts


def _ensure_design(data: ArrayLike | FrequencyDesign, num_classes: int | None) -> FrequencyDesign:
    if isinstance(data, FrequencyDesign):
        return data
    return FrequencyDesign.from_sample(data, num_classes=num_classes)


def _make_rows(
    lower: NDArray[np.floating[Any]],
    upper: NDArray[np.floating[Any]],
    counts: NDArray[np.integer[Any]],
) -> tuple[ClassRow, ...]:
    total = int(counts.sum())
    cumulative = np.cumsum(counts)
    return tuple(
        ClassRow(
            lower=float(lo),
            upper=float(hi),
            midpoint=float(lo / 2 + hi / 2),
            frequency=int(f),
            relative_frequency=float(f / total) if total > 0 else 0.0,
            cumulative_frequency=int(c),
        )
        for lo, hi, f, c in zip(lower, upper, counts, cumulative)
    )


def _midpoint_label(value: float) -> str:
    step = Decimal(1).scaleb(-HISTOGRAM_LABEL_DECIMALS)
    with localcontext() as ctx:
        # enough digits for any finite float64 at this scale
        ctx.prec = 320 + HISTOGRAM_LABEL_DECIMALS
        return str(Decimal(repr(float(value))).quantize(step, rounding=ROUND_HALF_UP))


def histogram_points(rows: Sequence[ClassRow]) -> tuple[HistogramPoint, ...]:
    """Histogram bars labelled by class midpoint, rounded half up."""
    return tuple(
        HistogramPoint(
            name=_midpoint_label(row.midpoint),
            frequency=row.frequency,
        )
        for row in rows
    )


def build_frequency_distribution(
    sample: ArrayLike | FrequencyDesign,
    num_classes: int | None = None,
) -> DistributionSolution:
    """
    Group a sample into contiguous classes of equal width.

    Parameters
    ----------
    sample : array-like or FrequencyDesign
        At least two observations that are not all equal.
    num_classes : int, optional
        Number of classes. Defaults to Sturges' rule.

    Returns
    -------
    DistributionSolution with one ClassRow and one HistogramPoint per class.

    Raises
    ------
    InsufficientDataError
        Fewer than 2 observations.
    ConstantDataError
        Zero range.
    ValidationError
        Invalid ``num_classes`` or non-numeric input.
    """
    design = _ensure_design(sample, num_classes)
    timer = Timer().start()

    k = design.num_classes
    width = design.class_width

    with timer.section('edges'):
        edges = class_edges(design.minimum, width, k)

    with timer.section('counts'):
        counts = count_classes(design.values, edges)
        counts, adjustment = reconcile_counts(counts, design.n)

    with timer.section('rows'):
        rows = _make_rows(edges[:-1], edges[1:], counts)
        histogram = histogram_points(rows)

    timer.stop()

    params = DistributionParams(
        rows=rows,
        histogram=histogram,
        range=design.range,
        class_width=width,
        num_classes=k,
        n=design.n,
    )
    result = Result(
        params=params,
        info={'class_rule': design.class_rule, 'last_class_adjustment': adjustment},
        timing=timer.result(),
        backend_name='cpu_frequency',
    )

    if adjustment:
        message = (
            f"class frequencies summed to {design.n - adjustment}, not {design.n}; "
            f"last class adjusted by {adjustment:+d}"
        )
        result = result.with_warning(message)
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return DistributionSolution(_result=result, _design=design)


def recompute_rows(
    rows: Sequence[ClassRow],
    frequencies: Sequence[int],
) -> tuple[ClassRow, ...]:
    """
    New table with edited frequencies.

    Class limits and midpoints are kept; cumulative and relative
    frequencies are recomputed against the new total. The input rows are
    not modified.
    """
    if len(frequencies) != len(rows):
        raise ValidationError(
            f"frequencies: expected {len(rows)} values, got {len(frequencies)}"
        )
    counts = np.array(
        [check_non_negative_int(f, f"frequencies[{i}]") for i, f in enumerate(frequencies)],
        dtype=np.int64,
    )
    lower = np.array([row.lower for row in rows], dtype=np.float64)
    upper = np.array([row.upper for row in rows], dtype=np.float64)
    return _make_rows(lower, upper, counts)


def normal_curve_overlay(
    rows: Sequence[ClassRow],
    mean: float,
    sd: float,
    n: int,
    class_width: float,
) -> tuple[float | None, ...]:
    """
    Expected class frequencies under Normal(mean, sd).

    For each class, ``n * class_width * pdf(midpoint)``. Values at or below
    0.01 are reported as None so the curve fades out instead of hugging the
    axis. With ``sd == 0`` the density is infinite at the mean and 0
    elsewhere.
    """
    if sd < 0:
        raise ValidationError(f"sd: must be non-negative, got {sd}")
    midpoints = np.array([row.midpoint for row in rows], dtype=np.float64)
    if sd == 0:
        density = np.where(midpoints == mean, np.inf, 0.0)
    else:
        density = sp_stats.norm.pdf(midpoints, loc=mean, scale=sd)
    expected = n * class_width * density
    return tuple(float(e) if e > NORMAL_OVERLAY_MIN else None for e in expected)
