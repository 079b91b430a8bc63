"""
Sample transformations for the "what happens if" workbench.

Every function returns a new array and leaves its input untouched.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from edustats.core.exceptions import ConstantDataError, ValidationError
from edustats.core.validation import as_sample
from edustats.data.parser import parse_numbers


def shift(sample: ArrayLike, amount: float) -> NDArray[np.floating[Any]]:
    """Add a constant to every value (moves the mean, keeps the spread)."""
    return as_sample(sample) + float(amount)


def scale(sample: ArrayLike, factor: float) -> NDArray[np.floating[Any]]:
    """Multiply every value by a constant (scales mean and spread)."""
    return as_sample(sample) * float(factor)


def standardize(
    sample: ArrayLike,
    mean: float | None = None,
    sd: float | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Convert values to z-scores ``(x - mean) / sd``.

    When ``mean`` or ``sd`` is omitted it is computed from the sample; the
    standard deviation uses the population denominator n.

    Raises
    ------
    ConstantDataError
        If the standard deviation is zero.
    """
    x = as_sample(sample)
    if x.size == 0:
        return x
    center = float(np.mean(x)) if mean is None else float(mean)
    spread = float(np.std(x)) if sd is None else float(sd)
    if spread == 0.0:
        raise ConstantDataError(
            "sample: standard deviation is zero, z-scores are undefined",
            value=center,
        )
    return (x - center) / spread


def merge(sample: ArrayLike, other: ArrayLike | str) -> NDArray[np.floating[Any]]:
    """Append ``other`` (array-like or free-form text) to the sample."""
    x = as_sample(sample)
    extra = parse_numbers(other) if isinstance(other, str) else as_sample(other, "other")
    return np.concatenate([x, extra])


def perturb(
    sample: ArrayLike,
    amount: float,
    *,
    rng: np.random.Generator | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Add ``amount`` to one randomly chosen value.

    An empty sample or a zero amount returns an unchanged copy.
    """
    x = as_sample(sample)
    if not np.isfinite(amount):
        raise ValidationError(f"amount: must be finite, got {amount}")
    if x.size == 0 or amount == 0:
        return x
    if rng is None:
        rng = np.random.default_rng()
    x[int(rng.integers(x.size))] += float(amount)
    return x
