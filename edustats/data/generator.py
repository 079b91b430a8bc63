"""
Synthetic normal samples for simulation mode.

Uses the Box-Muller transform on uniform draws from a numpy Generator:

    z = sqrt(-2 ln u) * cos(2 pi v),    x = mean + sd * z

Each call is independent. Without an explicit ``rng`` a fresh, unseeded
generator is used, so results are not reproducible.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from edustats.core.exceptions import ValidationError
from edustats.core.validation import check_non_negative_int


def _open_uniform(rng: np.random.Generator, count: int) -> NDArray[np.floating[Any]]:
    """Uniform draws on (0, 1): exact zeros are redrawn so log(u) is finite."""
    u = rng.random(count)
    zeros = u == 0.0
    while np.any(zeros):
        u[zeros] = rng.random(int(zeros.sum()))
        zeros = u == 0.0
    return u


def generate_gaussian_sample(
    mean: float,
    sd: float,
    count: int,
    *,
    rng: np.random.Generator | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Draw ``count`` values approximating Normal(mean, sd).

    Parameters
    ----------
    mean : float
        Target mean.
    sd : float
        Target standard deviation, >= 0.
    count : int
        Number of values, >= 0.
    rng : numpy.random.Generator, optional
        Source of uniform draws. Defaults to a new unseeded generator.

    Returns
    -------
    1D float64 array of length ``count``.
    """
    count = check_non_negative_int(count, "count")
    if not np.isfinite(mean):
        raise ValidationError(f"mean: must be finite, got {mean}")
    if not np.isfinite(sd) or sd < 0:
        raise ValidationError(f"sd: must be finite and non-negative, got {sd}")

    if rng is None:
        rng = np.random.default_rng()

    u = _open_uniform(rng, count)
    v = _open_uniform(rng, count)
    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return mean + sd * z
