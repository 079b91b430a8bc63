"""
Preset samples used for teaching scenarios.

Each scenario illustrates one behaviour of the statistics: an outlier
pulling the mean, zero dispersion, right skew, a roughly symmetric shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from edustats.core.exceptions import ValidationError
from edustats.core.validation import as_sample


@dataclass(frozen=True)
class Scenario:
    """A named preset sample and the lesson it demonstrates."""
    key: str
    label: str
    data: tuple[float, ...]
    tip: str


SCENARIOS: dict[str, Scenario] = {
    s.key: s for s in (
        Scenario(
            key="outlier",
            label="Outlier effect",
            data=(18, 19, 19, 20, 18, 2, 19, 20),
            tip="The mean is pulled toward the outlier while the median barely moves.",
        ),
        Scenario(
            key="uniform",
            label="Identical values",
            data=(15, 15, 15, 15, 15, 15, 15),
            tip="With no variation at all, variance and standard deviation are zero.",
        ),
        Scenario(
            key="skew_right",
            label="Right skew",
            data=(2, 3, 3, 4, 5, 8, 12, 20),
            tip="Most values are small, so the mean sits above the median.",
        ),
        Scenario(
            key="normal",
            label="Approximately normal",
            data=(10, 12, 14, 15, 15, 16, 18, 20),
            tip="In a symmetric distribution mean, median and mode are close together.",
        ),
    )
}

# Twenty course grades out of 20
SAMPLE_GRADES: tuple[float, ...] = (
    18.5, 14, 17, 12, 19, 20, 11.5, 15, 16, 13,
    17.5, 18, 10, 9, 14.5, 19.5, 12.5, 8, 16.5, 15.5,
)


def outlier_for(sample: ArrayLike) -> float:
    """Value placed well above a sample: max + max(20, 1.5 * range)."""
    x = as_sample(sample)
    if x.size == 0:
        raise ValidationError("sample: cannot derive an outlier from an empty sample")
    spread = float(x.max() - x.min())
    return float(x.max()) + max(20.0, spread * 1.5)


def load_scenario(
    key: str,
    current: ArrayLike | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Sample for a preset scenario.

    For ``"outlier"`` with a non-empty ``current`` sample, returns
    ``current`` with one far outlier appended instead of the preset.
    """
    if key not in SCENARIOS:
        raise ValidationError(
            f"Unknown scenario: {key!r}. Available: {sorted(SCENARIOS)}"
        )
    if key == "outlier" and current is not None:
        x = as_sample(current, "current")
        if x.size > 0:
            return np.append(x, outlier_for(x))
    return np.array(SCENARIOS[key].data, dtype=np.float64)
