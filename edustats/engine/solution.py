"""
Combined analysis result for the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from edustats.descriptive.solution import DescriptiveSolution
from edustats.frequency.solution import ClassRow, DistributionSolution, HistogramPoint
from edustats.quantiles.solution import Quartiles


@dataclass(frozen=True)
class EngineSolution:
    """
    Everything the dashboard shows for one sample.

    When the frequency stage fails (for instance all values equal),
    ``distribution`` is None and ``error``/``error_code`` describe why;
    the descriptive statistics and quartiles are still populated.
    """
    statistics: DescriptiveSolution
    quartiles: Quartiles
    outliers: NDArray[np.floating[Any]]
    sorted_data: NDArray[np.floating[Any]]
    distribution: DistributionSolution | None
    error: str | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def frequency_table(self) -> tuple[ClassRow, ...]:
        return self.distribution.rows if self.distribution is not None else ()

    @property
    def histogram(self) -> tuple[HistogramPoint, ...]:
        return self.distribution.histogram if self.distribution is not None else ()

    @property
    def num_classes(self) -> int:
        return self.distribution.num_classes if self.distribution is not None else 0

    @property
    def class_width(self) -> float:
        return self.distribution.class_width if self.distribution is not None else 0.0
