"""
Quantile and outlier result types.
"""

from __future__ import annotations

from dataclasses import dataclass

from edustats.core.constants import TUKEY_FENCE_K


@dataclass(frozen=True)
class Quartiles:
    """First and third quartile and their spread (the median is reported separately)."""
    q1: float
    q3: float
    iqr: float

    @property
    def lower_fence(self) -> float:
        """Q1 - 1.5 IQR; values below are outliers."""
        return self.q1 - TUKEY_FENCE_K * self.iqr

    @property
    def upper_fence(self) -> float:
        """Q3 + 1.5 IQR; values above are outliers."""
        return self.q3 + TUKEY_FENCE_K * self.iqr


@dataclass(frozen=True)
class FiveNumberSummary:
    """Minimum, quartiles, median and maximum: the box plot skeleton."""
    minimum: float
    q1: float
    median: float
    q3: float
    maximum: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return (self.minimum, self.q1, self.median, self.q3, self.maximum)


@dataclass(frozen=True)
class StemRow:
    """One line of a stem-and-leaf display."""
    stem: int
    leaves: tuple[int, ...]

    def __str__(self) -> str:
        return f"{self.stem:>3} | {' '.join(str(leaf) for leaf in self.leaves)}"
