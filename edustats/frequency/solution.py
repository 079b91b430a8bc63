"""
Frequency distribution solution types.

Contains the ClassRow and HistogramPoint records, the parameter payload
and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from edustats.core.result import Result

if TYPE_CHECKING:
    from edustats.frequency.design import FrequencyDesign


@dataclass(frozen=True)
class ClassRow:
    """
    One class of a frequency table.

    Invariants across a table: frequencies sum to n, the last cumulative
    frequency equals n, relative frequencies sum to 1.
    """
    lower: float
    upper: float
    midpoint: float
    frequency: int
    relative_frequency: float
    cumulative_frequency: int

    @property
    def class_limits(self) -> tuple[float, float]:
        return (self.lower, self.upper)


@dataclass(frozen=True)
class HistogramPoint:
    """Bar of a histogram: midpoint label and frequency."""
    name: str
    frequency: int


@dataclass(frozen=True)
class DistributionParams:
    """Parameter payload for a frequency distribution."""
    rows: tuple[ClassRow, ...]
    histogram: tuple[HistogramPoint, ...]
    range: float
    class_width: float
    num_classes: int
    n: int


@dataclass
class DistributionSolution:
    """
    User-facing frequency distribution.

    Wraps Result[DistributionParams] and provides convenient accessors.
    """
    _result: Result[DistributionParams]
    _design: 'FrequencyDesign'

    @property
    def rows(self) -> tuple[ClassRow, ...]:
        return self._result.params.rows

    @property
    def histogram(self) -> tuple[HistogramPoint, ...]:
        return self._result.params.histogram

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def class_width(self) -> float:
        return self._result.params.class_width

    @property
    def num_classes(self) -> int:
        return self._result.params.num_classes

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def frequencies(self) -> tuple[int, ...]:
        return tuple(row.frequency for row in self.rows)

    @property
    def class_rule(self) -> str:
        return self._design.class_rule

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Frequency table as text."""
        lines = [
            f"Frequency distribution (n={self.n}, k={self.num_classes}, "
            f"width={self.class_width:g})",
            f"{'class':>17}  {'x':>8}  {'f':>5}  {'rf':>7}  {'F':>5}",
        ]
        last = len(self.rows) - 1
        for i, row in enumerate(self.rows):
            bracket = "]" if i == last else ")"
            limits = f"[{row.lower:g}, {row.upper:g}{bracket}"
            lines.append(
                f"{limits:>17}  {row.midpoint:>8g}  {row.frequency:>5}  "
                f"{row.relative_frequency:>7.4f}  {row.cumulative_frequency:>5}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DistributionSolution(n={self.n}, num_classes={self.num_classes}, "
            f"class_width={self.class_width:g})"
        )
