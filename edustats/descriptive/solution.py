"""
Descriptive statistics solution types.

Contains the Statistic record, the parameter payload and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from edustats.core.result import Result

if TYPE_CHECKING:
    from edustats.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class Statistic:
    """
    A computed value paired with how it was derived.

    ``formula`` is the symbolic expression and ``calculation`` the
    expression with numbers substituted. Both are presentation metadata.
    ``value`` is a float, or a tuple of floats for the mode.
    """
    value: Any
    formula: str
    calculation: str = ""


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Raw and grouped computations populate the same fields; for grouped
    data ``minimum``/``maximum`` are the outer class limits.
    """
    mean: Statistic
    median: Statistic
    mode: Statistic
    variance: Statistic
    sd: Statistic
    range: Statistic
    cv: Statistic
    skewness: Statistic
    count: int
    minimum: float
    maximum: float
    is_sample: bool
    denominator: int


STATISTIC_NAMES = (
    "mean", "median", "mode", "variance", "sd", "range", "cv", "skewness",
)


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams]. Plain properties return numbers;
    ``statistic(name)`` returns the full Statistic with its formula.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def mean(self) -> float:
        return self._result.params.mean.value

    @property
    def median(self) -> float:
        return self._result.params.median.value

    @property
    def mode(self) -> tuple[float, ...]:
        """Mode value(s) in ascending order; empty when there is no mode."""
        return self._result.params.mode.value

    @property
    def variance(self) -> float:
        return self._result.params.variance.value

    @property
    def sd(self) -> float:
        return self._result.params.sd.value

    @property
    def range(self) -> float:
        return self._result.params.range.value

    @property
    def cv(self) -> float:
        """Coefficient of variation in percent (0 when the mean is 0)."""
        return self._result.params.cv.value

    @property
    def skewness(self) -> float:
        """Pearson's second skewness coefficient (0 when sd is 0)."""
        return self._result.params.skewness.value

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def is_sample(self) -> bool:
        """True when the n-1 denominator was used."""
        return self._result.params.is_sample

    @property
    def denominator(self) -> int:
        return self._result.params.denominator

    @property
    def kind(self) -> str:
        """'raw' or 'grouped'."""
        return self._design.kind

    def statistic(self, name: str) -> Statistic:
        """Statistic with formula metadata, by name (see STATISTIC_NAMES)."""
        if name not in STATISTIC_NAMES:
            raise KeyError(f"Unknown statistic {name!r}. Available: {STATISTIC_NAMES}")
        return getattr(self._result.params, name)

    @property
    def statistics(self) -> dict[str, Statistic]:
        return {name: self.statistic(name) for name in STATISTIC_NAMES}

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
        """Plain-text table of every statistic."""
        mode = ", ".join(f"{m:g}" for m in self.mode) if self.mode else "none"
        label = "sample" if self.is_sample else "population"
        lines = [
            f"Descriptive statistics ({self.kind}, {label}, n={self.count})",
            f"  mean      {self.mean:.4f}",
            f"  median    {self.median:.4f}",
            f"  mode      {mode}",
            f"  variance  {self.variance:.4f}",
            f"  sd        {self.sd:.4f}",
            f"  range     {self.range:.4f}",
            f"  cv        {self.cv:.2f}%",
            f"  skewness  {self.skewness:.4f}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(kind={self.kind!r}, n={self.count}, "
            f"mean={self.mean:.6g}, sd={self.sd:.6g})"
        )


@dataclass(frozen=True)
class DeviationRow:
    value: float
    deviation: float
    squared_deviation: float


@dataclass(frozen=True)
class DeviationTable:
    """Per-value deviations from the mean, as laid out when teaching variance."""
    mean: float
    rows: tuple[DeviationRow, ...]
    sum_squared_deviations: float
