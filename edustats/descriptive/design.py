"""
DescriptiveDesign: tagged union for raw and grouped inputs.

Wraps either a flat sample or a grouped frequency table and provides
validation and metadata for the descriptive statistics pipeline.
Immutable after construction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from edustats.core.constants import SAMPLE_VARIANCE_MAX_N
from edustats.core.exceptions import (
    ValidationError, EmptyDataError, InsufficientDataError,
)
from edustats.core.validation import as_sample, check_not_empty, is_integral


@dataclass(frozen=True)
class GroupedDatum:
    """
    One row of a grouped table: ``frequency`` observations in
    ``[lower, upper)`` (``[lower, upper]`` for the last row of a table).
    """
    lower: float
    upper: float
    frequency: int

    @property
    def midpoint(self) -> float:
        return self.lower / 2 + self.upper / 2

    @property
    def width(self) -> float:
        return self.upper - self.lower


def _as_datum(row: Any, index: int) -> GroupedDatum:
    if isinstance(row, GroupedDatum):
        lower, upper, frequency = row.lower, row.upper, row.frequency
    elif isinstance(row, Mapping):
        try:
            lower, upper, frequency = row['lower'], row['upper'], row['frequency']
        except KeyError as e:
            raise ValidationError(f"table[{index}]: missing key {e}") from e
    else:
        try:
            lower, upper, frequency = row
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"table[{index}]: expected (lower, upper, frequency), got {row!r}"
            ) from e

    if not is_integral(frequency) or frequency < 0:
        raise ValidationError(
            f"table[{index}]: frequency must be a non-negative integer, got {frequency!r}"
        )
    try:
        lower, upper = float(lower), float(upper)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"table[{index}]: class limits must be numbers") from e
    if not (np.isfinite(lower) and np.isfinite(upper)):
        raise ValidationError(f"table[{index}]: class limits must be finite")
    if upper < lower:
        raise ValidationError(
            f"table[{index}]: upper limit {upper} is below lower limit {lower}"
        )
    return GroupedDatum(lower=lower, upper=upper, frequency=int(frequency))


def is_grouped_input(data: Any) -> bool:
    """
    True when ``data`` looks like a grouped table rather than a sample.

    A table is a non-empty sequence whose first row is a GroupedDatum, a
    mapping, a tuple, or a list of three items. NumPy arrays are always
    treated as raw samples.
    """
    if isinstance(data, (str, bytes, np.ndarray)) or not isinstance(data, Sequence):
        return False
    if len(data) == 0:
        return False
    first = data[0]
    if isinstance(first, list):
        return len(first) == 3
    return isinstance(first, (GroupedDatum, Mapping, tuple))


def variance_denominator(n: int, is_sample: bool | None = None) -> tuple[int, bool]:
    """
    Denominator for the variance and whether it is the sample form.

    With ``is_sample=None`` the fixed policy applies: ``n - 1`` when
    ``1 < n < SAMPLE_VARIANCE_MAX_N``, ``n`` otherwise.

    Raises
    ------
    InsufficientDataError
        If the sample form is selected with fewer than 2 observations.
    """
    if is_sample is None:
        is_sample = 1 < n < SAMPLE_VARIANCE_MAX_N
    if is_sample:
        if n < 2:
            raise InsufficientDataError(
                f"Sample variance requires at least 2 observations, got {n}",
                required=2,
                actual=n,
            )
        return n - 1, True
    return n, False


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    The ``kind`` field identifies which fields are populated: ``'raw'``
    uses ``values``; ``'grouped'`` uses ``lower``, ``upper`` and
    ``frequencies``.

    Construction:
        DescriptiveDesign.from_sample([12, 15, 18])
        DescriptiveDesign.from_grouped([(0, 10, 3), (10, 20, 5)])
        DescriptiveDesign.from_input(data)   # detects the kind
    """
    kind: str
    _values: NDArray[np.floating[Any]] | None = None
    _lower: NDArray[np.floating[Any]] | None = None
    _upper: NDArray[np.floating[Any]] | None = None
    _frequencies: NDArray[np.integer[Any]] | None = None
    _is_sample: bool | None = None

    @classmethod
    def from_sample(cls, data: ArrayLike, *, is_sample: bool | None = None) -> DescriptiveDesign:
        """
        Build a raw-data design.

        Raises
        ------
        EmptyDataError
            If the sample has no observations.
        """
        values = as_sample(data)
        check_not_empty(values, "sample")
        return cls(kind='raw', _values=values, _is_sample=is_sample)

    @classmethod
    def from_grouped(cls, table: Sequence[Any], *, is_sample: bool | None = None) -> DescriptiveDesign:
        """
        Build a grouped-data design.

        Parameters
        ----------
        table : sequence
            Rows as GroupedDatum, ``(lower, upper, frequency)`` tuples or
            mappings with those keys. Contiguity is not checked.

        Raises
        ------
        EmptyDataError
            If the table is empty or its frequencies sum to zero.
        ValidationError
            If a frequency is negative or not an integer.
        """
        rows = [_as_datum(row, i) for i, row in enumerate(table)]
        if not rows:
            raise EmptyDataError("table: no classes to analyse")
        frequencies = np.array([r.frequency for r in rows], dtype=np.int64)
        if int(frequencies.sum()) == 0:
            raise EmptyDataError("table: total frequency is zero")
        return cls(
            kind='grouped',
            _lower=np.array([r.lower for r in rows], dtype=np.float64),
            _upper=np.array([r.upper for r in rows], dtype=np.float64),
            _frequencies=frequencies,
            _is_sample=is_sample,
        )

    @classmethod
    def from_input(cls, data: Any, *, is_sample: bool | None = None) -> DescriptiveDesign:
        """Dispatch to from_grouped() or from_sample() based on the input shape."""
        if is_grouped_input(data):
            return cls.from_grouped(data, is_sample=is_sample)
        return cls.from_sample(data, is_sample=is_sample)

    @property
    def values(self) -> NDArray[np.floating[Any]] | None:
        """Raw sample (raw designs only)."""
        return self._values

    @property
    def lower(self) -> NDArray[np.floating[Any]] | None:
        return self._lower

    @property
    def upper(self) -> NDArray[np.floating[Any]] | None:
        return self._upper

    @property
    def frequencies(self) -> NDArray[np.integer[Any]] | None:
        return self._frequencies

    @property
    def midpoints(self) -> NDArray[np.floating[Any]] | None:
        if self._lower is None:
            return None
        return self._lower / 2 + self._upper / 2

    @property
    def is_sample(self) -> bool | None:
        """Explicit sample/population choice, or None for the default policy."""
        return self._is_sample

    @property
    def n(self) -> int:
        """Number of observations (total frequency for grouped data)."""
        if self.kind == 'raw':
            return int(self._values.shape[0])
        return int(self._frequencies.sum())

    def __repr__(self) -> str:
        if self.kind == 'grouped':
            return f"DescriptiveDesign(kind='grouped', n={self.n}, classes={len(self._lower)})"
        return f"DescriptiveDesign(kind='raw', n={self.n})"
