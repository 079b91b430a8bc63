"""
FrequencyDesign: validated input for the frequency distribution builder.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from edustats.core.constants import STURGES_COEFFICIENT
from edustats.core.exceptions import ConstantDataError, ValidationError
from edustats.core.validation import as_sample, check_min_samples, is_integral


def sturges_classes(n: int) -> int:
    """
    Number of classes by Sturges' rule, ``round(1 + 3.322 log10 n)``.

    Halves round up. Returns 0 for an empty sample.
    """
    if n <= 0:
        return 0
    return int(math.floor(1 + STURGES_COEFFICIENT * math.log10(n) + 0.5))


@dataclass(frozen=True)
class FrequencyDesign:
    """
    Design for a frequency distribution.

    Holds the sample, its extremes and the class count (explicit or by
    Sturges' rule). Immutable after construction.

    Construction:
        FrequencyDesign.from_sample(x)
        FrequencyDesign.from_sample(x, num_classes=7)
    """
    _values: NDArray[np.floating[Any]]
    _minimum: float
    _maximum: float
    _num_classes: int
    _class_rule: str

    @classmethod
    def from_sample(
        cls,
        data: ArrayLike,
        num_classes: int | None = None,
    ) -> FrequencyDesign:
        """
        Build FrequencyDesign from a sample.

        Raises
        ------
        InsufficientDataError
            Fewer than 2 observations.
        ConstantDataError
            All observations identical (zero range).
        ValidationError
            ``num_classes`` given but not a positive integer, or class
            limits that exceed the floating-point range.
        """
        values = as_sample(data)
        check_min_samples(values, 2, "sample")

        lo = float(values.min())
        hi = float(values.max())
        if hi - lo == 0:
            raise ConstantDataError(
                f"sample: all {values.size} values equal {lo:g}, classes cannot be formed",
                value=lo,
            )

        if num_classes is None:
            k = sturges_classes(values.size)
            rule = 'sturges'
        else:
            if not is_integral(num_classes) or num_classes < 1:
                raise ValidationError(
                    f"num_classes: expected a positive integer, got {num_classes!r}"
                )
            k = int(num_classes)
            rule = 'manual'

        spread = hi - lo
        span = k * float(math.ceil(spread / k)) if math.isfinite(spread) else spread
        if not (math.isfinite(span) and math.isfinite(lo + span)):
            raise ValidationError(
                f"sample: range {lo:g} to {hi:g} exceeds the floating-point range, "
                f"classes cannot be formed"
            )

        return cls(
            _values=values, _minimum=lo, _maximum=hi, _num_classes=k, _class_rule=rule,
        )

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        return self._values

    @property
    def n(self) -> int:
        return int(self._values.shape[0])

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def range(self) -> float:
        return self._maximum - self._minimum

    @property
    def num_classes(self) -> int:
        return self._num_classes

    @property
    def class_rule(self) -> str:
        """'sturges' or 'manual'."""
        return self._class_rule

    @property
    def class_width(self) -> float:
        """Range divided by the class count, rounded up to a whole number."""
        return float(math.ceil(self.range / self._num_classes))

    def __repr__(self) -> str:
        return (
            f"FrequencyDesign(n={self.n}, num_classes={self._num_classes}, "
            f"rule={self._class_rule!r})"
        )
