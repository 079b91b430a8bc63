"""
Result envelope shared by the edustats engines.

An engine puts its numbers in an engine-specific ``params`` payload and
wraps it in Result together with metadata about how they were obtained:
which variance form or class rule was applied, how long each phase took,
and any correction made along the way. Solution classes read from it.
"""

from dataclasses import dataclass, field, replace
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable engine output.

    Attributes:
        params: Engine payload (DescriptiveParams, DistributionParams)
        info: How the numbers were obtained, e.g. ``{'kind': 'raw',
            'denominator': 19}`` or ``{'class_rule': 'sturges'}``
        timing: Seconds per phase from Timer.result(), or None
        backend_name: e.g. ``'cpu_descriptive_grouped'``, ``'cpu_frequency'``
        warnings: Corrections a reader of the numbers should know about
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def with_warning(self, message: str) -> 'Result[P]':
        """Copy of this result with one more warning appended."""
        return replace(self, warnings=self.warnings + (message,))

