"""
Dice-rolling experiment: empirical frequencies converging on 1/6.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from edustats.core.constants import DICE_FACES, MAX_CONVERGENCE_POINTS
from edustats.core.exceptions import ValidationError
from edustats.core.validation import check_non_negative_int


@dataclass(frozen=True)
class ConvergencePoint:
    """Relative frequency (percent) of the target face after ``roll_number`` rolls."""
    roll_number: int
    percentage: float


@dataclass(frozen=True)
class DiceSummary:
    """
    Face counts of a roll history and the running frequency of one face.

    ``convergence`` is thinned to about MAX_CONVERGENCE_POINTS points for
    long histories.
    """
    total: int
    counts: dict[int, int]
    percentages: dict[int, float]
    target_face: int
    convergence: tuple[ConvergencePoint, ...]

    @property
    def theoretical_count(self) -> float:
        return self.total / len(DICE_FACES)

    @property
    def theoretical_percentage(self) -> float:
        return 100.0 / len(DICE_FACES)


def roll_dice(
    times: int,
    *,
    rng: np.random.Generator | None = None,
) -> NDArray[np.int64]:
    """Roll a fair six-sided die ``times`` times."""
    times = check_non_negative_int(times, "times")
    if rng is None:
        rng = np.random.default_rng()
    return rng.integers(DICE_FACES[0], DICE_FACES[-1] + 1, size=times, dtype=np.int64)


def summarize_rolls(rolls: ArrayLike, target_face: int = 6) -> DiceSummary:
    """
    Count faces in a chronological roll history.

    Raises
    ------
    ValidationError
        If a roll or ``target_face`` is not a die face.
    """
    if target_face not in DICE_FACES:
        raise ValidationError(f"target_face: expected one of {DICE_FACES}, got {target_face!r}")
    history: NDArray[Any] = np.asarray(rolls).ravel()
    if history.size and not np.all(np.isin(history, DICE_FACES)):
        raise ValidationError(f"rolls: every roll must be one of {DICE_FACES}")
    history = history.astype(np.int64)

    total = int(history.size)
    counts = {face: int(np.sum(history == face)) for face in DICE_FACES}
    percentages = {
        face: (count / total * 100.0 if total else 0.0) for face, count in counts.items()
    }

    hits = np.cumsum(history == target_face)
    running = hits / np.arange(1, total + 1) * 100.0
    step = total // MAX_CONVERGENCE_POINTS if total > MAX_CONVERGENCE_POINTS else 1
    convergence = tuple(
        ConvergencePoint(roll_number=i + 1, percentage=float(running[i]))
        for i in range(0, total, step)
    )

    return DiceSummary(
        total=total,
        counts=counts,
        percentages=percentages,
        target_face=target_face,
        convergence=convergence,
    )
