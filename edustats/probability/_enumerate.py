"""
Exhaustive listing of permutations and combinations.

Cost grows factorially with the number of items, so listing is limited
to MAX_ENUMERATION_ITEMS items unless the caller opts out with
``strict=False``.
"""

from __future__ import annotations

import itertools
import warnings
from collections.abc import Sequence
from typing import TypeVar

from edustats.core.constants import MAX_ENUMERATION_ITEMS
from edustats.core.exceptions import InvalidArgumentError
from edustats.probability._counting import _as_int

T = TypeVar('T')


def _check_ceiling(items: Sequence[object], strict: bool) -> None:
    if len(items) <= MAX_ENUMERATION_ITEMS:
        return
    message = (
        f"items: enumeration is limited to {MAX_ENUMERATION_ITEMS} items, "
        f"got {len(items)}"
    )
    if strict:
        raise InvalidArgumentError(message, argument="items", value=len(items))
    warnings.warn(message, RuntimeWarning, stacklevel=3)


def generate_permutations(
    items: Sequence[T],
    r: int,
    *,
    strict: bool = True,
) -> list[tuple[T, ...]]:
    """
    Every ordered selection of ``r`` items.

    ``r == 0`` gives ``[()]``; ``r < 0`` or ``r > len(items)`` gives ``[]``.
    Order follows item positions: selections starting with ``items[0]``
    come first.
    """
    items = list(items)
    r = _as_int(r, "r")
    _check_ceiling(items, strict)
    if r < 0 or r > len(items):
        return []
    return list(itertools.permutations(items, r))


def generate_combinations(
    items: Sequence[T],
    r: int,
    *,
    strict: bool = True,
) -> list[tuple[T, ...]]:
    """
    Every subset of ``r`` items, each listed once.

    Subsets are built from increasing item positions, so no subset appears
    twice even when items repeat in a different order. ``r == 0`` gives
    ``[()]``; ``r < 0`` or ``r > len(items)`` gives ``[]``.
    """
    items = list(items)
    r = _as_int(r, "r")
    _check_ceiling(items, strict)
    if r < 0 or r > len(items):
        return []
    return list(itertools.combinations(items, r))
