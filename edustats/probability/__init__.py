"""
Probability module: counting rules and a dice experiment.

Public API:
    factorial(n)                    - n!
    permutation(n, r)               - P(n, r)
    combination(n, r)               - C(n, r)
    to_float(count)                 - Lossy float value of a count
    generate_permutations(items, r) - List ordered selections (small n)
    generate_combinations(items, r) - List subsets (small n)
    roll_dice(times)                - Simulated fair die
    summarize_rolls(rolls)          - Face frequencies and convergence
"""

from edustats.probability._counting import factorial, permutation, combination, to_float
from edustats.probability._enumerate import generate_permutations, generate_combinations
from edustats.probability.experiments import (
    ConvergencePoint, DiceSummary, roll_dice, summarize_rolls,
)

__all__ = [
    "factorial",
    "permutation",
    "combination",
    "to_float",
    "generate_permutations",
    "generate_combinations",
    "roll_dice",
    "summarize_rolls",
    "ConvergencePoint",
    "DiceSummary",
]
