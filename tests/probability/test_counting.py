"""
Tests for exact counting, enumeration and the dice experiment.

Counts are checked against scipy.special with exact=True.
"""

import math

import numpy as np
import pytest
from scipy import special

from edustats.core.exceptions import InvalidArgumentError, ValidationError
from edustats.probability import (
    factorial, permutation, combination, to_float,
    generate_permutations, generate_combinations,
    roll_dice, summarize_rolls,
)


# ═══════════════════════════════════════════════════════════════════════
# Counting rules
# ═══════════════════════════════════════════════════════════════════════

class TestFactorial:

    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (10, 3628800)])
    def test_small(self, n, expected):
        assert factorial(n) == expected

    def test_large_is_exact(self):
        assert factorial(25) == math.factorial(25)
        assert isinstance(factorial(25), int)

    def test_negative(self):
        with pytest.raises(InvalidArgumentError) as info:
            factorial(-1)
        assert info.value.code == "InvalidArgument"
        assert info.value.argument == "n"

    def test_non_integer(self):
        with pytest.raises(InvalidArgumentError):
            factorial(2.5)

    def test_integral_float_accepted(self):
        assert factorial(4.0) == 24


class TestPermutationCombination:

    def test_textbook_values(self):
        assert permutation(5, 3) == 60
        assert combination(5, 3) == 10

    @pytest.mark.parametrize("n", [0, 1, 7, 20, 60])
    def test_against_scipy(self, n):
        for r in range(n + 1):
            assert permutation(n, r) == special.perm(n, r, exact=True)
            assert combination(n, r) == special.comb(n, r, exact=True)

    @pytest.mark.parametrize("n, r", [(10, 3), (25, 12), (40, 7)])
    def test_symmetry(self, n, r):
        assert combination(n, r) == combination(n, n - r)

    @pytest.mark.parametrize("n, r", [(6, 2), (12, 5), (30, 10)])
    def test_permutation_is_combination_times_orderings(self, n, r):
        assert permutation(n, r) == combination(n, r) * factorial(r)

    @pytest.mark.parametrize("n, r", [(3, 5), (-1, 0), (4, -1)])
    def test_impossible_selections_are_zero(self, n, r):
        assert permutation(n, r) == 0
        assert combination(n, r) == 0

    def test_edges(self):
        assert permutation(7, 0) == 1
        assert combination(7, 0) == 1
        assert combination(7, 7) == 1

    def test_big_counts_stay_exact(self):
        assert combination(100, 50) == math.comb(100, 50)
        assert permutation(200, 100) == math.perm(200, 100)

    def test_non_integer_arguments(self):
        with pytest.raises(InvalidArgumentError):
            combination(5, 1.5)
        with pytest.raises(InvalidArgumentError):
            permutation("5", 2)


class TestToFloat:

    def test_regular(self):
        assert to_float(combination(5, 3)) == 10.0

    def test_overflow(self):
        assert to_float(factorial(200)) == float("inf")


# ═══════════════════════════════════════════════════════════════════════
# Enumeration
# ═══════════════════════════════════════════════════════════════════════

class TestEnumeration:

    def test_permutation_listing(self):
        result = generate_permutations(["A", "B", "C"], 2)
        assert result == [
            ("A", "B"), ("A", "C"), ("B", "A"), ("B", "C"), ("C", "A"), ("C", "B"),
        ]

    def test_combination_listing(self):
        assert generate_combinations(["A", "B", "C"], 2) == [("A", "B"), ("A", "C"), ("B", "C")]

    @pytest.mark.parametrize("r", [0, 1, 2, 3, 4, 5])
    def test_counts_match_formulas(self, r):
        items = list("ABCDE")
        assert len(generate_permutations(items, r)) == permutation(5, r)
        assert len(generate_combinations(items, r)) == combination(5, r)

    def test_no_duplicate_subsets(self):
        subsets = generate_combinations(list("ABCDE"), 3)
        assert len({frozenset(s) for s in subsets}) == len(subsets)

    def test_empty_selection(self):
        assert generate_permutations(["A", "B"], 0) == [()]
        assert generate_combinations(["A", "B"], 0) == [()]

    @pytest.mark.parametrize("r", [-1, 3])
    def test_out_of_range_r(self, r):
        assert generate_permutations(["A", "B"], r) == []
        assert generate_combinations(["A", "B"], r) == []

    def test_ceiling_strict(self):
        with pytest.raises(InvalidArgumentError, match="limited to 5"):
            generate_permutations(list("ABCDEF"), 2)

    def test_ceiling_lenient_warns(self):
        with pytest.warns(RuntimeWarning, match="limited to 5"):
            result = generate_combinations(list("ABCDEF"), 2, strict=False)
        assert len(result) == 15


# ═══════════════════════════════════════════════════════════════════════
# Dice experiment
# ═══════════════════════════════════════════════════════════════════════

class TestDice:

    def test_roll_range(self, rng):
        rolls = roll_dice(500, rng=rng)
        assert rolls.shape == (500,)
        assert rolls.min() >= 1
        assert rolls.max() <= 6

    def test_roll_invalid_times(self):
        with pytest.raises(ValidationError):
            roll_dice(-3)

    def test_summary_counts(self):
        summary = summarize_rolls([6, 1, 6, 3, 2, 6])
        assert summary.total == 6
        assert summary.counts == {1: 1, 2: 1, 3: 1, 4: 0, 5: 0, 6: 3}
        assert summary.percentages[6] == 50.0
        assert summary.theoretical_count == 1.0
        assert summary.theoretical_percentage == pytest.approx(100 / 6)

    def test_convergence_series(self):
        summary = summarize_rolls([6, 1, 6, 3])
        assert [p.roll_number for p in summary.convergence] == [1, 2, 3, 4]
        assert [p.percentage for p in summary.convergence] == [100.0, 50.0, pytest.approx(200 / 3), 50.0]

    def test_convergence_is_thinned(self, rng):
        summary = summarize_rolls(roll_dice(1000, rng=rng), target_face=1)
        assert len(summary.convergence) == 200
        assert summary.convergence[1].roll_number == 6

    def test_long_run_approaches_one_sixth(self, rng):
        summary = summarize_rolls(roll_dice(60000, rng=rng))
        assert summary.convergence[-1].percentage == pytest.approx(100 / 6, abs=1.0)

    def test_empty_history(self):
        summary = summarize_rolls([])
        assert summary.total == 0
        assert summary.convergence == ()
        assert all(p == 0.0 for p in summary.percentages.values())

    def test_invalid_face(self):
        with pytest.raises(ValidationError):
            summarize_rolls([1, 7])
        with pytest.raises(ValidationError):
            summarize_rolls([1, 2], target_face=0)
