"""
Tests for teaching presets and sample transformations.
"""

import numpy as np
import pytest

from edustats.core.exceptions import ConstantDataError, ValidationError
from edustats.data import (
    SAMPLE_GRADES, SCENARIOS, load_scenario, outlier_for,
    shift, scale, standardize, merge, perturb,
)


class TestScenarios:

    def test_all_presets_load(self):
        for key, scenario in SCENARIOS.items():
            np.testing.assert_array_equal(load_scenario(key), scenario.data)

    def test_grades(self):
        assert len(SAMPLE_GRADES) == 20

    def test_unknown_scenario(self):
        with pytest.raises(ValidationError, match="Unknown scenario"):
            load_scenario("bimodal")

    def test_outlier_appended_to_current(self):
        # max 10, range 8 -> 10 + max(20, 12) = 30
        result = load_scenario("outlier", current=[2, 5, 10])
        np.testing.assert_array_equal(result, [2, 5, 10, 30])

    def test_outlier_uses_wide_range(self):
        # max 100, range 100 -> 100 + 150
        assert outlier_for([0, 50, 100]) == 250.0

    def test_outlier_without_current_is_preset(self):
        np.testing.assert_array_equal(load_scenario("outlier", current=[]), SCENARIOS["outlier"].data)

    def test_current_not_modified(self):
        current = np.array([1.0, 2.0, 3.0])
        load_scenario("outlier", current=current)
        np.testing.assert_array_equal(current, [1.0, 2.0, 3.0])


class TestTransforms:

    def test_shift_and_scale(self):
        np.testing.assert_array_equal(shift([1, 2, 3], 10), [11, 12, 13])
        np.testing.assert_array_equal(scale([1, 2, 3], 2), [2, 4, 6])

    def test_standardize_defaults(self):
        z = standardize([2, 4, 4, 4, 5, 5, 7, 9])
        # mean 5, population sd 2
        np.testing.assert_allclose(z, [-1.5, -0.5, -0.5, -0.5, 0, 0, 1, 2])

    def test_standardize_explicit(self):
        np.testing.assert_allclose(standardize([10, 20], mean=15, sd=5), [-1, 1])

    def test_standardize_constant(self):
        with pytest.raises(ConstantDataError):
            standardize([3, 3, 3])

    def test_standardize_empty(self):
        assert standardize([]).size == 0

    def test_merge_text_and_array(self):
        np.testing.assert_array_equal(merge([1, 2], "3, x, 4"), [1, 2, 3, 4])
        np.testing.assert_array_equal(merge([1], [5, 6]), [1, 5, 6])

    def test_perturb_changes_one_value(self, rng):
        original = np.array([1.0, 2.0, 3.0, 4.0])
        result = perturb(original, 100, rng=rng)
        np.testing.assert_array_equal(original, [1.0, 2.0, 3.0, 4.0])
        changed = result != original
        assert changed.sum() == 1
        assert result[changed][0] - original[changed][0] == 100

    def test_perturb_noop(self, rng):
        np.testing.assert_array_equal(perturb([1, 2], 0, rng=rng), [1, 2])
        assert perturb([], 5, rng=rng).size == 0
