"""
Tests for grouped-data descriptive statistics and the teaching helpers.
"""

import numpy as np
import pytest

from edustats.core.exceptions import EmptyDataError, ValidationError
from edustats.descriptive import (
    compute_descriptive_stats, deviation_table, classify_skewness, classify_cv,
    DescriptiveDesign, GroupedDatum,
)


class TestGroupedTable:
    """Four classes of width 10, n = 30 (population variance)."""

    def test_mean(self, grouped_table):
        sol = compute_descriptive_stats(grouped_table)
        assert sol.kind == "grouped"
        assert sol.mean == pytest.approx(650 / 30)

    def test_median_interpolated_in_median_class(self, grouped_table):
        # n/2 = 15 falls in [20, 30): 20 + (15 - 12) / 12 * 10
        sol = compute_descriptive_stats(grouped_table)
        assert sol.median == pytest.approx(22.5)
        assert sol.info["median_class"] == 2

    def test_mode_interpolated_in_modal_class(self, grouped_table):
        # d1 = 12 - 8, d2 = 12 - 6
        sol = compute_descriptive_stats(grouped_table)
        assert sol.mode == pytest.approx((24.0,))
        assert sol.info["modal_class"] == 2

    def test_variance_matches_expanded_midpoints(self, grouped_table):
        sol = compute_descriptive_stats(grouped_table)
        expanded = np.repeat([5.0, 15.0, 25.0, 35.0], [4, 8, 12, 6])
        assert not sol.is_sample
        np.testing.assert_allclose(sol.variance, np.var(expanded), rtol=1e-12)
        np.testing.assert_allclose(sol.mean, np.mean(expanded), rtol=1e-12)

    def test_range_uses_outer_limits(self, grouped_table):
        sol = compute_descriptive_stats(grouped_table)
        assert sol.range == 40.0
        assert (sol.minimum, sol.maximum) == (0.0, 40.0)

    def test_cumulative_in_info(self, grouped_table):
        sol = compute_descriptive_stats(grouped_table)
        assert sol.info["cumulative_frequencies"] == (4, 12, 24, 30)
        assert sol.backend_name == "cpu_descriptive_grouped"

    def test_skewness_sign(self, grouped_table):
        sol = compute_descriptive_stats(grouped_table)
        # mean < median: left skew
        assert sol.skewness < 0


class TestGroupedEdgeCases:

    def test_first_class_modal(self):
        # d1 = 9 - 0, d2 = 9 - 3
        sol = compute_descriptive_stats([(0, 10, 9), (10, 20, 3)])
        assert sol.mode == pytest.approx((6.0,))
        assert sol.median == pytest.approx(6 / 9 * 10)
        assert sol.is_sample

    def test_single_class(self):
        sol = compute_descriptive_stats([(10, 20, 5)])
        assert sol.mean == 15.0
        assert sol.median == 15.0
        assert sol.mode == pytest.approx((15.0,))
        assert sol.variance == 0.0

    def test_row_forms_are_equivalent(self, grouped_table):
        as_datum = [GroupedDatum(*row) for row in grouped_table]
        as_mapping = [dict(lower=a, upper=b, frequency=f) for a, b, f in grouped_table]
        expected = compute_descriptive_stats(grouped_table).mean
        assert compute_descriptive_stats(as_datum).mean == pytest.approx(expected)
        assert compute_descriptive_stats(as_mapping).mean == pytest.approx(expected)

    def test_list_rows(self):
        sol = compute_descriptive_stats([[0, 10, 4], [10, 20, 6]])
        assert sol.kind == "grouped"
        assert sol.mean == pytest.approx(11.0)

    def test_zero_total_frequency(self):
        with pytest.raises(EmptyDataError):
            compute_descriptive_stats([(0, 10, 0), (10, 20, 0)])

    def test_empty_table(self):
        with pytest.raises(EmptyDataError):
            DescriptiveDesign.from_grouped([])

    @pytest.mark.parametrize("row", [
        (0, 10, -1), (0, 10, 2.5), (10, 0, 3), (0, np.inf, 3), (0, 10),
    ])
    def test_invalid_rows(self, row):
        with pytest.raises(ValidationError):
            DescriptiveDesign.from_grouped([row])

    def test_missing_mapping_key(self):
        with pytest.raises(ValidationError, match="missing key"):
            DescriptiveDesign.from_grouped([{"lower": 0, "upper": 10}])

    def test_datum_properties(self):
        row = GroupedDatum(lower=10.0, upper=16.0, frequency=2)
        assert row.midpoint == 13.0
        assert row.width == 6.0


class TestDeviationTable:

    def test_rows(self):
        table = deviation_table([2, 4, 9])
        assert table.mean == 5.0
        assert [r.deviation for r in table.rows] == [-3.0, -1.0, 4.0]
        assert [r.squared_deviation for r in table.rows] == [9.0, 1.0, 16.0]
        assert table.sum_squared_deviations == 26.0

    def test_matches_variance_numerator(self, grades):
        table = deviation_table(grades)
        sol = compute_descriptive_stats(grades)
        assert table.sum_squared_deviations == pytest.approx(sol.info["sum_squared_deviations"])

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            deviation_table([])


class TestClassification:

    @pytest.mark.parametrize("value, label", [
        (0.9, "strong_right"), (0.3, "right"), (0.0, "symmetric"),
        (0.1, "symmetric"), (-0.3, "left"), (-0.6, "strong_left"),
    ])
    def test_skewness(self, value, label):
        assert classify_skewness(value) == label

    @pytest.mark.parametrize("value, label", [
        (5.0, "low"), (15.0, "low"), (20.0, "moderate"), (45.0, "high"),
    ])
    def test_cv(self, value, label):
        assert classify_cv(value) == label


class TestGroupedFloatRange:

    def test_midpoint_sum_overflow(self):
        with pytest.raises(ValidationError, match="floating-point range"):
            compute_descriptive_stats([(1e308, 1.5e308, 3)])

    def test_large_limits_have_finite_midpoint(self):
        row = GroupedDatum(lower=1.2e308, upper=1.6e308, frequency=1)
        assert row.midpoint == pytest.approx(1.4e308)
