"""Tests for indent_complexity.math.statistics module."""

import math

import pytest

from indent_complexity.math.statistics import DepthStatistics, StatisticalMoments


class TestCompute:
    """Tests for DepthStatistics.compute."""

    def test_empty_is_all_zero(self):
        stats = DepthStatistics.compute([])
        assert stats == StatisticalMoments(
            score=0.0, sum=0, mean=0.0, variance=0.0, std_dev=0.0, median=0.0, max=0
        )

    def test_flat_is_all_zero(self):
        stats = DepthStatistics.compute([0, 0, 0, 0])
        assert stats.score == 0.0
        assert stats.sum == 0
        assert stats.mean == 0.0
        assert stats.variance == 0.0
        assert stats.std_dev == 0.0
        assert stats.median == 0.0
        assert stats.max == 0

    def test_known_variance(self):
        """[0, 1, 2, 1, 0]: mean 0.8, variance 2.8 / 5."""
        stats = DepthStatistics.compute([0, 1, 2, 1, 0])
        assert stats.sum == 4
        assert stats.mean == pytest.approx(0.8)
        assert stats.variance == pytest.approx(0.56)
        assert stats.std_dev == pytest.approx(math.sqrt(0.56))
        assert stats.max == 2

    def test_population_not_sample_variance(self):
        assert DepthStatistics.compute([0, 2]).variance == pytest.approx(1.0)

    def test_median_odd(self):
        assert DepthStatistics.compute([0, 1, 2, 3, 4]).median == 2

    def test_median_even(self):
        assert DepthStatistics.compute([0, 1, 2, 3]).median == 1.5

    def test_median_sorts_numerically(self):
        assert DepthStatistics.compute([10, 2, 9]).median == 9

    def test_score_is_mean_of_squares(self):
        """[0,1,2,3,4,3,2,1,0]: sum of squares 44 over 9 lines."""
        stats = DepthStatistics.compute([0, 1, 2, 3, 4, 3, 2, 1, 0])
        assert stats.score == pytest.approx(44 / 9)

    @pytest.mark.parametrize(
        "depths",
        [[3], [0, 1, 2, 1, 0], [5, 0, 0, 0, 0, 0], [1, 1, 1], [0, 7, 2, 2, 9, 4, 1]],
    )
    def test_score_equals_variance_plus_mean_squared(self, depths):
        stats = DepthStatistics.compute(depths)
        assert stats.score == pytest.approx(stats.variance + stats.mean**2)

    def test_single_outlier_raises_score_more_than_variance(self):
        stats = DepthStatistics.compute([0] * 9 + [6])
        assert stats.score > stats.variance

    def test_returns_python_numbers(self):
        stats = DepthStatistics.compute([1, 2])
        assert type(stats.sum) is int
        assert type(stats.max) is int
        assert type(stats.score) is float
        assert type(stats.median) is float

    def test_order_independent(self):
        assert DepthStatistics.compute([3, 0, 1]) == DepthStatistics.compute([0, 1, 3])

    def test_every_permutation_identical(self):
        """Float moments must not drift with line order."""
        depths = [0, 7, 2, 2, 9, 4, 1, 3, 3]
        expected = DepthStatistics.compute(sorted(depths))
        for shift in range(len(depths)):
            rotated = depths[shift:] + depths[:shift]
            assert DepthStatistics.compute(rotated) == expected
            assert DepthStatistics.compute(rotated[::-1]) == expected


class TestHistogram:
    """Tests for DepthStatistics.histogram."""

    def test_empty(self):
        assert DepthStatistics.histogram([]) == {}

    def test_counts_present_depths_only(self):
        assert DepthStatistics.histogram([0, 1, 2, 1, 0]) == {0: 2, 1: 2, 2: 1}

    def test_keys_ascending(self):
        assert list(DepthStatistics.histogram([4, 0, 2, 4])) == [0, 2, 4]

    def test_counts_sum_to_length(self):
        depths = [0, 3, 3, 1, 7, 0, 0]
        assert sum(DepthStatistics.histogram(depths).values()) == len(depths)
