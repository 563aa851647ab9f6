"""Tests for shared numeric primitives"""

import statistics

import pytest

from riskcast.metrics.stats import (
    beta,
    covariance,
    is_constant,
    mean,
    population_variance,
    sample_variance,
    simple_returns,
)


class TestBasicMoments:
    """Test mean and variance helpers"""

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_mean_empty(self):
        assert mean([]) == 0.0

    def test_population_variance(self):
        # deviations: -1, 1, -1, 1 -> squared sum 4 over n=4
        assert population_variance([1.0, 3.0, 1.0, 3.0]) == 1.0

    def test_sample_variance_matches_statistics(self):
        values = [0.01, -0.02, 0.03, 0.0, 0.015]
        assert sample_variance(values) == pytest.approx(statistics.variance(values))

    def test_variances_degenerate(self):
        assert population_variance([]) == 0.0
        assert sample_variance([5.0]) == 0.0


class TestSimpleReturns:
    """Test simple return derivation"""

    def test_simple_returns(self):
        returns = simple_returns([100.0, 110.0, 99.0])
        assert len(returns) == 2
        assert returns[0] == pytest.approx(0.1)
        assert returns[1] == pytest.approx(-0.1)

    def test_simple_returns_short_series(self):
        assert simple_returns([100.0]) == []
        assert simple_returns([]) == []


class TestCovariance:
    """Test sample covariance"""

    def test_self_covariance_is_sample_variance(self):
        x = [0.012, -0.004, 0.007, 0.021, -0.015, 0.003]
        assert covariance(x, x) == pytest.approx(statistics.variance(x))

    def test_covariance_known_value(self):
        # means 2 and 4; products (-1)(-2) + 0 + (1)(2) = 4 over n-1 = 2
        assert covariance([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]) == pytest.approx(2.0)

    def test_covariance_empty(self):
        assert covariance([], []) == 0.0

    def test_covariance_length_mismatch(self):
        assert covariance([1.0, 2.0, 3.0], [1.0, 2.0]) == 0.0

    def test_covariance_single_observation(self):
        assert covariance([1.0], [2.0]) == 0.0


class TestBeta:
    """Test beta against a benchmark"""

    x = [0.01, -0.02, 0.03, 0.0, 0.015]
    y = [0.005, -0.01, 0.02, 0.001, 0.004]

    def test_beta_of_benchmark_against_itself(self):
        assert beta(self.y, self.y) == pytest.approx(1.0)

    def test_beta_scales_with_series(self):
        doubled = [2 * v for v in self.x]
        assert beta(doubled, self.y) == pytest.approx(2 * beta(self.x, self.y))

    def test_beta_matches_covariance_ratio(self):
        expected = covariance(self.x, self.y) / statistics.variance(self.y)
        assert beta(self.x, self.y) == pytest.approx(expected)

    def test_beta_zero_benchmark_variance(self):
        assert beta(self.x, [0.0] * 5) == 1.0

    def test_beta_length_mismatch(self):
        assert beta(self.x, self.y[:3]) == 1.0

    def test_beta_empty(self):
        assert beta([], []) == 1.0


class TestConstantSeries:
    """Test exact zero variance for constant float series"""

    def test_is_constant(self):
        assert is_constant([0.1] * 7)
        assert is_constant([])
        assert not is_constant([0.1, 0.1, 0.2])

    def test_constant_float_series_has_zero_variance(self):
        assert population_variance([0.1] * 7) == 0.0
        assert sample_variance([0.1] * 7) == 0.0

    def test_constant_float_benchmark_takes_guard_path(self):
        assert beta([0.01, 0.02, -0.01, 0.0, 0.03, 0.01], [0.001] * 6) == 1.0
