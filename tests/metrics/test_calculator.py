"""Tests for MetricsCalculator risk summaries"""

import json
import math

import pytest

from riskcast.config.defaults import MetricsParams
from riskcast.errors import MetricsCalculationError
from riskcast.metrics.calculator import (
    MetricsCalculator,
    cagr,
    compute_risk_summary,
    sharpe_ratio,
)
from riskcast.metrics.forecast import ForecastModel
from riskcast.metrics.stats import covariance
from riskcast.models.metrics import BENCHMARK_MISMATCH, INSUFFICIENT_HISTORY, RiskSummary


class TestNeutralSummary:
    """Test cold-start behaviour"""

    @pytest.mark.parametrize("closes", [[], [100.0]])
    def test_short_history_returns_neutral_summary(self, closes):
        summary = compute_risk_summary(closes, [])

        assert summary.growth == 0.0
        assert summary.volatility == 0.0
        assert summary.beta == 1.0
        assert summary.covariance == 0.0
        assert summary.sharpe == 0.0
        assert summary.confidence == 0.0
        assert summary.cagr == 0.0
        assert summary.degenerate_reason == INSUFFICIENT_HISTORY
        assert summary.observations == len(closes)

    def test_neutral_factory(self):
        summary = RiskSummary.neutral()
        assert summary == RiskSummary(degenerate_reason=INSUFFICIENT_HISTORY)


class TestRiskSummary:
    """Test full risk summary calculation"""

    def test_end_to_end_against_hand_computation(self, sample_closes, flat_benchmark):
        summary = compute_risk_summary(sample_closes, flat_benchmark)

        returns = [
            (sample_closes[i + 1] - sample_closes[i]) / sample_closes[i]
            for i in range(len(sample_closes) - 1)
        ]
        avg = sum(returns) / len(returns)
        expected_growth = avg * 100
        expected_volatility = math.sqrt(sum((r - avg) ** 2 for r in returns) / len(returns)) * 100

        assert abs(summary.growth - expected_growth) < 1e-9
        assert abs(summary.volatility - expected_volatility) < 1e-9
        # Constant benchmark has no variance
        assert summary.beta == 1.0
        assert abs(summary.covariance) < 1e-12
        assert abs(summary.sharpe - expected_growth / expected_volatility) < 1e-9
        assert not summary.is_degenerate

    def test_varying_benchmark(self, sample_closes, varying_benchmark):
        summary = compute_risk_summary(sample_closes, varying_benchmark)

        returns = [(b - a) / a for a, b in zip(sample_closes, sample_closes[1:])]
        bench_mean = sum(varying_benchmark) / len(varying_benchmark)
        ret_mean = sum(returns) / len(returns)
        co = sum((r - ret_mean) * (b - bench_mean) for r, b in zip(returns, varying_benchmark))
        var = sum((b - bench_mean) ** 2 for b in varying_benchmark)

        assert summary.beta == pytest.approx(co / var)
        assert summary.covariance == pytest.approx(covariance(returns, varying_benchmark))

    def test_confidence_is_forecast_r_squared(self, sample_closes, flat_benchmark):
        summary = compute_risk_summary(sample_closes, flat_benchmark)
        r_squared = ForecastModel().r_squared(sample_closes)
        assert summary.confidence == pytest.approx(r_squared * 100)

    def test_linear_closes_full_confidence(self):
        summary = compute_risk_summary([10.0, 20.0, 30.0, 40.0, 50.0], [0.0] * 4)
        assert summary.confidence == pytest.approx(100.0)

    def test_zero_volatility_sharpe_sentinel(self):
        summary = compute_risk_summary([100.0, 100.0, 100.0], [0.01, 0.02])

        assert summary.volatility == 0.0
        assert summary.sharpe == 0.0
        assert not math.isnan(summary.sharpe)

    def test_benchmark_length_mismatch_degrades(self, sample_closes):
        summary = compute_risk_summary(sample_closes, [0.01, 0.02])

        assert summary.beta == 1.0
        assert summary.covariance == 0.0
        assert summary.growth != 0.0
        assert summary.degenerate_reason == BENCHMARK_MISMATCH

    def test_two_closes(self):
        summary = compute_risk_summary([100.0, 105.0], [0.01])

        assert summary.growth == pytest.approx(5.0)
        assert summary.volatility == 0.0
        # Single return has no benchmark variance or degrees of freedom
        assert summary.beta == 1.0
        assert summary.covariance == 0.0

    def test_summary_is_recomputed_per_call(self, sample_closes, flat_benchmark):
        calc = MetricsCalculator()
        first = calc.calculate(sample_closes, flat_benchmark)
        calc.calculate([100.0, 50.0], [0.0])
        second = calc.calculate(sample_closes, flat_benchmark)
        assert first == second

    def test_to_dict(self, sample_closes, flat_benchmark):
        data = compute_risk_summary(sample_closes, flat_benchmark).to_dict()
        assert set(data) == {"growth", "volatility", "beta", "covariance", "sharpe", "confidence", "cagr"}


class TestCalculatorErrors:
    """Test contract violations"""

    def test_non_numeric_closes(self):
        with pytest.raises(MetricsCalculationError) as exc_info:
            compute_risk_summary(["a", "b", "c"], [0.0, 0.0])
        assert exc_info.value.metric_name == "risk_summary"
        assert exc_info.value.recoverable is False

    def test_zero_close(self):
        with pytest.raises(MetricsCalculationError):
            compute_risk_summary([100.0, 0.0, 50.0], [0.0, 0.0])


class TestHelpers:
    """Test sharpe and CAGR helpers"""

    def test_sharpe_ratio(self):
        assert sharpe_ratio(2.0, 4.0) == 0.5
        assert sharpe_ratio(2.0, 0.0) == 0.0

    def test_cagr_single_period_per_year(self):
        assert cagr([100.0, 110.0], periods_per_year=1) == pytest.approx(10.0)

    def test_cagr_annualizes_daily_steps(self):
        expected = (1.01 ** 252 - 1) * 100
        assert cagr([100.0, 101.0], periods_per_year=252) == pytest.approx(expected)

    def test_cagr_short_series(self):
        assert cagr([100.0], periods_per_year=252) == 0.0

    def test_cagr_uses_configured_periods(self):
        calc = MetricsCalculator(params=MetricsParams(periods_per_year=2))
        summary = calc.calculate([100.0, 110.0, 121.0], [0.0, 0.0])
        assert summary.cagr == pytest.approx(21.0)

    def test_cagr_overflow_returns_finite_sentinel(self):
        # 20x in one day annualized over 252 days exceeds float range
        assert cagr([1.0, 20.0], periods_per_year=252) == 0.0

    def test_overflowing_cagr_summary_is_json_safe(self):
        summary = compute_risk_summary([1.0, 20.0], [0.0])

        assert summary.cagr == 0.0
        assert math.isfinite(summary.growth)
        data = json.loads(json.dumps(summary.to_dict(), allow_nan=False))
        assert data["cagr"] == 0.0
