"""Risk/return summary calculator"""

import math
from typing import Optional, Sequence

from ..config.defaults import MetricsParams
from ..errors import MetricsCalculationError
from ..logging.config import get_engine_logger, log_degenerate_input
from ..models.metrics import BENCHMARK_MISMATCH, INSUFFICIENT_HISTORY, RiskSummary
from .forecast import ForecastModel
from .stats import beta, covariance, mean, population_stdev, simple_returns

logger = get_engine_logger(__name__)

PERCENT = 100.0

# Returned in place of growth/volatility when returns never vary
ZERO_VOLATILITY_SHARPE = 0.0

# Returned in place of a CAGR beyond float range
UNBOUNDED_CAGR = 0.0


def sharpe_ratio(growth: float, volatility: float) -> float:
    """Mean return over volatility, without a risk-free offset"""
    if volatility == 0:
        return ZERO_VOLATILITY_SHARPE
    return growth / volatility


def cagr(closes: Sequence[float], periods_per_year: int) -> float:
    """
    Compound annual growth rate of a close series, in percent

    Treats each step between closes as one period and annualizes with
    periods_per_year. Returns 0.0 when fewer than two closes are given, and
    UNBOUNDED_CAGR when annualizing a short window leaves float range.
    """
    periods = len(closes) - 1
    if periods < 1:
        return 0.0
    ratio = closes[-1] / closes[0]
    if ratio <= 0:
        return -PERCENT
    try:
        value = (ratio ** (periods_per_year / periods) - 1) * PERCENT
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        log_degenerate_input(
            logger, "cagr", "annualization_overflow",
            context={"periods": periods, "ratio": ratio},
            warn=True,
        )
        return UNBOUNDED_CAGR
    return value


class MetricsCalculator:
    """
    Converts a close-price series into a risk/return summary relative to a
    benchmark return series.
    """

    def __init__(self, params: Optional[MetricsParams] = None,
                 forecast_model: Optional[ForecastModel] = None):
        self.params = params or MetricsParams()
        self.forecast_model = forecast_model or ForecastModel()

    def calculate(self, closes: Sequence[float], benchmark_returns: Sequence[float]) -> RiskSummary:
        """
        Calculate the risk summary

        Args:
            closes: Close prices in chronological order, expected positive
            benchmark_returns: Market comparator returns, one per close-to-close step

        Returns:
            RiskSummary; the neutral summary when fewer than two closes
        """
        if len(closes) < 2:
            log_degenerate_input(
                logger, "risk_summary", INSUFFICIENT_HISTORY,
                context={"observations": len(closes)},
            )
            return RiskSummary.neutral(observations=len(closes))

        try:
            returns = simple_returns(closes)

            growth = mean(returns) * PERCENT
            volatility = population_stdev(returns) * PERCENT

            degenerate_reason = None
            if len(returns) != len(benchmark_returns):
                degenerate_reason = BENCHMARK_MISMATCH
                log_degenerate_input(
                    logger, "risk_summary", BENCHMARK_MISMATCH,
                    context={"returns": len(returns), "benchmark": len(benchmark_returns)},
                    warn=True,
                )

            # Trend fit quality doubles as the summary's confidence figure
            confidence = self.forecast_model.r_squared(closes) * PERCENT

            return RiskSummary(
                growth=growth,
                volatility=volatility,
                beta=beta(returns, benchmark_returns),
                covariance=covariance(returns, benchmark_returns),
                sharpe=sharpe_ratio(growth, volatility),
                confidence=confidence,
                cagr=cagr(closes, self.params.periods_per_year),
                observations=len(closes),
                degenerate_reason=degenerate_reason,
            )
        except MetricsCalculationError:
            raise
        except (TypeError, ZeroDivisionError) as e:
            raise MetricsCalculationError(
                f"Risk summary calculation failed: {e}",
                metric_name="risk_summary",
                calculation_input={"closes": str(closes)[:100]},
            ) from e


def compute_risk_summary(closes: Sequence[float], benchmark_returns: Sequence[float]) -> RiskSummary:
    """Risk summary with default parameters."""
    return MetricsCalculator().calculate(closes, benchmark_returns)
