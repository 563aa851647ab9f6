"""Risk metrics and trend forecast calculations"""

from .calculator import MetricsCalculator, cagr, compute_risk_summary, sharpe_ratio
from .forecast import ForecastModel, compute_forecast
from .stats import beta, covariance, mean, population_variance, sample_variance, simple_returns

__all__ = [
    "ForecastModel",
    "MetricsCalculator",
    "beta",
    "cagr",
    "compute_forecast",
    "compute_risk_summary",
    "covariance",
    "mean",
    "population_variance",
    "sample_variance",
    "sharpe_ratio",
    "simple_returns",
]
