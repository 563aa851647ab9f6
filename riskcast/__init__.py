"""
Riskcast - Financial Metrics & Forecast Engine

A pure, stateless numeric engine for price-history dashboards. Turns daily
close prices into a risk/return summary relative to a benchmark and a linear
trend projection with a fit-quality score.
"""

from .engine import AnalyticsEngine, DashboardAnalysis
from .logging.config import configure_logging
from .metrics.calculator import MetricsCalculator, compute_risk_summary
from .metrics.forecast import ForecastModel, compute_forecast
from .metrics.stats import beta, covariance
from .models.metrics import Forecast, RiskSummary

__version__ = "0.1.0"
__author__ = "Riskcast Team"

__all__ = [
    "AnalyticsEngine",
    "DashboardAnalysis",
    "Forecast",
    "ForecastModel",
    "MetricsCalculator",
    "RiskSummary",
    "beta",
    "compute_forecast",
    "compute_risk_summary",
    "configure_logging",
    "covariance",
]
