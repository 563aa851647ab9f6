"""Linear trend forecast with coefficient of determination

Fits ordinary least squares over observation index (x = 0..n-1, y = close)
and extrapolates the line. No clamping is applied, so strongly negative
trends can project negative prices.
"""

from typing import Optional, Sequence

from ..errors import MetricsCalculationError
from ..logging.config import get_engine_logger, log_degenerate_input
from ..models.metrics import INSUFFICIENT_HISTORY, Forecast
from .stats import is_constant

logger = get_engine_logger(__name__)

DEFAULT_STEPS = 6


def _fit_line(closes: Sequence[float]) -> Optional[tuple[float, float]]:
    """Return (slope, intercept), or None when the fit is undefined"""
    n = len(closes)
    if n == 0:
        return None

    sum_x = n * (n - 1) / 2
    sum_xx = (n - 1) * n * (2 * n - 1) / 6
    sum_y = sum(closes)
    sum_xy = sum(i * y for i, y in enumerate(closes))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return None

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def _r_squared(closes: Sequence[float], slope: float, intercept: float) -> float:
    """Fit quality over the historical window, 0.0 for a flat series"""
    if is_constant(closes):
        return 0.0
    y_mean = sum(closes) / len(closes)
    ss_tot = sum((y - y_mean) ** 2 for y in closes)
    if ss_tot == 0:
        return 0.0
    ss_res = sum((y - (slope * i + intercept)) ** 2 for i, y in enumerate(closes))
    return 1 - ss_res / ss_tot


def compute_forecast(closes: Sequence[float], steps: int = DEFAULT_STEPS) -> Forecast:
    """
    Project future close prices along the least-squares trend line

    Args:
        closes: Close prices in chronological order
        steps: Number of future points to project

    Returns:
        Forecast with projected prices for indices n..n+steps-1 and the R²
        of the historical fit. Empty with r_squared 0 when fewer than two
        closes are supplied.
    """
    try:
        fit = _fit_line(closes)
        if fit is None:
            log_degenerate_input(
                logger, "forecast", INSUFFICIENT_HISTORY,
                context={"observations": len(closes)},
            )
            return Forecast.empty(INSUFFICIENT_HISTORY, observations=len(closes))

        slope, intercept = fit
        n = len(closes)
        points = tuple(slope * i + intercept for i in range(n, n + max(steps, 0)))

        return Forecast(
            points=points,
            r_squared=_r_squared(closes, slope, intercept),
            slope=slope,
            intercept=intercept,
            observations=n,
        )
    except TypeError as e:
        raise MetricsCalculationError(
            f"Forecast requires a numeric series: {e}",
            metric_name="forecast",
            calculation_input={"closes": str(closes)[:100], "steps": steps},
        ) from e


class ForecastModel:
    """Horizon-parametric trend projector

    Holds only configuration; every call fits afresh, so one instance can
    serve different horizons over the same series without interference.
    """

    def __init__(self, default_steps: int = DEFAULT_STEPS):
        self.default_steps = default_steps

    def forecast(self, closes: Sequence[float], steps: Optional[int] = None) -> Forecast:
        return compute_forecast(closes, self.default_steps if steps is None else steps)

    def r_squared(self, closes: Sequence[float]) -> float:
        """R² of the trend fit alone, without projecting"""
        return compute_forecast(closes, 0).r_squared
