"""Shared numeric primitives for return series statistics

All helpers are pure and degrade to neutral values on degenerate input
instead of raising.
"""

import math
from typing import Sequence

NEUTRAL_BETA = 1.0


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty series"""
    if not values:
        return 0.0
    return sum(values) / len(values)


def is_constant(values: Sequence[float]) -> bool:
    """True when every value equals the first (or there are none)

    Used instead of comparing a computed variance with zero: the mean of a
    constant float series is not always exactly that constant, which leaves
    a spurious residual variance of order 1e-35.
    """
    return all(v == values[0] for v in values[1:]) if values else True


def population_variance(values: Sequence[float]) -> float:
    """Variance with divisor n, 0.0 for an empty or constant series"""
    if is_constant(values):
        return 0.0
    avg = mean(values)
    return sum((v - avg) ** 2 for v in values) / len(values)


def sample_variance(values: Sequence[float]) -> float:
    """Variance with divisor n-1, 0.0 when fewer than two values"""
    if len(values) < 2 or is_constant(values):
        return 0.0
    avg = mean(values)
    return sum((v - avg) ** 2 for v in values) / (len(values) - 1)


def population_stdev(values: Sequence[float]) -> float:
    return math.sqrt(population_variance(values))


def simple_returns(prices: Sequence[float]) -> list[float]:
    """
    Period-over-period simple returns

    r[i] = (P[i+1] - P[i]) / P[i]

    Args:
        prices: Close prices in chronological order, expected positive

    Returns:
        List of len(prices) - 1 returns, empty for fewer than two prices
    """
    return [
        (prices[i + 1] - prices[i]) / prices[i]
        for i in range(len(prices) - 1)
    ]


def _co_deviation(x: Sequence[float], y: Sequence[float]) -> float:
    mean_x = mean(x)
    mean_y = mean(y)
    return sum((xi - mean_x) * (yi - mean_y) for xi, yi in zip(x, y))


def covariance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Sample covariance of two equal-length series

    cov = Σ(a_i - mean_a)(b_i - mean_b) / (n - 1)

    Returns 0.0 when the series are empty, have different lengths, or hold
    a single observation.
    """
    n = len(a)
    if n != len(b) or n < 2:
        return 0.0
    return _co_deviation(a, b) / (n - 1)


def beta(series: Sequence[float], benchmark: Sequence[float]) -> float:
    """
    Sensitivity of a return series to a benchmark return series

    beta = Σ(x - mean_x)(y - mean_y) / Σ(y - mean_y)²

    Returns NEUTRAL_BETA (1.0) when the benchmark has zero variance, or when
    the series are empty or of different lengths.
    """
    if not series or len(series) != len(benchmark) or is_constant(benchmark):
        return NEUTRAL_BETA

    mean_y = mean(benchmark)
    benchmark_variance = sum((y - mean_y) ** 2 for y in benchmark)
    if benchmark_variance == 0:
        return NEUTRAL_BETA

    return _co_deviation(series, benchmark) / benchmark_variance
