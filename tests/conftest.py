"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List


@pytest.fixture
def sample_closes() -> List[float]:
    """Daily closes with a mild upward drift."""
    return [100.0, 102.0, 101.0, 105.0, 107.0, 106.0, 110.0]


@pytest.fixture
def flat_benchmark() -> List[float]:
    """Benchmark returns with zero variance, aligned with sample_closes."""
    return [0.001] * 6


@pytest.fixture
def varying_benchmark() -> List[float]:
    """Benchmark returns with non-zero variance, aligned with sample_closes."""
    return [0.004, -0.006, 0.012, 0.008, -0.002, 0.01]


@pytest.fixture
def sample_price_records() -> List[Dict[str, Any]]:
    """Raw quote records as delivered by the quote proxy."""
    closes = [100.0, 102.0, 101.0, 105.0, 107.0, 106.0, 110.0]
    records = []
    previous = closes[0]
    for day, close in enumerate(closes, start=1):
        records.append({
            "date": f"2024-03-{day:02d}",
            "open": previous,
            "high": max(previous, close) + 1.0,
            "low": min(previous, close) - 1.0,
            "close": close,
            "volume": 1_000_000 + day * 1000,
        })
        previous = close
    return records
