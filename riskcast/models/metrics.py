"""Data models for risk summaries and price forecasts"""

from dataclasses import dataclass
from typing import Optional

from ..errors import GracefulDegradationError, InsufficientDataError

# Degenerate input reasons
INSUFFICIENT_HISTORY = "insufficient_history"
BELOW_MIN_HISTORY = "below_min_history"
BENCHMARK_MISMATCH = "benchmark_mismatch"


def _raise_for_reason(reason: str, component: str, required: int, available: int) -> None:
    if reason == BENCHMARK_MISMATCH:
        raise GracefulDegradationError(
            f"{component}: benchmark returns do not align with price returns",
            degraded_functionality="beta,covariance",
            fallback_strategy="neutral_defaults",
        )
    raise InsufficientDataError(
        f"{component}: {reason}",
        required_count=required,
        available_count=available,
    )


@dataclass(frozen=True)
class RiskSummary:
    """Risk/return statistics for a close-price series relative to a benchmark"""
    growth: float = 0.0             # Mean simple return, %
    volatility: float = 0.0         # Population stdev of returns, %
    beta: float = 1.0
    covariance: float = 0.0         # Sample covariance vs benchmark returns
    sharpe: float = 0.0             # growth / volatility, 0.0 when volatility is 0
    confidence: float = 0.0         # Trend fit R², %
    cagr: float = 0.0               # Compound annual growth rate, %
    observations: int = 0           # Close prices the summary was computed from
    degenerate_reason: Optional[str] = None

    @classmethod
    def neutral(cls, reason: str = INSUFFICIENT_HISTORY, observations: int = 0) -> "RiskSummary":
        """Cold-start summary used when there is not enough history."""
        return cls(observations=observations, degenerate_reason=reason)

    @property
    def is_degenerate(self) -> bool:
        return self.degenerate_reason is not None

    def raise_if_degenerate(self) -> "RiskSummary":
        """Return self, or raise for callers that want strict handling."""
        if self.degenerate_reason is not None:
            _raise_for_reason(self.degenerate_reason, "risk_summary", 2, self.observations)
        return self

    def to_dict(self) -> dict:
        """Plain mapping for JSON responses."""
        return {
            "growth": self.growth,
            "volatility": self.volatility,
            "beta": self.beta,
            "covariance": self.covariance,
            "sharpe": self.sharpe,
            "confidence": self.confidence,
            "cagr": self.cagr,
        }


@dataclass(frozen=True)
class Forecast:
    """Linear trend projection of future close prices"""
    points: tuple[float, ...] = ()
    r_squared: float = 0.0          # Fit over the historical window, [0, 1]
    slope: float = 0.0
    intercept: float = 0.0
    observations: int = 0
    degenerate_reason: Optional[str] = None

    @classmethod
    def empty(cls, reason: str, observations: int = 0) -> "Forecast":
        return cls(observations=observations, degenerate_reason=reason)

    @property
    def steps(self) -> int:
        return len(self.points)

    @property
    def final_price(self) -> Optional[float]:
        """Last projected price, None when nothing was projected"""
        return self.points[-1] if self.points else None

    @property
    def is_degenerate(self) -> bool:
        return self.degenerate_reason is not None

    def raise_if_degenerate(self, required: int = 2) -> "Forecast":
        """Return self, or raise InsufficientDataError for strict callers."""
        if self.degenerate_reason is not None:
            _raise_for_reason(self.degenerate_reason, "forecast", required, self.observations)
        return self

    def to_dict(self) -> dict:
        return {"forecast": list(self.points), "r_squared": self.r_squared}
