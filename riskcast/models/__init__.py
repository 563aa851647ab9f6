"""
Result records returned by the analytics engine.

Immutable data structures recomputed on every call, never mutated in place.
"""

from .metrics import Forecast, RiskSummary

__all__ = ["Forecast", "RiskSummary"]
