"""
Degraded-result errors for callers that opt into strict handling.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """A result was computed with neutral fallbacks in place of some metrics.

    Raised by raise_if_degenerate() when, for example, benchmark returns do
    not line up with the price returns and beta/covariance were defaulted.
    """

    def __init__(self, message: str, degraded_functionality: Optional[str] = None,
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True
