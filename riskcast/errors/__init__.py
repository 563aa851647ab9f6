"""
Error classification for the analytics engine.

Degenerate numeric input never raises; it resolves to neutral defaults. The
exceptions below cover record parsing, strict callers that opt into
failures, and genuine system faults such as invalid configuration.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    MetricsCalculationError,
    ConfigurationError,
)
from .recovery import GracefulDegradationError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "MetricsCalculationError",
    "ConfigurationError",
    # Recovery Categories
    "GracefulDegradationError",
]
