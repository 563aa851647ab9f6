"""
Price history normalization pipeline.

Converts raw OHLC records into validated PricePoint objects. Bad records are
dropped and counted rather than raised so that a dashboard can still render
whatever usable history a data-sparse symbol has.
"""

from typing import Any, Iterable, Optional, Union

from ..config.defaults import DataParams
from ..errors import DataQualityError
from ..logging.config import get_engine_logger
from .models import NormalizationResult, PricePoint

logger = get_engine_logger(__name__)

RawRecord = Union[PricePoint, dict[str, Any]]


def closes(points: Iterable[PricePoint]) -> list[float]:
    """Extract the close-price series from price points."""
    return [point.close for point in points]


class PriceNormalizer:
    """Validates and orders raw price records."""

    def __init__(self, params: Optional[DataParams] = None):
        self.params = params or DataParams()

    def normalize(self, records: Iterable[RawRecord]) -> NormalizationResult:
        """
        Normalize a batch of records.

        Args:
            records: Raw quote dicts or already-built PricePoints

        Returns:
            NormalizationResult with date-ordered points and discard details
        """
        points = []
        errors = []

        for index, record in enumerate(records):
            try:
                point = record if isinstance(record, PricePoint) else PricePoint.from_dict(record)
            except DataQualityError as e:
                errors.append(f"record {index}: {e}")
                continue
            except AttributeError:
                errors.append(f"record {index}: unsupported record type {type(record).__name__}")
                continue

            problem = self._check_point(point)
            if problem:
                errors.append(f"record {index}: {problem}")
                continue

            points.append(point)

        # Stable sort keeps feed order for duplicate dates
        points.sort(key=lambda p: p.date)

        if errors:
            logger.warning(
                "Discarded invalid price records",
                discarded=len(errors),
                kept=len(points),
                first_error=errors[0],
            )

        return NormalizationResult(
            points=tuple(points),
            discarded=len(errors),
            errors=tuple(errors),
        )

    def _check_point(self, point: PricePoint) -> Optional[str]:
        if not point.has_valid_close():
            return f"non-positive close {point.close}"
        if self.params.enforce_ohlc_consistency:
            return point.consistency_problem()
        return None
