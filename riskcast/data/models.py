"""
Canonical data models for normalized price history.

This module defines immutable data structures that represent clean daily
price observations after normalization from raw quote records.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..errors import MalformedDataError, MissingDataError

PRICE_FIELDS = ("open", "high", "low", "close", "volume")


def _parse_date(raw: Any) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        try:
            # Quote APIs send either "2024-01-31" or a full ISO timestamp
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise MalformedDataError(
        f"Unparsable date: {raw!r}",
        raw_data=str(raw)[:100],
        expected_format="ISO-8601 date",
    )


def _parse_number(name: str, raw: Any) -> float:
    if isinstance(raw, bool):
        raise MalformedDataError(f"Invalid {name} type: bool", raw_data=str(raw))
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise MalformedDataError(
            f"Invalid {name} value: {raw!r}",
            raw_data=str(raw)[:100],
            expected_format="number",
        ) from None


@dataclass(frozen=True)
class PricePoint:
    """Daily OHLC observation."""
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: float

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "PricePoint":
        """
        Build a price point from a raw quote record.

        Raises:
            MissingDataError: If a required field is absent
            MalformedDataError: If a field cannot be parsed
        """
        missing = [name for name in ("date",) + PRICE_FIELDS if record.get(name) is None]
        if missing:
            raise MissingDataError(
                f"Price record missing fields: {', '.join(missing)}",
                data_type="price_point",
                context={"missing_fields": missing},
            )

        values = {name: _parse_number(name, record[name]) for name in PRICE_FIELDS}
        return cls(date=_parse_date(record["date"]), **values)

    def has_valid_close(self) -> bool:
        return math.isfinite(self.close) and self.close > 0

    def consistency_problem(self) -> Optional[str]:
        """Describe the first OHLC invariant this bar breaks, None if sound."""
        for name in PRICE_FIELDS:
            if not math.isfinite(getattr(self, name)):
                return f"non-finite {name}"
        if self.high < max(self.open, self.close):
            return f"high {self.high} below max(open {self.open}, close {self.close})"
        if self.low > min(self.open, self.close):
            return f"low {self.low} above min(open {self.open}, close {self.close})"
        if self.volume < 0:
            return f"negative volume {self.volume}"
        return None


@dataclass(frozen=True)
class NormalizationResult:
    """Result of normalizing a batch of price records."""

    points: tuple[PricePoint, ...] = ()
    discarded: int = 0
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def closes(self) -> list[float]:
        return [point.close for point in self.points]

    @property
    def success(self) -> bool:
        return self.discarded == 0
