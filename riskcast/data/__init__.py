"""
Price record ingestion and normalization.

Turns loosely typed OHLC records from the quote proxy into validated,
date-ordered price points and close series for the calculators.
"""

from .models import NormalizationResult, PricePoint
from .normalizer import PriceNormalizer, closes

__all__ = ["NormalizationResult", "PriceNormalizer", "PricePoint", "closes"]
