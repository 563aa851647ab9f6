"""
Analytics engine facade.

Entry point for the presentation layer: normalizes raw price history, then
runs the risk summary and the trend forecasts. The two calculations share
no state, and neither does anything across calls.

Raw Records → Normalization → Close Series → {MetricsCalculator, ForecastModel}
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from .config.defaults import EngineConfig, get_default_config
from .config.loader import ConfigLoader
from .data.models import NormalizationResult
from .data.normalizer import PriceNormalizer, RawRecord
from .logging.config import configure_logging, get_engine_logger
from .metrics.calculator import MetricsCalculator
from .metrics.forecast import ForecastModel
from .models.metrics import BELOW_MIN_HISTORY, Forecast, RiskSummary

logger = get_engine_logger(__name__)


@dataclass(frozen=True)
class DashboardAnalysis:
    """Everything the dashboard shows for one price history."""
    summary: RiskSummary
    forecasts: dict[int, Forecast] = field(default_factory=dict)
    point_count: int = 0
    discarded_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "forecasts": {str(h): f.to_dict() for h, f in self.forecasts.items()},
            "point_count": self.point_count,
            "discarded_count": self.discarded_count,
        }


class AnalyticsEngine:
    """
    Coordinates normalization, risk summary and forecasting.

    Holds configuration only. Safe to share between threads or sessions.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or get_default_config()
        self.normalizer = PriceNormalizer(self.config.data)
        self.forecast_model = ForecastModel(default_steps=self.config.forecast.default_steps)
        self.metrics_calculator = MetricsCalculator(
            params=self.config.metrics,
            forecast_model=self.forecast_model,
        )

    @classmethod
    def from_config_dir(cls, config_dir: Optional[Union[str, Path]] = None,
                        overrides: Optional[dict[str, Any]] = None) -> "AnalyticsEngine":
        """
        Build an engine from engine.yaml plus caller overrides.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        config = loader.load(overrides)
        logger.info("Analytics engine configured", config_dir=str(loader.config_dir))
        return cls(config)

    def configure_logging(self) -> None:
        """Apply the logging section of this engine's configuration."""
        configure_logging(**asdict(self.config.logging))

    def summarize(self, closes: Sequence[float], benchmark_returns: Sequence[float]) -> RiskSummary:
        return self.metrics_calculator.calculate(closes, benchmark_returns)

    def forecast(self, closes: Sequence[float], steps: Optional[int] = None) -> Forecast:
        return self.forecast_model.forecast(closes, steps)

    def normalize(self, records: Iterable[RawRecord]) -> NormalizationResult:
        return self.normalizer.normalize(records)

    def analyze(
        self,
        records: Iterable[RawRecord],
        benchmark_returns: Sequence[float],
        horizons: Optional[Sequence[int]] = None,
    ) -> DashboardAnalysis:
        """
        Full dashboard analysis for one price history.

        Args:
            records: Raw OHLC records or PricePoints
            benchmark_returns: Comparator returns aligned with the kept points
            horizons: Forecast lengths to produce (defaults to config)

        Returns:
            DashboardAnalysis with one forecast per horizon
        """
        normalized = self.normalize(records)
        closes = normalized.closes

        summary = self.summarize(closes, benchmark_returns)

        horizons = tuple(horizons) if horizons is not None else self.config.forecast.horizons
        min_points = self.config.forecast.min_history_points

        forecasts = {}
        for horizon in horizons:
            if len(closes) < min_points:
                forecasts[horizon] = Forecast.empty(BELOW_MIN_HISTORY, observations=len(closes))
            else:
                forecasts[horizon] = self.forecast(closes, horizon)

        logger.debug(
            "Price history analyzed",
            points=len(closes),
            discarded=normalized.discarded,
            horizons=list(horizons),
            degenerate=summary.is_degenerate,
        )

        return DashboardAnalysis(
            summary=summary,
            forecasts=forecasts,
            point_count=len(closes),
            discarded_count=normalized.discarded,
        )
