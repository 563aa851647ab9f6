"""Default configuration parameters for the analytics engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricsParams:
    """Risk summary parameters."""
    periods_per_year: int = 252                      # Trading days used to annualize CAGR


@dataclass(frozen=True)
class ForecastParams:
    """Linear trend projection parameters."""
    default_steps: int = 6                           # Horizon when caller gives none
    min_history_points: int = 5                      # Dashboard gate before projecting
    horizons: tuple[int, ...] = (10,)                # Horizons produced by analyze()


@dataclass(frozen=True)
class DataParams:
    """Price record normalization parameters."""
    enforce_ohlc_consistency: bool = True            # Drop bars where high/low contradict open/close


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration."""
    metrics: MetricsParams
    forecast: ForecastParams
    data: DataParams
    logging: LoggingParams


def get_default_config() -> EngineConfig:
    """Get the default configuration instance."""
    return EngineConfig(
        metrics=MetricsParams(),
        forecast=ForecastParams(),
        data=DataParams(),
        logging=LoggingParams(),
    )
