"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

KNOWN_SECTIONS = {
    "metrics": {"periods_per_year"},
    "forecast": {"default_steps", "min_history_points", "horizons"},
    "data": {"enforce_ohlc_consistency"},
    "logging": {"level", "format_json", "include_timestamp"},
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_metrics_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate risk summary parameters."""
        errors = []

        if "periods_per_year" in params:
            value = params["periods_per_year"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="metrics.periods_per_year",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_forecast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate forecast parameters."""
        errors = []

        if "default_steps" in params:
            value = params["default_steps"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="forecast.default_steps",
                    message="Must be a positive integer",
                    value=value
                ))

        # Regression needs two points to define a line
        if "min_history_points" in params:
            value = params["min_history_points"]
            if not _is_positive_int(value) or value < 2:
                errors.append(ValidationError(
                    field="forecast.min_history_points",
                    message="Must be an integer >= 2",
                    value=value
                ))

        if "horizons" in params:
            value = params["horizons"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(_is_positive_int(h) for h in value)):
                errors.append(ValidationError(
                    field="forecast.horizons",
                    message="Must be a non-empty list of positive integers",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_data_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate normalization parameters."""
        errors = []

        if "enforce_ohlc_consistency" in params:
            value = params["enforce_ohlc_consistency"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="data.enforce_ohlc_consistency",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {sorted(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
            elif not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
            else:
                for key in sorted(set(value) - KNOWN_SECTIONS[section]):
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=value[key]
                    ))

        if isinstance(config.get("metrics"), dict):
            errors.extend(ConfigValidator.validate_metrics_params(config["metrics"]))

        if isinstance(config.get("forecast"), dict):
            errors.extend(ConfigValidator.validate_forecast_params(config["forecast"]))

        if isinstance(config.get("data"), dict):
            errors.extend(ConfigValidator.validate_data_params(config["data"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
