"""
Logging configuration and utilities for the analytics engine.
"""
from .config import configure_logging, get_engine_logger, get_logger, log_degenerate_input

__all__ = ["configure_logging", "get_engine_logger", "get_logger", "log_degenerate_input"]
