"""
Centralized logging configuration for the analytics engine.

The engine itself never configures logging on import; the host application
(dashboard backend, notebook, script) calls configure_logging() once. All
modules obtain loggers through get_logger()/get_engine_logger() so output
stays structured and consistent.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Route engine log events through structlog on top of stdlib logging.

    Hosts serving several dashboard sessions can bind per-session values
    with structlog.contextvars.bind_contextvars(); they are merged into every
    event the engine emits, e.g. degenerate-input warnings.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render one JSON object per event (tracebacks as dicts)
            instead of the console renderer
        include_timestamp: Add an ISO-8601 UTC "timestamp" key
        include_caller: Add filename and line number of the logging call
        extra_processors: Host processors, run before rendering
        stream: Output stream for the root handler (stdout by default)
    """
    stream = stream or sys.stdout

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream,
        format="%(message)s",
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the analytics subsystem.

    The context is passed as initial values so the returned proxy stays
    lazy and picks up configure_logging() calls made after import.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying subsystem context
    """
    return structlog.get_logger(name, subsystem="analytics")


def log_degenerate_input(
    logger: FilteringBoundLogger,
    component: str,
    reason: str,
    context: Optional[dict[str, Any]] = None,
    warn: bool = False
) -> None:
    """
    Log that a neutral default was substituted for a computed value.

    Sparse history is routine for freshly selected symbols, so it is logged
    at debug level; caller contract violations (warn=True) go to warning.

    Args:
        logger: Structlog logger instance
        component: Calculation that degraded (e.g. "risk_summary", "forecast")
        reason: Short machine-readable reason
        context: Additional context data
        warn: Emit at warning level instead of debug
    """
    bound_logger = logger.bind(
        component=component,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if warn:
        bound_logger.warning("Degenerate input, using default values")
    else:
        bound_logger.debug("Degenerate input, using default values")
