"""Structured logging utilities using structlog for pipeline context and tracing."""

import os
import sys
import uuid
from typing import Any, Optional
import structlog
from structlog.processors import JSONRenderer
from structlog.contextvars import merge_contextvars

# Check if we're in development mode (TTY and LOG_FORMAT=console)
IS_TTY = sys.stderr.isatty()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_structured_logging() -> None:
    """
    Configure structured logging with appropriate processors and renderers.

    Uses:
    - Console renderer for development (colorized, human-readable)
    - JSON renderer for production (structured, machine-readable)
    - Context binding for analysis_id and correlation_id
    """
    # Common processors for all environments
    processors = [
        merge_contextvars,  # Merge context variables (correlation_id)
        structlog.processors.add_log_level,  # Add log level name
        structlog.processors.TimeStamper(fmt="iso"),  # ISO timestamp
        structlog.processors.StackInfoRenderer(),  # Stack trace for errors
        structlog.processors.format_exc_info,  # Exception formatting
    ]

    # Choose renderer based on environment
    if IS_TTY and LOG_FORMAT == "console":
        # Development mode: colorized console output
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        # Production mode: JSON output
        processors.append(JSONRenderer())

    # Configure structlog; stderr keeps stdout free for CLI output
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(
    name: str,
    correlation_id: Optional[str] = None,
    **additional_context: Any,
) -> structlog.BoundLogger:
    """
    Get a structured logger with bound context.

    Args:
        name: Logger name (typically module name)
        correlation_id: Optional correlation ID to bind
        **additional_context: Additional context to bind

    Returns:
        Configured BoundLogger instance with context

    Example:
        >>> logger = get_structured_logger("pipeline", component="ClaimAnalysisPipeline")
        >>> logger.info("analysis_completed", consensus_score=72.4)
    """
    logger = structlog.get_logger(name)

    # Bind tracing context if provided
    if correlation_id:
        logger = logger.bind(correlation_id=correlation_id)

    # Bind additional context (e.g. component)
    if additional_context:
        logger = logger.bind(**additional_context)

    return logger


def get_correlation_id() -> str:
    """Generate a correlation ID for tracing one claim analysis."""
    return str(uuid.uuid4())


# Configure on module import
configure_structured_logging()


# Export for convenience
__all__ = [
    "get_structured_logger",
    "get_correlation_id",
    "configure_structured_logging",
]
