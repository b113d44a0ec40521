"""
Centralized logging configuration for the contract builder.

This module provides standardized logging configuration using structlog
for all components. Composition, deployment and authoring code obtain their
loggers here so that step transitions and degradations share one format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Logs go to stderr so CLI output on stdout stays machine readable
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
        initial_values: Context bound to every event of this logger

    Returns:
        Configured structlog logger instance
    """
    # Stays a lazy proxy until first use, so module-level loggers pick up
    # configure_logging() even when created at import time
    return structlog.get_logger(name, **initial_values)


def get_deployment_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger specifically configured for deployment sessions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for step transitions
    """
    return get_logger(
        name,
        subsystem="deployment",
        audit_trail=True
    )


def get_assembler_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the composition subsystem."""
    return get_logger(name, subsystem="assembler")


def log_step_transition(
    logger: FilteringBoundLogger,
    session_id: str,
    step_id: str,
    from_status: str,
    to_status: str,
    network: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a deployment step status change with standardized format.

    Args:
        logger: Structlog logger instance
        session_id: Identifier of the deployment session
        step_id: Step whose status changed
        from_status: Previous step status
        to_status: New step status
        network: Target network key
        context: Additional context data
    """
    bound_logger = logger.bind(
        session_id=session_id,
        step_id=step_id,
        from_status=from_status,
        to_status=to_status,
        network=network,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if to_status == "error":
        bound_logger.warning("Step transition")
    else:
        bound_logger.info("Step transition")
