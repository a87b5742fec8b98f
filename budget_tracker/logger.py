"""
Structured Logging

DESIGN DECISION: The engine logs through structlog on top of stdlib logging.
The host application decides where records go (handlers); this module only
decides their shape (JSON with ISO timestamps) and the package log level.

Logging never raises into ledger operations.
"""

import logging
from typing import Optional

import structlog


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

PACKAGE_LOGGER = "budget_tracker"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set the package log level.

    Args:
        level: Standard level name. Defaults to the configured
               log_level setting.
    """
    if level is None:
        from budget_tracker.config import get_settings
        level = get_settings().log_level
    logging.getLogger(PACKAGE_LOGGER).setLevel(level.upper())


def get_logger(name: str = PACKAGE_LOGGER) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a stdlib logger name."""
    return structlog.get_logger(name)
