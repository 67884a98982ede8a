"""Structured logging infrastructure.

Centralized logging configuration and utilities for the location mapper
using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_run_context(): Context manager for run-scoped logging
    - add_app_info(): Processor to add app name/version

Example:
    from location_mapper.infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_run_context,
    )

    configure_logging()

    logger = get_module_logger()
    with bind_run_context():
        logger.info("run_started")
"""

from location_mapper.infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from location_mapper.infrastructure.logging.context import bind_run_context
from location_mapper.infrastructure.logging.formatters import add_app_info

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_run_context",
    "add_app_info",
]
