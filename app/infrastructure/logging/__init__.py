"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the IRC notification bridge using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_delivery_context(): Context manager for per-message logging

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import bind_delivery_context

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_delivery_context",
]
