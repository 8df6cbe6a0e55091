"""Structlog configuration and logger setup.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Rendering is console output outside production and one JSON object per
line in production. Under pytest everything is silenced.
"""

import inspect
import logging
import sys
from types import ModuleType
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings
from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)

APP_NAME = "irc-notify-bridge"
MAX_VALUE_LENGTH = 1000
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, settings.GIT_SHA),
        mask_sensitive_data(),
        truncate_large_values(max_length=MAX_VALUE_LENGTH),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        is_production: JSON output when true. Defaults to settings.is_production.

    Returns:
        A logger from the freshly configured factory.
    """
    if _is_test_environment():
        processors: List[Any] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
        logging.root.setLevel(SILENT_LEVEL)
    else:
        prod_mode = settings.is_production if is_production is None else is_production
        processors = _build_processors(prod_mode)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def _calling_module(depth: int = 2) -> Optional[ModuleType]:
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    return inspect.getmodule(frame)


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds `component` (last dotted segment) and `module_path`, e.g. in
    modules/notify/consumer.py the context is
    {"component": "consumer", "module_path": "modules.notify.consumer"}.
    """
    module = _calling_module()
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
