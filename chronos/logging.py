"""Chronos structured logging module."""

from __future__ import annotations

import inspect
import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

LOGGER_NAME = "chronos"


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _configure_structlog() -> BoundLogger:
    """Install the structlog pipeline unless the host already has one."""
    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.dev.ConsoleRenderer(),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    # Suppress all logging during tests
    if _is_test_environment():
        logging.getLogger(LOGGER_NAME).setLevel(logging.CRITICAL + 1)

    return structlog.stdlib.get_logger(LOGGER_NAME)


def configure_logging(level: str | None = None) -> BoundLogger:
    """Apply the log level to the "chronos" logger hierarchy.

    Args:
        level: Log level name. Defaults to the configured settings value.
            Ignored under pytest, where chronos logging stays muted.

    Returns:
        The root chronos logger.
    """
    if not _is_test_environment():
        if level is None:
            from chronos.config import get_settings

            level = get_settings().log_level
        logging.getLogger(LOGGER_NAME).setLevel(getattr(logging, level.upper(), logging.WARNING))

    return _configure_structlog()


logger: BoundLogger = _configure_structlog()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context."""
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    module = inspect.getmodule(frame)

    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        context = {
            "component": parts[-1],
            "module_path": module_name,
        }
        return structlog.stdlib.get_logger(module_name).bind(**context)

    return logger.bind(component="unknown")
