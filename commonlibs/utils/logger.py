"""
Logging configuration
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from .config import ConfigDefaults, LoggingConfig


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        # Ensure log directory exists
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    return handlers


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure stdlib logging and structlog from a LoggingConfig.
    """
    log_level = getattr(logging, config.level)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=_build_handlers(config.file)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False
    )


def setup_logger(
    name: Optional[str] = None,
    level: str = ConfigDefaults.LOGGING_LEVEL_INFO,
    log_file: Optional[str] = None
) -> structlog.BoundLogger:
    """
    Set up structured logging and return a logger bound to ``name``.

    Raises:
        pydantic.ValidationError: If ``level`` is not a logging level name
    """
    configure_logging(LoggingConfig(level=level, file=log_file))
    return structlog.get_logger(name)


def setup_logger_from_config(
    name: Optional[str] = None,
    config: Optional[LoggingConfig] = None
) -> structlog.BoundLogger:
    """Set up structured logging from a LoggingConfig (defaults if omitted)."""
    configure_logging(config or LoggingConfig())
    return structlog.get_logger(name)
