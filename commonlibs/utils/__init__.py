"""
Utility modules - Shared utilities for the application

This module should NEVER import from commonlibs.core other than its
exceptions, to keep the import hierarchy one-directional.
"""

# ============================================
# CONFIGURATION
# ============================================
from .config import ConfigDefaults, LoggingConfig, get_timezone

# ============================================
# LOGGING
# ============================================
from .logger import configure_logging, setup_logger, setup_logger_from_config

# ============================================
# DATE/TIME
# ============================================
from .datetime import (
    DateFormat,
    SUPPORTED_FORMATS,
    SUPPORTED_PATTERNS,
    KOREA_ZONE,
    get_start_of_day,
    get_end_of_day,
    get_day_range,
    normalize_datetime_start,
    normalize_datetime_end,
    from_epoch_millis,
    to_epoch_millis
)

__all__ = [
    "ConfigDefaults",
    "LoggingConfig",
    "get_timezone",
    "configure_logging",
    "setup_logger",
    "setup_logger_from_config",
    "DateFormat",
    "SUPPORTED_FORMATS",
    "SUPPORTED_PATTERNS",
    "KOREA_ZONE",
    "get_start_of_day",
    "get_end_of_day",
    "get_day_range",
    "normalize_datetime_start",
    "normalize_datetime_end",
    "from_epoch_millis",
    "to_epoch_millis",
]
