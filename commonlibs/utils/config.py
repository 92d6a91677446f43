"""
Configuration management
"""
from typing import Optional

import pytz
from pydantic import BaseModel, field_validator


# ============================================
# CONFIGURATION DEFAULTS
# ============================================

class ConfigDefaults:
    """Default configuration values as constants"""

    # Timezone (fixed; Korea Standard Time, UTC+9)
    TIMEZONE_DEFAULT = "Asia/Seoul"

    # Day boundaries
    END_OF_DAY_HOUR = 23
    END_OF_DAY_MINUTE = 59
    END_OF_DAY_SECOND = 59
    END_OF_DAY_MICROSECOND = 999_999

    # Logging defaults
    LOGGING_LEVEL_INFO = "INFO"
    LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ============================================
# CONFIGURATION MODELS
# ============================================

class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = ConfigDefaults.LOGGING_LEVEL_INFO
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ConfigDefaults.LOGGING_LEVELS:
            raise ValueError(f"level must be one of {ConfigDefaults.LOGGING_LEVELS}")
        return level


def get_timezone() -> pytz.BaseTzInfo:
    """
    Get the reference timezone used to interpret epoch values and
    timezone-less date strings.

    Returns:
        pytz timezone for Asia/Seoul
    """
    return pytz.timezone(ConfigDefaults.TIMEZONE_DEFAULT)
