"""
Date/Time Utilities

Day-boundary computation in Korea Standard Time and datetime helpers.
"""

from .formats import DateFormat, SUPPORTED_FORMATS, SUPPORTED_PATTERNS
from .day_boundary import (
    KOREA_ZONE,
    get_start_of_day,
    get_end_of_day,
    get_day_range
)
from .datetime_helpers import (
    normalize_datetime_start,
    normalize_datetime_end,
    from_epoch_millis,
    to_epoch_millis
)

__all__ = [
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
