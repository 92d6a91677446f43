"""
DateTime Helper Utilities

Centralized datetime manipulation functions
"""
from datetime import date, datetime, time, timedelta, tzinfo

import pytz

from ..config import ConfigDefaults

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)

END_OF_DAY = time(
    ConfigDefaults.END_OF_DAY_HOUR,
    ConfigDefaults.END_OF_DAY_MINUTE,
    ConfigDefaults.END_OF_DAY_SECOND,
    ConfigDefaults.END_OF_DAY_MICROSECOND,
)


def _localize(naive: datetime, tz: tzinfo) -> datetime:
    # pytz zones need localize() to pick the offset in effect on that date
    if hasattr(tz, 'localize'):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def at_start_of_day(day: date, tz: tzinfo) -> datetime:
    """Return ``day`` at 00:00:00.000000 in ``tz``."""
    return _localize(datetime.combine(day, time.min), tz)


def at_end_of_day(day: date, tz: tzinfo) -> datetime:
    """Return ``day`` at 23:59:59.999999 in ``tz``."""
    return _localize(datetime.combine(day, END_OF_DAY), tz)


def normalize_datetime_start(dt: datetime) -> datetime:
    """
    Normalize datetime to start of day (00:00:00.000000).

    Preserves timezone information.

    Args:
        dt: Datetime to normalize

    Returns:
        Datetime normalized to start of day
    """
    if dt.tzinfo is None:
        return datetime.combine(dt.date(), time.min)
    return at_start_of_day(dt.date(), dt.tzinfo)


def normalize_datetime_end(dt: datetime) -> datetime:
    """
    Normalize datetime to end of day (23:59:59.999999).

    Preserves timezone information.

    Args:
        dt: Datetime to normalize

    Returns:
        Datetime normalized to end of day
    """
    if dt.tzinfo is None:
        return datetime.combine(dt.date(), END_OF_DAY)
    return at_end_of_day(dt.date(), dt.tzinfo)


def from_epoch_millis(epoch_millis: int, tz: tzinfo) -> datetime:
    """
    Convert epoch milliseconds to an aware datetime in ``tz``.

    Integer arithmetic only, so no float rounding on large values.

    Raises:
        OverflowError: If the value is outside the datetime range
    """
    return (EPOCH + timedelta(milliseconds=epoch_millis)).astimezone(tz)


def to_epoch_millis(dt: datetime) -> int:
    """
    Convert an aware datetime to epoch milliseconds (sub-millisecond
    precision is truncated toward negative infinity).

    Raises:
        ValueError: If ``dt`` is naive
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError("to_epoch_millis requires a timezone-aware datetime")
    return (dt - EPOCH) // timedelta(milliseconds=1)
