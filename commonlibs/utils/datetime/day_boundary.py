"""
Day Boundary Utilities

Start-of-day / end-of-day instants in Korea Standard Time for either an
epoch-millisecond value or a date string.

    >>> get_start_of_day("2025-08-01")
    datetime.datetime(2025, 8, 1, 0, 0, tzinfo=<DstTzInfo 'Asia/Seoul' KST+9:00:00 STD>)
    >>> get_end_of_day(1754006400000)
    datetime.datetime(2025, 8, 1, 23, 59, 59, 999999, tzinfo=<DstTzInfo 'Asia/Seoul' KST+9:00:00 STD>)
"""
from datetime import date, datetime
from typing import Callable, Optional, Tuple, Union

import structlog

from ...core.exceptions import InvalidArgumentError
from ..config import get_timezone
from .datetime_helpers import at_end_of_day, at_start_of_day, from_epoch_millis
from .formats import SUPPORTED_FORMATS, SUPPORTED_PATTERNS, DateFormat

logger = structlog.get_logger(__name__)

KOREA_ZONE = get_timezone()

TimeValue = Union[int, str]

# ASCII control characters and space only; U+3000 and other Unicode spaces are kept
TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def get_start_of_day(value: Optional[TimeValue]) -> datetime:
    """
    Start of the day containing ``value`` (yyyy-MM-dd 00:00:00.000000 KST).

    Args:
        value: Epoch milliseconds, or a date string in one of
            ``SUPPORTED_PATTERNS``

    Returns:
        Timezone-aware datetime in Asia/Seoul

    Raises:
        InvalidArgumentError: If ``value`` is None, blank, of another type,
            or cannot be interpreted
    """
    return _localize_boundary(at_start_of_day, _resolve_date(value))


def get_end_of_day(value: Optional[TimeValue]) -> datetime:
    """
    End of the day containing ``value`` (yyyy-MM-dd 23:59:59.999999 KST).

    Same inputs and errors as :func:`get_start_of_day`.
    """
    return _localize_boundary(at_end_of_day, _resolve_date(value))


def get_day_range(value: Optional[TimeValue]) -> Tuple[datetime, datetime]:
    """Return ``(start, end)`` of the day containing ``value``."""
    day = _resolve_date(value)
    return _localize_boundary(at_start_of_day, day), _localize_boundary(at_end_of_day, day)


def _resolve_date(value: Optional[TimeValue]) -> date:
    """Calendar date in KST for an epoch value or a date string."""
    if value is None:
        raise InvalidArgumentError("value parameter cannot be None.")

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid timestamp value: {value!r}")

    if isinstance(value, int):
        return _date_from_epoch_millis(value)

    if isinstance(value, str):
        return _date_from_string(value)

    raise InvalidArgumentError(
        f"Unsupported value type: {type(value).__name__} (expected int or str)"
    )


def _date_from_epoch_millis(epoch_millis: int) -> date:
    try:
        return from_epoch_millis(epoch_millis, KOREA_ZONE).date()
    except (OverflowError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid timestamp value: {epoch_millis}") from e


def _trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def _is_valid_time_string(text: str) -> bool:
    return bool(text and _trim(text))


def _date_from_string(text: str) -> date:
    """
    Try each supported format in order; the first that parses wins.
    """
    if not _is_valid_time_string(text):
        raise InvalidArgumentError("time string parameter cannot be None or empty.")

    trimmed = _trim(text)
    last_error: Optional[Exception] = None

    for fmt in SUPPORTED_FORMATS:
        try:
            return _parse_to_date(trimmed, fmt)
        except (ValueError, OverflowError) as e:
            last_error = e
            logger.debug(f"'{trimmed}' rejected by {fmt.pattern}: {e}")

    logger.warning(f"Unsupported date format: '{trimmed}'")
    raise InvalidArgumentError(
        f"Unsupported date format. [input: {trimmed}, "
        f"supported formats: {', '.join(SUPPORTED_PATTERNS)}]"
    ) from last_error


def _parse_to_date(text: str, fmt: DateFormat) -> date:
    """
    Parse ``text`` with ``fmt`` and return its calendar date.

    Formats with a time of day are localized to KST first so string and
    epoch inputs share one timezone interpretation.
    """
    if fmt.has_time:
        return KOREA_ZONE.localize(fmt.parse(text)).date()
    return fmt.parse_date(text)


def _localize_boundary(builder: Callable[..., datetime], day: date) -> datetime:
    try:
        return builder(day, KOREA_ZONE)
    except OverflowError as e:
        raise InvalidArgumentError(f"Date out of supported range: {day}") from e
