"""
Accepted textual date/time formats

Order matters: the day-boundary functions try each entry in sequence and
keep the first one that parses.
"""
import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Pattern, Tuple


@dataclass(frozen=True)
class DateFormat:
    """
    One accepted input format.

    Attributes:
        pattern: Human-readable token pattern (shown in error messages)
        shape: Regex the whole input must match. Named groups ``year``,
            ``month`` and ``day`` are required; ``hour``, ``minute``,
            ``second`` and ``millis`` are read when present.
        has_time: Whether the format carries a time-of-day component
    """
    pattern: str
    shape: Pattern[str]
    has_time: bool = False

    def parse(self, text: str) -> datetime:
        """
        Parse ``text`` into a naive local datetime.

        Raises:
            ValueError: If ``text`` does not match this format or names
                an impossible date/time
            OverflowError: If a 24:00:00 rollover passes year 9999
        """
        match = self.shape.fullmatch(text)
        if match is None:
            raise ValueError(f"'{text}' does not match {self.pattern}")

        fields = match.groupdict()
        year = int(fields["year"])
        month = int(fields["month"])
        day = int(fields["day"])

        # Day 29-31 past the end of the month resolves to the month's last day
        if 1 <= month <= 12 and 28 < day <= 31:
            day = min(day, calendar.monthrange(year, month)[1])

        hour = int(fields.get("hour") or 0)
        minute = int(fields.get("minute") or 0)
        second = int(fields.get("second") or 0)
        millis = int(fields.get("millis") or 0)

        # Exactly 24:00:00(.000) is midnight of the following day
        rollover = self.has_time and hour == 24 and minute == second == millis == 0
        if rollover:
            hour = 0

        parsed = datetime(year, month, day, hour, minute, second, millis * 1000)
        return parsed + timedelta(days=1) if rollover else parsed

    def parse_date(self, text: str) -> date:
        """Parse ``text`` and keep only the calendar date."""
        return self.parse(text).date()


_TIME = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"


def _shape(separator: str, time_part: str = "") -> Pattern[str]:
    sep = re.escape(separator)
    return re.compile(
        rf"(?P<year>\d{{4}}){sep}(?P<month>\d{{2}}){sep}(?P<day>\d{{2}})" + time_part,
        re.ASCII,
    )


SUPPORTED_FORMATS: Tuple[DateFormat, ...] = (
    DateFormat("yyyy-MM-dd HH:mm:ss", _shape("-", " " + _TIME), has_time=True),
    DateFormat("yyyy-MM-dd'T'HH:mm:ss", _shape("-", "T" + _TIME), has_time=True),
    DateFormat("yyyy-MM-dd'T'HH:mm:ss.SSS", _shape("-", "T" + _TIME + r"\.(?P<millis>\d{3})"), has_time=True),
    DateFormat("yyyy-MM-dd", _shape("-")),
    DateFormat("yyyy/MM/dd", _shape("/")),
    DateFormat("yyyy.MM.dd", _shape(".")),
)

SUPPORTED_PATTERNS: Tuple[str, ...] = tuple(fmt.pattern for fmt in SUPPORTED_FORMATS)
