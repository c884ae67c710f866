"""Intervals, range tokens and the time-selection variants of a chart query."""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum

logger = logging.getLogger(__name__)

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"
_DATE_TIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")


class PriceInterval(str, Enum):
    """Bucket width of each candle."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"

    def __str__(self) -> str:
        return self.value


class DateRange(str, Enum):
    """Relative window shorthand understood by the endpoint."""

    ONE_DAY = "1d"
    ONE_WEEK = "1wk"
    ONE_MONTH = "1mo"
    ONE_YEAR = "1y"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RangeSelection:
    range: DateRange


@dataclass(frozen=True)
class FixedDateSelection:
    """A single calendar day, from 00:00 to 23:59."""

    date: str


@dataclass(frozen=True)
class PeriodSelection:
    """From ``start`` at 00:00 to ``end`` at 23:59."""

    start: str
    end: str


TimeSelection = RangeSelection | FixedDateSelection | PeriodSelection


def as_date_string(value: str | date) -> str:
    """Normalize a date option to 'YYYY-MM-DD'. Strings are passed through untouched."""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


def to_unix_timestamp(value: str, tz: tzinfo | None = None) -> str:
    """Convert 'YYYY-MM-DD HH:MM' to Unix epoch seconds, as a string.

    The wall-clock time is interpreted in ``tz``, or in the host's local
    zone when ``tz`` is None. Anything that does not parse strictly
    (wrong layout, impossible calendar date) yields an empty string
    instead of an error.

    Args:
        value: Date and time to convert.
        tz: Zone the wall-clock time belongs to.

    Returns:
        Epoch seconds as a decimal string, or "" when ``value`` is malformed.
    """
    if not value:
        return ""
    if _DATE_TIME_PATTERN.fullmatch(value) is None:
        logger.warning(f"Ignoring malformed date {value!r}")
        return ""
    try:
        parsed = datetime.strptime(value, DATE_TIME_FORMAT)
        if tz is not None:
            parsed = parsed.replace(tzinfo=tz)
        return str(int(parsed.timestamp()))
    except (ValueError, OverflowError, OSError):
        logger.warning(f"Ignoring invalid date {value!r}")
        return ""
