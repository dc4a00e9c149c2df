# 📄 File: garden_calendar/shared/utils/dates.py

# 🧭 Purpose (Layman Explanation):
# Small helpers that read and write calendar dates like "2025-03-15" exactly as written,
# so a planting day never shifts by one because of time zones.

# 🧪 Purpose (Technical Summary):
# Calendar-date normalization: component-wise YYYY-MM-DD parsing (no timezone-aware
# parsing of date-only strings), zero-padded formatting, month lengths, and
# next-occurrence arithmetic for a month/day pair.

# 🔗 Dependencies:
# - datetime, calendar, re (standard library)
# - garden_calendar.shared.core.exceptions (MalformedStoredDateError)

# 🔄 Connected Modules / Calls From:
# PlantingDateResolver (year resolution), MonthEventAggregator (month filtering,
# day markers, agenda), API schemas (query parameter validation)

import calendar
import re
from datetime import date, datetime
from typing import Callable, Optional, Union

from garden_calendar.shared.core.exceptions import MalformedStoredDateError

ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

# A leap year, so February allows the 29th when validating a bare month/day.
_LEAP_REFERENCE_YEAR = 2000

DateLike = Union[date, datetime, str]
Clock = Callable[[], datetime]


def parse_iso_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD literal into a date by its components.

    Raises:
        MalformedStoredDateError: if the literal is not exactly YYYY-MM-DD or
            names a day that does not exist (2024-13-40, 2023-02-29).
    """
    if not isinstance(value, str):
        raise MalformedStoredDateError(value)

    match = ISO_DATE_PATTERN.match(value)
    if not match:
        raise MalformedStoredDateError(value)

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedStoredDateError(value) from e


def try_parse_iso_date(value: str) -> Optional[date]:
    """Like parse_iso_date, but returns None instead of raising."""
    try:
        return parse_iso_date(value)
    except MalformedStoredDateError:
        return None


def format_iso_date(value: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def to_calendar_date(value: DateLike) -> date:
    """
    Normalize a date, datetime or ISO string to a calendar date.

    A datetime contributes its own wall-clock date; no timezone conversion is
    applied, so the caller's clock decides what "today" is.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def days_in_month(month: int, year: Optional[int] = None) -> int:
    """Number of days in a month; February counts 29 when no year is given."""
    return calendar.monthrange(year if year is not None else _LEAP_REFERENCE_YEAR, month)[1]


def is_valid_month_day(month: int, day: int) -> bool:
    """True when month/day exists in at least one year (02-29 included)."""
    return 1 <= month <= 12 and 1 <= day <= days_in_month(month)


def next_occurrence(month: int, day: int, today: DateLike) -> date:
    """
    First date strictly after `today` that falls on month/day.

    A month/day equal to today counts as already passed and lands next year.
    February 29th resolves to the next leap year that has not passed yet.
    """
    if not is_valid_month_day(month, day):
        raise ValueError(f"{month:02d}-{day:02d} is not a calendar month/day")

    reference = to_calendar_date(today)
    year = reference.year
    while True:
        if day <= days_in_month(month, year):
            candidate = date(year, month, day)
            if candidate > reference:
                return candidate
        year += 1


def system_clock() -> datetime:
    """Server wall-clock time, the default Clock."""
    return datetime.now()
