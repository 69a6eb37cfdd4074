"""Calendar month arithmetic.

Months are represented by the date of their first day. All iteration is
driven by a precomputed month count, so sequences are finite by
construction and year rollover is plain integer arithmetic.
"""

import calendar
from collections.abc import Iterator
from datetime import date


def month_start(d: date) -> date:
    """Truncate a date to the first day of its month."""
    return d.replace(day=1)


def month_index(d: date) -> int:
    """Absolute month number (year * 12 + zero-based month)."""
    return d.year * 12 + d.month - 1


def add_months(d: date, months: int) -> date:
    """Shift a date by whole calendar months.

    The day is clamped to the last day of the target month
    (Jan 31 + 1 month = Feb 28/29).
    """
    index = month_index(d) + months
    year, month0 = divmod(index, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(d.day, last_day))


def months_in_range(start: date, end: date) -> int:
    """Number of calendar months from start's month to end's month, inclusive.

    Returns 0 when start's month is after end's month.
    """
    return max(0, month_index(end) - month_index(start) + 1)


def iterate_months(start: date, end: date) -> Iterator[date]:
    """Yield the first day of every month from start to end, inclusive."""
    first = month_start(start)
    for offset in range(months_in_range(start, end)):
        yield add_months(first, offset)


def complete_months_between(start: date, end: date) -> int:
    """Whole months elapsed between two dates, fractional part dropped.

    Mar 15 -> May 14 is 1 month, Mar 15 -> May 15 is 2 months. When the
    start day does not exist in the end month, reaching the last day of
    that month counts as a full month (Jan 31 -> Feb 28 is 1 month).
    Negative when end is before start.
    """
    if end < start:
        return -complete_months_between(end, start)
    months = month_index(end) - month_index(start)
    if months > 0 and add_months(start, months) > end:
        months -= 1
    return months


def format_period(year: int, month: int) -> str:
    """Format a month as 'YYYY-MM'."""
    return f"{year:04d}-{month:02d}"


def parse_period(value: str) -> date:
    """Parse 'YYYY-MM' into the first day of that month.

    Raises:
        ValueError: If the string is not a valid year-month.
    """
    try:
        year_str, month_str = value.strip().split("-")
        return date(int(year_str), int(month_str), 1)
    except ValueError as e:
        raise ValueError(f"Invalid period '{value}', expected YYYY-MM") from e
