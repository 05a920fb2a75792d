"""Date parsing and calendar period utilities.

None of these helpers read the clock except ``parse_date``, which resolves
relative words against an explicit ``today`` when one is given.
"""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday", "tomorrow", "this month",
    "last month", "this year" and "last year".

    Args:
        date_str: Date string in various formats
        today: Reference date for relative words (defaults to the current date)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_bounds(reference: date, months_back: int = 0) -> tuple[date, date]:
    """Return the first and last day of a calendar month.

    Args:
        reference: Any date inside the anchor month
        months_back: How many months before the anchor month to go

    Returns:
        Tuple of (first_day, last_day), both inclusive
    """
    start = date(reference.year, reference.month, 1) - relativedelta(months=months_back)
    end = start + relativedelta(months=1) - timedelta(days=1)
    return start, end


def month_key(month_start: date) -> str:
    """Format a month as YYYY-MM."""
    return month_start.strftime("%Y-%m")


def get_period_range(period: str, now: date) -> tuple[date, date]:
    """Get start and end dates for a dashboard period ending at ``now``.

    Args:
        period: One of week, month, year
        now: Reference date, used as the inclusive end of the range

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date(now.year, now.month, now.day)

    if period == "week":
        return (today - timedelta(days=7), today)
    elif period == "month":
        return (today.replace(day=1), today)
    elif period == "year":
        return (today.replace(month=1, day=1), today)
    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: week, month, year")
