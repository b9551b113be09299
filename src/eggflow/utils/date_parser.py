"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = (
    "today",
    "this-week",
    "this-month",
    "this-year",
    "last-week",
    "last-month",
    "last-year",
    "last-30-days",
)

_DAYS_AGO = re.compile(r"^(\d+)\s+days?\s+ago$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "15 Jan 2024") and relative ones:
    "today", "yesterday", "tomorrow", "N days ago", and "last/this/next"
    followed by "week", "month" or "year" (the first day of that period).

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    days_ago = _DAYS_AGO.match(date_str)
    if days_ago:
        return today - timedelta(days=int(days_ago.group(1)))

    offsets = {"last ": -1, "this ": 0, "next ": 1}
    for prefix, offset in offsets.items():
        if not date_str.startswith(prefix):
            continue
        period = date_str[len(prefix):]
        if period == "week":
            return today - timedelta(days=today.weekday()) + timedelta(weeks=offset)
        if period == "month":
            return today.replace(day=1) + relativedelta(months=offset)
        if period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=offset)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Current periods ("this-month" etc.) end today; previous periods end on
    their last day.

    Args:
        period: One of PERIODS
        today: Reference day (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()
    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    if period == "today":
        return (today, today)
    if period == "this-week":
        return (week_start, today)
    if period == "this-month":
        return (month_start, today)
    if period == "this-year":
        return (year_start, today)
    if period == "last-week":
        start_date = week_start - timedelta(weeks=1)
        return (start_date, start_date + timedelta(days=6))
    if period == "last-month":
        return (month_start - relativedelta(months=1), month_start - timedelta(days=1))
    if period == "last-year":
        return (year_start - relativedelta(years=1), year_start - timedelta(days=1))
    if period == "last-30-days":
        return (today - timedelta(days=30), today)

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
    )
