"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from lifetrack.domain.date_ranges import get_date_ranges


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "this week", "last month", etc.

    Weeks start on Monday, so "this week" is the Monday on or before today.

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
    ranges = get_date_ranges(today)

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this week": ranges.start_of_week,
        "last week": ranges.start_of_week - timedelta(days=7),
        "next week": ranges.start_of_week + timedelta(days=7),
        "this month": ranges.start_of_month,
        "last month": ranges.start_of_month - relativedelta(months=1),
        "next month": ranges.start_of_month + relativedelta(months=1),
        "end of month": ranges.end_of_month,
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a listing period.

    Args:
        period: Period string (this-week, this-month, this-year, last-week, last-month)
        today: Reference day (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()
    ranges = get_date_ranges(today)

    if period == "this-week":
        return ranges.start_of_week, ranges.start_of_week + timedelta(days=6)

    elif period == "this-month":
        return ranges.start_of_month, ranges.end_of_month

    elif period == "this-year":
        return today.replace(month=1, day=1), today.replace(month=12, day=31)

    elif period == "last-week":
        start_date = ranges.start_of_week - timedelta(days=7)
        return start_date, start_date + timedelta(days=6)

    elif period == "last-month":
        # Last day of last month is the day before the first of this month
        end_date = ranges.start_of_month - timedelta(days=1)
        return end_date.replace(day=1), end_date

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: this-week, this-month, "
            "this-year, last-week, last-month"
        )
