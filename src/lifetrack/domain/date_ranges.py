"""Window boundaries for dashboard aggregation."""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from lifetrack.domain.entities import DateRanges, TrendPeriod


def _as_date(now: Optional[Union[datetime, date]]) -> date:
    if now is None:
        return datetime.now().date()
    if isinstance(now, datetime):
        return now.date()
    return now


def get_date_ranges(now: Optional[Union[datetime, date]] = None) -> DateRanges:
    """Compute today, start of week, start of month and end of month.

    Weeks start on Monday: a Sunday steps back 6 days, any other day steps
    back ``isoweekday - 1`` days.

    Args:
        now: Current instant (defaults to the local wall clock)

    Returns:
        DateRanges for the calendar day containing ``now``
    """
    today = _as_date(now)

    weekday = today.isoweekday()
    days_back = 6 if weekday == 7 else weekday - 1
    start_of_week = today - timedelta(days=days_back)

    start_of_month = today.replace(day=1)
    end_of_month = start_of_month + relativedelta(months=1) - timedelta(days=1)

    return DateRanges(
        today=today,
        start_of_week=start_of_week,
        start_of_month=start_of_month,
        end_of_month=end_of_month,
    )


def get_end_of_week(ranges: DateRanges) -> date:
    """Return the Sunday closing the week of ``ranges``."""
    return ranges.start_of_week + timedelta(days=6)


def parse_trend_period(period: Optional[str]) -> TrendPeriod:
    """Resolve a trend period name, falling back to month.

    Unrecognized input is not an error; it silently becomes ``month``.
    """
    if isinstance(period, TrendPeriod):
        return period
    if not isinstance(period, str):
        return TrendPeriod.MONTH
    try:
        return TrendPeriod(period.strip().lower())
    except ValueError:
        return TrendPeriod.MONTH


def get_trend_range(
    period: Optional[str], now: Optional[Union[datetime, date]] = None
) -> tuple[TrendPeriod, date, date]:
    """Get the inclusive date range covered by a chart period.

    Args:
        period: "week" (the last 7 days, today included), "month" or
            "year"; anything else means "month"
        now: Current instant (defaults to the local wall clock)

    Returns:
        Tuple of (resolved period, start_date, end_date)
    """
    resolved = parse_trend_period(period)
    today = _as_date(now)

    if resolved == TrendPeriod.WEEK:
        return resolved, today - timedelta(days=6), today

    if resolved == TrendPeriod.YEAR:
        return resolved, date(today.year, 1, 1), date(today.year, 12, 31)

    ranges = get_date_ranges(today)
    return resolved, ranges.start_of_month, ranges.end_of_month
