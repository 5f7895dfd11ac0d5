"""Dashboard domain service."""

import logging
from datetime import datetime
from typing import Callable, Optional

from lifetrack.database.base import Database
from lifetrack.domain.aggregation import AggregationService
from lifetrack.domain.date_ranges import get_date_ranges, get_end_of_week, get_trend_range
from lifetrack.domain.entities import (
    ChartData,
    DashboardData,
    PeriodTotals,
    PeriodType,
    QuickStats,
    RecentActivities,
    WeeklyProgress,
)
from lifetrack.domain.errors import RetrievalError
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.weekly_progress import compute_weekly_progress

logger = logging.getLogger(__name__)

RECENT_LOG_LIMIT = 5


class DashboardService:
    """Service composing dashboard payloads from aggregation results.

    Nothing is cached: each call recomputes every figure from the record
    store. A retrieval failure in any query fails the whole call.
    """

    def __init__(self, db: Database, clock: Optional[Callable[[], datetime]] = None):
        """Initialize dashboard service.

        Args:
            db: Database instance
            clock: Zero-argument callable returning the current instant
                (defaults to datetime.now)
        """
        self.db = db
        self.clock = clock or datetime.now
        self.aggregation = AggregationService(db)

    def get_dashboard(self, user_id: int) -> DashboardData:
        """Build the full dashboard for a user."""
        ranges = get_date_ranges(self.clock())
        try:
            summary = self.aggregation.period_totals(user_id)
            daily = self.aggregation.period_totals(user_id, ranges.today)
            weekly = self.aggregation.period_totals(user_id, ranges.start_of_week)
            monthly = self.aggregation.period_totals(user_id, ranges.start_of_month)

            daily_logs = self.db.find_matching(
                user_id, RecordFilter(kind=RecordKind.DAILY_LOG), limit=RECENT_LOG_LIMIT
            )
            today_meals = self.db.find_matching(
                user_id,
                RecordFilter(
                    kind=RecordKind.MEAL_PLAN,
                    start_date=ranges.today,
                    end_date=ranges.today,
                ),
                newest_first=False,
            )
            weekly_meal_count = self.aggregation.count(
                user_id, RecordKind.MEAL_PLAN, ranges.start_of_week
            )

            top_expense_categories = self.aggregation.top_expense_categories(user_id)
            top_income_sources = self.aggregation.top_income_sources(user_id)
        except RetrievalError:
            logger.exception("Dashboard data failed for user %s", user_id)
            raise

        dashboard = DashboardData(
            summary=summary,
            daily=daily,
            weekly=weekly,
            monthly=monthly,
            recent_activities=RecentActivities(
                daily_logs=tuple(daily_logs),
                today_meals=tuple(today_meals),
                weekly_meal_count=weekly_meal_count,
            ),
            top_expense_categories=top_expense_categories,
            top_income_sources=top_income_sources,
        )
        logger.debug("Dashboard for user %s as of %s: %s", user_id, ranges.today, dashboard)
        return dashboard

    def get_summary(self, user_id: int) -> PeriodTotals:
        """All-time income, expenses and balance."""
        try:
            return self.aggregation.period_totals(user_id)
        except RetrievalError:
            logger.exception("Dashboard summary failed for user %s", user_id)
            raise

    def get_charts(self, user_id: int, period: Optional[str] = None) -> ChartData:
        """Daily trends and full breakdowns for a chart period.

        Args:
            user_id: Owning user
            period: "week", "month" or "year"; anything else means "month"
        """
        resolved, start_date, end_date = get_trend_range(period, self.clock())
        try:
            charts = ChartData(
                period=resolved,
                start_date=start_date,
                end_date=end_date,
                income_trend=self.aggregation.trend(
                    user_id, RecordKind.INCOME, start_date, end_date
                ),
                expense_trend=self.aggregation.trend(
                    user_id, RecordKind.EXPENSE, start_date, end_date
                ),
                income_by_source=self.aggregation.top_income_sources(
                    user_id, limit=None, start_date=start_date, end_date=end_date
                ),
                expenses_by_category=self.aggregation.top_expense_categories(
                    user_id, limit=None, start_date=start_date, end_date=end_date
                ),
            )
        except RetrievalError:
            logger.exception("Dashboard charts failed for user %s", user_id)
            raise

        logger.debug(
            "Charts for user %s (%s, %s to %s)", user_id, resolved.value, start_date, end_date
        )
        return charts

    def get_quick_stats(self, user_id: int) -> QuickStats:
        """Record counts, overall and for today."""
        ranges = get_date_ranges(self.clock())
        try:
            return QuickStats(
                total_incomes=self.aggregation.count(user_id, RecordKind.INCOME),
                total_expenses=self.aggregation.count(user_id, RecordKind.EXPENSE),
                total_daily_logs=self.aggregation.count(user_id, RecordKind.DAILY_LOG),
                total_meal_plans=self.aggregation.count(user_id, RecordKind.MEAL_PLAN),
                today_incomes=self.aggregation.count(
                    user_id, RecordKind.INCOME, ranges.today
                ),
                today_expenses=self.aggregation.count(
                    user_id, RecordKind.EXPENSE, ranges.today
                ),
            )
        except RetrievalError:
            logger.exception("Quick stats failed for user %s", user_id)
            raise

    def get_weekly_progress(
        self, user_id: int, current_week_only: bool = False
    ) -> WeeklyProgress:
        """Compare weekly fixed expenses with income received this week.

        Args:
            user_id: Owning user
            current_week_only: Only count weekly fixed expenses whose period
                overlaps the current Monday to Sunday week. By default every
                weekly fixed expense counts, whatever its period.
        """
        ranges = get_date_ranges(self.clock())
        overlaps = None
        if current_week_only:
            overlaps = (ranges.start_of_week, get_end_of_week(ranges))

        try:
            fixed_weekly_expenses = self.aggregation.fixed_expense_total(
                user_id, period_type=PeriodType.WEEKLY, overlaps=overlaps
            )
            weekly_income = self.aggregation.sum_amount(
                user_id, RecordKind.INCOME, ranges.start_of_week
            )
        except RetrievalError:
            logger.exception("Weekly progress failed for user %s", user_id)
            raise

        progress = compute_weekly_progress(fixed_weekly_expenses, weekly_income)
        logger.debug("Weekly progress for user %s: %s", user_id, progress)
        return progress
