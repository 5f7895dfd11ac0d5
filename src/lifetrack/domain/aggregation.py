"""Aggregation domain service.

Sums, counts, breakdowns and trend series computed from the record store.
All results are read-only views over the stored records.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional

from lifetrack.database.base import Database
from lifetrack.domain.entities import GroupTotal, PeriodTotals, TrendPoint
from lifetrack.domain.filters import GroupKey, RecordFilter, RecordKind

TOP_N = 5


def rank_groups(
    pairs: Iterable[tuple[Any, Decimal]], limit: Optional[int] = None
) -> tuple[GroupTotal, ...]:
    """Sort grouped sums descending by total, optionally keeping the first ``limit``.

    The sort is stable, so equal totals keep the order the store returned
    them in (group value ascending).
    """
    groups = [
        GroupTotal(key="" if key is None else str(key), total=total)
        for key, total in pairs
    ]
    groups.sort(key=lambda group: group.total, reverse=True)
    if limit is not None:
        groups = groups[:limit]
    return tuple(groups)


class AggregationService:
    """Service for computing sums and breakdowns over one user's records."""

    def __init__(self, db: Database):
        """Initialize aggregation service.

        Args:
            db: Database instance
        """
        self.db = db

    def sum_amount(
        self,
        user_id: int,
        kind: RecordKind,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Decimal:
        """Sum amounts of one kind on or after ``start_date``.

        Omitting both dates sums all records. Returns 0 when nothing matches.
        """
        record_filter = RecordFilter(kind=kind, start_date=start_date, end_date=end_date)
        pairs = self.db.group_sum(user_id, record_filter)
        return pairs[0][1] if pairs else Decimal("0.00")

    def period_totals(self, user_id: int, start_date: Optional[date] = None) -> PeriodTotals:
        """Income and expense totals for records dated on or after ``start_date``."""
        return PeriodTotals(
            income=self.sum_amount(user_id, RecordKind.INCOME, start_date),
            expenses=self.sum_amount(user_id, RecordKind.EXPENSE, start_date),
        )

    def top_expense_categories(
        self,
        user_id: int,
        limit: Optional[int] = TOP_N,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple[GroupTotal, ...]:
        """Expense sums per category, largest first."""
        record_filter = RecordFilter(
            kind=RecordKind.EXPENSE, start_date=start_date, end_date=end_date
        )
        return rank_groups(
            self.db.group_sum(user_id, record_filter, GroupKey.CATEGORY), limit
        )

    def top_income_sources(
        self,
        user_id: int,
        limit: Optional[int] = TOP_N,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple[GroupTotal, ...]:
        """Income sums per source, largest first."""
        record_filter = RecordFilter(
            kind=RecordKind.INCOME, start_date=start_date, end_date=end_date
        )
        return rank_groups(
            self.db.group_sum(user_id, record_filter, GroupKey.SOURCE), limit
        )

    def count(self, user_id: int, kind: RecordKind, start_date: Optional[date] = None) -> int:
        """Count records of one kind, optionally only those on or after ``start_date``."""
        return self.db.count_matching(user_id, RecordFilter(kind=kind, start_date=start_date))

    def trend(
        self, user_id: int, kind: RecordKind, start_date: date, end_date: date
    ) -> tuple[TrendPoint, ...]:
        """Daily sums within an inclusive date range, oldest day first."""
        record_filter = RecordFilter(kind=kind, start_date=start_date, end_date=end_date)
        pairs = self.db.group_sum(user_id, record_filter, GroupKey.DAY)
        points = [
            TrendPoint(year=day.year, month=day.month, day=day.day, amount=total)
            for day, total in pairs
        ]
        points.sort(key=lambda point: (point.year, point.month, point.day))
        return tuple(points)

    def fixed_expense_total(
        self,
        user_id: int,
        period_type=None,
        overlaps: Optional[tuple[date, date]] = None,
    ) -> Decimal:
        """Sum ``total_amount`` of fixed expenses.

        Args:
            user_id: Owning user
            period_type: Optional PeriodType restriction
            overlaps: Optional (start, end) range the fixed expense period
                must overlap
        """
        record_filter = RecordFilter(
            kind=RecordKind.FIXED_EXPENSE, period_type=period_type, overlaps=overlaps
        )
        pairs = self.db.group_sum(user_id, record_filter)
        return pairs[0][1] if pairs else Decimal("0.00")
