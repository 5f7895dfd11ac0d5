"""Typed query filters for the record store."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from lifetrack.domain.entities import PeriodType
from lifetrack.domain.errors import ValidationError


class RecordKind(str, Enum):
    """Entity collections held by the record store."""

    INCOME = "income"
    EXPENSE = "expense"
    FIXED_EXPENSE = "fixed_expense"
    MEAL_PLAN = "meal_plan"
    DAILY_LOG = "daily_log"
    NOTE = "note"


class GroupKey(str, Enum):
    """Attribute used by grouped sums."""

    CATEGORY = "category"
    SOURCE = "source"
    DAY = "day"


# Kinds whose records carry a single ``date`` column
DATED_KINDS = frozenset(
    {
        RecordKind.INCOME,
        RecordKind.EXPENSE,
        RecordKind.MEAL_PLAN,
        RecordKind.DAILY_LOG,
        RecordKind.NOTE,
    }
)

GROUPABLE = {
    RecordKind.INCOME: frozenset({GroupKey.CATEGORY, GroupKey.SOURCE, GroupKey.DAY}),
    RecordKind.EXPENSE: frozenset({GroupKey.CATEGORY, GroupKey.DAY}),
    RecordKind.FIXED_EXPENSE: frozenset({GroupKey.CATEGORY}),
}


@dataclass(frozen=True)
class RecordFilter:
    """Filter applied to one entity collection.

    Date bounds are inclusive on both ends. ``period_type`` and
    ``overlaps`` only apply to fixed expenses, whose records span a period
    instead of carrying a single date.
    """

    kind: RecordKind
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    period_type: Optional[PeriodType] = None
    overlaps: Optional[tuple[date, date]] = None

    def __post_init__(self):
        has_dates = self.start_date is not None or self.end_date is not None
        if has_dates and self.kind not in DATED_KINDS:
            raise ValidationError(f"Date bounds are not supported for {self.kind.value}")
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.start_date > self.end_date
        ):
            raise ValidationError(
                f"Start date {self.start_date} is after end date {self.end_date}"
            )
        fixed_only = self.period_type is not None or self.overlaps is not None
        if fixed_only and self.kind != RecordKind.FIXED_EXPENSE:
            raise ValidationError(
                f"Period filters are only supported for {RecordKind.FIXED_EXPENSE.value}"
            )
        if self.overlaps is not None and self.overlaps[0] > self.overlaps[1]:
            raise ValidationError(f"Invalid period range {self.overlaps}")

    def supports_group(self, group_key: GroupKey) -> bool:
        """Return True if records of this kind can be grouped by the key."""
        return group_key in GROUPABLE.get(self.kind, frozenset())


KIND_LABELS = {
    RecordKind.INCOME: "Income",
    RecordKind.EXPENSE: "Expense",
    RecordKind.FIXED_EXPENSE: "Fixed expense",
    RecordKind.MEAL_PLAN: "Meal plan",
    RecordKind.DAILY_LOG: "Daily log",
    RecordKind.NOTE: "Note",
}
