"""Fixed expense domain service."""

from datetime import date
from typing import Any, Iterable, Mapping, Optional, Union

from lifetrack.database.base import Database
from lifetrack.domain.entities import (
    FixedExpense as FixedExpenseEntity,
    FixedExpenseItem,
    PeriodType,
)
from lifetrack.domain.errors import ValidationError
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.validation import (
    parse_choice,
    require_non_negative,
    require_owned_record,
    require_text,
    require_user,
)

ItemInput = Union[FixedExpenseItem, Mapping[str, Any]]


def build_item(item: ItemInput) -> FixedExpenseItem:
    """Validate one line item given as an entity or a mapping.

    Mappings use the keys ``name``, ``unit_price`` and optional ``quantity``
    (default 1).
    """
    if isinstance(item, FixedExpenseItem):
        name, unit_price, quantity = item.name, item.unit_price, item.quantity
    else:
        name = item.get("name")
        unit_price = item.get("unit_price")
        quantity = item.get("quantity", 1)

    if unit_price is None:
        raise ValidationError("Unit price is required")

    return FixedExpenseItem(
        name=require_text(name, "Item name"),
        unit_price=require_non_negative(unit_price, "Unit price"),
        quantity=require_non_negative(quantity, "Quantity"),
    )


def _check_period(period_start: date, period_end: date) -> None:
    if period_start > period_end:
        raise ValidationError(
            f"Period start {period_start} is after period end {period_end}"
        )


class FixedExpenseService:
    """Service for managing fixed (recurring) expenses.

    The total amount is always the sum of quantity times unit price over
    the items; it is recomputed by the store on every write.
    """

    def __init__(self, db: Database):
        """Initialize fixed expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_fixed_expense(
        self,
        user_id: int,
        category: str,
        period_type: Any,
        period_start: date,
        period_end: date,
        items: Iterable[ItemInput] = (),
    ) -> int:
        """Create a fixed expense.

        Args:
            user_id: Owning user
            category: Category (e.g., "Groceries", "Internet")
            period_type: Weekly or Monthly
            period_start: First day of the period
            period_end: Last day of the period
            items: Line items

        Returns:
            Fixed expense ID

        Raises:
            ValidationError: If the period, period type or an item is invalid
            NotFoundError: If the user does not exist
        """
        require_user(self.db, user_id)
        _check_period(period_start, period_end)
        return self.db.create_fixed_expense(
            user_id=user_id,
            category=require_text(category, "Category"),
            period_type=parse_choice(PeriodType, period_type, "period type"),
            period_start=period_start,
            period_end=period_end,
            items=[build_item(item) for item in items],
        )

    def get_fixed_expense(self, user_id: int, fixed_expense_id: int) -> FixedExpenseEntity:
        """Get a fixed expense owned by the user."""
        return require_owned_record(
            self.db, RecordKind.FIXED_EXPENSE, user_id, fixed_expense_id
        )

    def list_fixed_expenses(
        self,
        user_id: int,
        period_type: Any = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[FixedExpenseEntity]:
        """List fixed expenses, latest period first.

        Args:
            user_id: Owning user
            period_type: Optional Weekly/Monthly restriction
            start_date: With end_date, keep periods overlapping this range
            end_date: With start_date, keep periods overlapping this range
        """
        resolved_type = None
        if period_type is not None:
            resolved_type = parse_choice(PeriodType, period_type, "period type")

        overlaps = None
        if start_date is not None and end_date is not None:
            overlaps = (start_date, end_date)

        return self.db.find_matching(
            user_id,
            RecordFilter(
                kind=RecordKind.FIXED_EXPENSE,
                period_type=resolved_type,
                overlaps=overlaps,
            ),
        )

    def update_fixed_expense(
        self,
        user_id: int,
        fixed_expense_id: int,
        category: Optional[str] = None,
        period_type: Any = None,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
        items: Optional[Iterable[ItemInput]] = None,
    ) -> None:
        """Update a fixed expense. None leaves a field unchanged."""
        current = require_owned_record(
            self.db, RecordKind.FIXED_EXPENSE, user_id, fixed_expense_id
        )
        _check_period(
            period_start or current.period_start, period_end or current.period_end
        )

        changes: dict[str, Any] = {}
        if category is not None:
            changes["category"] = require_text(category, "Category")
        if period_type is not None:
            changes["period_type"] = parse_choice(PeriodType, period_type, "period type")
        if period_start is not None:
            changes["period_start"] = period_start
        if period_end is not None:
            changes["period_end"] = period_end
        if items is not None:
            changes["items"] = [build_item(item) for item in items]

        self.db.update_fixed_expense(fixed_expense_id, changes)

    def delete_fixed_expense(self, user_id: int, fixed_expense_id: int) -> None:
        """Delete a fixed expense owned by the user."""
        require_owned_record(self.db, RecordKind.FIXED_EXPENSE, user_id, fixed_expense_id)
        self.db.delete_record(RecordKind.FIXED_EXPENSE, fixed_expense_id)
