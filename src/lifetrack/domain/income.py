"""Income domain service."""

from datetime import date
from typing import Any, Optional

from lifetrack.database.base import Database
from lifetrack.domain.entities import Income as IncomeEntity
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.validation import (
    optional_text,
    parse_income_category,
    require_owned_record,
    require_positive_amount,
    require_text,
    require_user,
)


class IncomeService:
    """Service for managing income records."""

    def __init__(self, db: Database):
        """Initialize income service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_income(
        self,
        user_id: int,
        amount: Any,
        date: date,
        source: str,
        category: Any,
        icon: Optional[str] = None,
    ) -> int:
        """Record income.

        Args:
            user_id: Owning user
            amount: Positive amount
            date: Date the income was received
            source: Where the income came from (e.g., "Salary")
            category: Active, Passive, Investment, Business or Other
            icon: Optional icon shown next to the record

        Returns:
            Income ID

        Raises:
            ValidationError: If amount, source or category is invalid
            NotFoundError: If the user does not exist
        """
        require_user(self.db, user_id)
        return self.db.create_income(
            user_id=user_id,
            amount=require_positive_amount(amount),
            date=date,
            source=require_text(source, "Source"),
            category=parse_income_category(category),
            icon=optional_text(icon, "Icon"),
        )

    def get_income(self, user_id: int, income_id: int) -> IncomeEntity:
        """Get an income record owned by the user."""
        return require_owned_record(self.db, RecordKind.INCOME, user_id, income_id)

    def list_incomes(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[IncomeEntity]:
        """List income records, newest first."""
        return self.db.find_matching(
            user_id,
            RecordFilter(kind=RecordKind.INCOME, start_date=start_date, end_date=end_date),
        )

    def update_income(
        self,
        user_id: int,
        income_id: int,
        amount: Any = None,
        date: Optional[date] = None,
        source: Optional[str] = None,
        category: Any = None,
        icon: Optional[str] = None,
    ) -> None:
        """Update fields of an income record. None leaves a field unchanged."""
        require_owned_record(self.db, RecordKind.INCOME, user_id, income_id)

        changes: dict[str, Any] = {}
        if amount is not None:
            changes["amount"] = require_positive_amount(amount)
        if date is not None:
            changes["date"] = date
        if source is not None:
            changes["source"] = require_text(source, "Source")
        if category is not None:
            changes["category"] = parse_income_category(category)
        if icon is not None:
            changes["icon"] = optional_text(icon, "Icon")

        if changes:
            self.db.update_income(income_id, changes)

    def delete_income(self, user_id: int, income_id: int) -> None:
        """Delete an income record owned by the user."""
        require_owned_record(self.db, RecordKind.INCOME, user_id, income_id)
        self.db.delete_record(RecordKind.INCOME, income_id)
