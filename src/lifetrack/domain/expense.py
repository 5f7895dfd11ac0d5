"""Expense domain service."""

from datetime import date
from typing import Any, Optional

from lifetrack.database.base import Database
from lifetrack.domain.entities import Expense as ExpenseEntity
from lifetrack.domain.filters import RecordFilter, RecordKind
from lifetrack.domain.validation import (
    optional_text,
    require_owned_record,
    require_positive_amount,
    require_text,
    require_user,
)


class ExpenseService:
    """Service for managing expense records.

    Expense categories are free text; grouping uses the exact string.
    """

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_expense(
        self,
        user_id: int,
        amount: Any,
        date: date,
        title: str,
        category: str,
        icon: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        """Record an expense.

        Args:
            user_id: Owning user
            amount: Positive amount
            date: Date of the expense
            title: Short title
            category: Free-text category (e.g., "Food")
            icon: Optional icon
            description: Optional longer description

        Returns:
            Expense ID

        Raises:
            ValidationError: If amount, title or category is invalid
            NotFoundError: If the user does not exist
        """
        require_user(self.db, user_id)
        return self.db.create_expense(
            user_id=user_id,
            amount=require_positive_amount(amount),
            date=date,
            title=require_text(title, "Title"),
            category=require_text(category, "Category"),
            icon=optional_text(icon, "Icon"),
            description=optional_text(description, "Description"),
        )

    def get_expense(self, user_id: int, expense_id: int) -> ExpenseEntity:
        """Get an expense owned by the user."""
        return require_owned_record(self.db, RecordKind.EXPENSE, user_id, expense_id)

    def list_expenses(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ExpenseEntity]:
        """List expenses, newest first."""
        return self.db.find_matching(
            user_id,
            RecordFilter(kind=RecordKind.EXPENSE, start_date=start_date, end_date=end_date),
        )

    def update_expense(
        self,
        user_id: int,
        expense_id: int,
        amount: Any = None,
        date: Optional[date] = None,
        title: Optional[str] = None,
        category: Optional[str] = None,
        icon: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update fields of an expense. None leaves a field unchanged."""
        require_owned_record(self.db, RecordKind.EXPENSE, user_id, expense_id)

        changes: dict[str, Any] = {}
        if amount is not None:
            changes["amount"] = require_positive_amount(amount)
        if date is not None:
            changes["date"] = date
        if title is not None:
            changes["title"] = require_text(title, "Title")
        if category is not None:
            changes["category"] = require_text(category, "Category")
        if icon is not None:
            changes["icon"] = optional_text(icon, "Icon")
        if description is not None:
            changes["description"] = optional_text(description, "Description")

        if changes:
            self.db.update_expense(expense_id, changes)

    def delete_expense(self, user_id: int, expense_id: int) -> None:
        """Delete an expense owned by the user."""
        require_owned_record(self.db, RecordKind.EXPENSE, user_id, expense_id)
        self.db.delete_record(RecordKind.EXPENSE, expense_id)
