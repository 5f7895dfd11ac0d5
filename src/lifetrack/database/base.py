"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from lifetrack.domain.entities import (
    User,
    FixedExpenseItem,
    Meal,
    PeriodType,
)
from lifetrack.domain.filters import GroupKey, RecordFilter, RecordKind


class Database(ABC):
    """Abstract database interface for lifetrack.

    Every record is owned by a user. Query primitives take the owning
    ``user_id`` explicitly and never return records of another user.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, name: str, email: str) -> int:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users."""
        pass

    # Income operations
    @abstractmethod
    def create_income(
        self,
        user_id: int,
        amount: Decimal,
        date: date,
        source: str,
        category: str,
        icon: Optional[str] = None,
    ) -> int:
        """Create an income record. Returns income ID."""
        pass

    @abstractmethod
    def update_income(self, income_id: int, changes: dict[str, Any]) -> None:
        """Update columns of an income record."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        user_id: int,
        amount: Decimal,
        date: date,
        title: str,
        category: str,
        icon: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        """Create an expense record. Returns expense ID."""
        pass

    @abstractmethod
    def update_expense(self, expense_id: int, changes: dict[str, Any]) -> None:
        """Update columns of an expense record."""
        pass

    # Fixed expense operations
    @abstractmethod
    def create_fixed_expense(
        self,
        user_id: int,
        category: str,
        period_type: PeriodType,
        period_start: date,
        period_end: date,
        items: Sequence[FixedExpenseItem],
    ) -> int:
        """Create a fixed expense. Returns fixed expense ID.

        The stored total amount is the sum of the item totals.
        """
        pass

    @abstractmethod
    def update_fixed_expense(self, fixed_expense_id: int, changes: dict[str, Any]) -> None:
        """Update a fixed expense. The total amount is recomputed."""
        pass

    # Meal plan operations
    @abstractmethod
    def create_meal_plan(
        self,
        user_id: int,
        date: date,
        meals: Sequence[Meal],
        total_cost: Decimal,
        total_calories: int,
    ) -> int:
        """Create a meal plan. Returns meal plan ID."""
        pass

    @abstractmethod
    def update_meal_plan(self, meal_plan_id: int, changes: dict[str, Any]) -> None:
        """Update a meal plan."""
        pass

    # Daily log operations
    @abstractmethod
    def create_daily_log(self, user_id: int, date: date, fields: dict[str, Any]) -> int:
        """Create a daily log. Returns daily log ID."""
        pass

    @abstractmethod
    def update_daily_log(self, log_id: int, changes: dict[str, Any]) -> None:
        """Update columns of a daily log."""
        pass

    # Note operations
    @abstractmethod
    def create_note(self, user_id: int, date: date, note: str) -> int:
        """Create a note. Returns note ID."""
        pass

    # Generic record operations
    @abstractmethod
    def get_record(self, kind: RecordKind, record_id: int) -> Optional[Any]:
        """Get any record by kind and ID as a domain entity."""
        pass

    @abstractmethod
    def delete_record(self, kind: RecordKind, record_id: int) -> None:
        """Delete a record by kind and ID."""
        pass

    # Query primitives
    @abstractmethod
    def find_matching(
        self,
        user_id: int,
        record_filter: RecordFilter,
        newest_first: bool = True,
        limit: Optional[int] = None,
    ) -> list[Any]:
        """Return domain entities of one kind matching the filter.

        Args:
            user_id: Owning user
            record_filter: Kind and bounds of the query
            newest_first: Sort by date descending (True) or ascending
            limit: Optional maximum number of records
        """
        pass

    @abstractmethod
    def count_matching(self, user_id: int, record_filter: RecordFilter) -> int:
        """Count records matching the filter."""
        pass

    @abstractmethod
    def group_sum(
        self, user_id: int, record_filter: RecordFilter, group_key: Optional[GroupKey] = None
    ) -> list[tuple[Any, Decimal]]:
        """Sum the amount column of matching records per group.

        Fixed expenses sum ``total_amount`` and meal plans ``total_cost``;
        the other kinds sum ``amount``. With ``group_key`` None a single
        ``(None, total)`` pair is returned, with a total of 0 when nothing
        matches. Groups come back ordered by group value ascending.
        """
        pass
