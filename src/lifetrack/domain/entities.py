"""Domain model entities for lifetrack.

These are pure data classes representing business concepts, independent of
database schema. The aggregation engine and the services only ever see these
types, never ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class IncomeCategory(str, Enum):
    """Closed set of income categories."""

    ACTIVE = "Active"
    PASSIVE = "Passive"
    INVESTMENT = "Investment"
    BUSINESS = "Business"
    OTHER = "Other"


class PeriodType(str, Enum):
    """Recurrence period of a fixed expense."""

    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class MealType(str, Enum):
    """Meal slot within a meal plan."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class Mood(str, Enum):
    """Mood recorded in a daily log."""

    HAPPY = "Happy"
    SAD = "Sad"
    TIRED = "Tired"
    STRESSED = "Stressed"
    EXCITED = "Excited"
    CALM = "Calm"
    ANXIOUS = "Anxious"
    MOTIVATED = "Motivated"
    NEUTRAL = "Neutral"


class TrendPeriod(str, Enum):
    """Chart period accepted by the trend range resolver."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ProgressStatus(str, Enum):
    """Weekly progress label."""

    SURPLUS = "surplus"
    DEFICIT = "deficit"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class User:
    """User domain entity."""

    id: int
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class Income:
    """Income domain entity."""

    id: int
    user_id: int
    amount: Decimal
    date: date
    source: str
    category: IncomeCategory
    icon: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: int
    user_id: int
    amount: Decimal
    date: date
    title: str
    category: str
    icon: Optional[str]
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class FixedExpenseItem:
    """Line item of a fixed expense."""

    name: str
    unit_price: Decimal
    quantity: Decimal = Decimal("1")

    @property
    def total_price(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class FixedExpense:
    """Fixed (recurring) expense domain entity."""

    id: int
    user_id: int
    category: str
    period_type: PeriodType
    period_start: date
    period_end: date
    items: tuple[FixedExpenseItem, ...]
    total_amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Meal:
    """Single meal inside a meal plan."""

    type: MealType
    name: str
    ingredients: tuple[str, ...] = ()
    cost: Optional[Decimal] = None
    calories: Optional[int] = None


@dataclass(frozen=True)
class MealPlan:
    """Meal plan domain entity."""

    id: int
    user_id: int
    date: date
    meals: tuple[Meal, ...]
    total_cost: Decimal
    total_calories: int
    created_at: datetime


@dataclass(frozen=True)
class DailyLog:
    """Daily mood and productivity log."""

    id: int
    user_id: int
    date: date
    mood: Mood
    energy_level: Optional[int]
    productivity: Optional[int]
    sleep_hours: Optional[Decimal]
    important_events: tuple[str, ...]
    goals: tuple[str, ...]
    note: Optional[str]
    reflection: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Note:
    """Free-form dated note."""

    id: int
    user_id: int
    date: date
    note: str
    created_at: datetime


# Aggregation results


@dataclass(frozen=True)
class DateRanges:
    """Window boundaries computed from the current instant."""

    today: date
    start_of_week: date
    start_of_month: date
    end_of_month: date


@dataclass(frozen=True)
class PeriodTotals:
    """Income and expense sums for one window."""

    income: Decimal
    expenses: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expenses

    def to_dict(self) -> dict[str, Any]:
        return {
            "income": float(self.income),
            "expenses": float(self.expenses),
            "balance": float(self.balance),
        }


@dataclass(frozen=True)
class GroupTotal:
    """Sum of amounts for one category or source."""

    key: str
    total: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "total": float(self.total)}


@dataclass(frozen=True)
class TrendPoint:
    """Sum of amounts for one calendar day."""

    year: int
    month: int
    day: int
    amount: Decimal

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "amount": float(self.amount),
        }


@dataclass(frozen=True)
class WeeklyProgress:
    """Weekly income measured against weekly fixed obligations."""

    fixed_weekly_expenses: Decimal
    weekly_income: Decimal
    remaining_amount: Decimal
    progress_percentage: float
    status: ProgressStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "fixed_weekly_expenses": float(self.fixed_weekly_expenses),
            "weekly_income": float(self.weekly_income),
            "remaining_amount": float(self.remaining_amount),
            "progress_percentage": self.progress_percentage,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class RecentActivities:
    """Recent lifestyle records shown on the dashboard."""

    daily_logs: tuple[DailyLog, ...]
    today_meals: tuple[MealPlan, ...]
    weekly_meal_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "daily_logs": [
                {
                    "id": log.id,
                    "date": log.date.isoformat(),
                    "mood": log.mood.value,
                    "note": log.note,
                }
                for log in self.daily_logs
            ],
            "today_meals": [
                {
                    "id": plan.id,
                    "date": plan.date.isoformat(),
                    "meals": [
                        {
                            "type": meal.type.value,
                            "name": meal.name,
                            "calories": meal.calories,
                        }
                        for meal in plan.meals
                    ],
                }
                for plan in self.today_meals
            ],
            "weekly_meal_count": self.weekly_meal_count,
        }


@dataclass(frozen=True)
class DashboardData:
    """Composite dashboard payload."""

    summary: PeriodTotals
    daily: PeriodTotals
    weekly: PeriodTotals
    monthly: PeriodTotals
    recent_activities: RecentActivities
    top_expense_categories: tuple[GroupTotal, ...]
    top_income_sources: tuple[GroupTotal, ...]

    def to_dict(self) -> dict[str, Any]:
        summary = self.summary.to_dict()
        return {
            "summary": {
                "total_income": summary["income"],
                "total_expenses": summary["expenses"],
                "total_balance": summary["balance"],
            },
            "daily": self.daily.to_dict(),
            "weekly": self.weekly.to_dict(),
            "monthly": self.monthly.to_dict(),
            "recent_activities": self.recent_activities.to_dict(),
            "analytics": {
                "top_expense_categories": [
                    g.to_dict() for g in self.top_expense_categories
                ],
                "top_income_sources": [g.to_dict() for g in self.top_income_sources],
            },
        }


@dataclass(frozen=True)
class ChartData:
    """Trend series and breakdowns for one chart period."""

    period: TrendPeriod
    start_date: date
    end_date: date
    income_trend: tuple[TrendPoint, ...]
    expense_trend: tuple[TrendPoint, ...]
    income_by_source: tuple[GroupTotal, ...]
    expenses_by_category: tuple[GroupTotal, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "trends": {
                "income": [p.to_dict() for p in self.income_trend],
                "expenses": [p.to_dict() for p in self.expense_trend],
            },
            "breakdown": {
                "income_by_category": [g.to_dict() for g in self.income_by_source],
                "expenses_by_category": [
                    g.to_dict() for g in self.expenses_by_category
                ],
            },
        }


@dataclass(frozen=True)
class QuickStats:
    """Record counts for the quick-stats panel."""

    total_incomes: int
    total_expenses: int
    total_daily_logs: int
    total_meal_plans: int
    today_incomes: int
    today_expenses: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "totals": {
                "incomes": self.total_incomes,
                "expenses": self.total_expenses,
                "daily_logs": self.total_daily_logs,
                "meal_plans": self.total_meal_plans,
            },
            "today": {
                "incomes": self.today_incomes,
                "expenses": self.today_expenses,
            },
        }


@dataclass(frozen=True)
class MealStats:
    """Totals and per-plan averages over all of a user's meal plans."""

    total_plans: int
    total_meals: int
    total_cost: Decimal
    total_calories: int
    average_cost: Decimal
    average_calories: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_plans": self.total_plans,
            "total_meals": self.total_meals,
            "total_cost": float(self.total_cost),
            "total_calories": self.total_calories,
            "average_cost": float(self.average_cost),
            "average_calories": float(self.average_calories),
        }
