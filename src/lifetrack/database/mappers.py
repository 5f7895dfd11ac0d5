"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the record store can change its
schema (child tables, JSON columns) without the domain noticing.
"""

from decimal import Decimal
from typing import Optional

from lifetrack.domain import entities as domain
from lifetrack.database.models import (
    User as ORMUser,
    Income as ORMIncome,
    Expense as ORMExpense,
    FixedExpense as ORMFixedExpense,
    FixedExpenseItem as ORMFixedExpenseItem,
    MealPlan as ORMMealPlan,
    Meal as ORMMeal,
    DailyLog as ORMDailyLog,
    Note as ORMNote,
)


def _decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        name=orm_user.name,
        email=orm_user.email,
        created_at=orm_user.created_at,
    )


def income_to_domain(orm_income: ORMIncome) -> domain.Income:
    """Convert SQLAlchemy Income model to domain Income entity."""
    return domain.Income(
        id=orm_income.id,
        user_id=orm_income.user_id,
        amount=_decimal(orm_income.amount),
        date=orm_income.date,
        source=orm_income.source,
        category=domain.IncomeCategory(orm_income.category),
        icon=orm_income.icon,
        created_at=orm_income.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        user_id=orm_expense.user_id,
        amount=_decimal(orm_expense.amount),
        date=orm_expense.date,
        title=orm_expense.title,
        category=orm_expense.category,
        icon=orm_expense.icon,
        description=orm_expense.description,
        created_at=orm_expense.created_at,
    )


def fixed_expense_item_to_domain(orm_item: ORMFixedExpenseItem) -> domain.FixedExpenseItem:
    """Convert SQLAlchemy FixedExpenseItem model to domain FixedExpenseItem."""
    return domain.FixedExpenseItem(
        name=orm_item.name,
        unit_price=_decimal(orm_item.unit_price),
        quantity=_decimal(orm_item.quantity),
    )


def fixed_expense_to_domain(orm_fixed: ORMFixedExpense) -> domain.FixedExpense:
    """Convert SQLAlchemy FixedExpense model to domain FixedExpense entity."""
    return domain.FixedExpense(
        id=orm_fixed.id,
        user_id=orm_fixed.user_id,
        category=orm_fixed.category,
        period_type=domain.PeriodType(orm_fixed.period_type),
        period_start=orm_fixed.period_start,
        period_end=orm_fixed.period_end,
        items=tuple(fixed_expense_item_to_domain(item) for item in orm_fixed.items),
        total_amount=_decimal(orm_fixed.total_amount),
        created_at=orm_fixed.created_at,
    )


def meal_to_domain(orm_meal: ORMMeal) -> domain.Meal:
    """Convert SQLAlchemy Meal model to domain Meal."""
    return domain.Meal(
        type=domain.MealType(orm_meal.type),
        name=orm_meal.name,
        ingredients=tuple(orm_meal.ingredients or ()),
        cost=_decimal(orm_meal.cost),
        calories=orm_meal.calories,
    )


def meal_plan_to_domain(orm_plan: ORMMealPlan) -> domain.MealPlan:
    """Convert SQLAlchemy MealPlan model to domain MealPlan entity."""
    return domain.MealPlan(
        id=orm_plan.id,
        user_id=orm_plan.user_id,
        date=orm_plan.date,
        meals=tuple(meal_to_domain(meal) for meal in orm_plan.meals),
        total_cost=_decimal(orm_plan.total_cost),
        total_calories=orm_plan.total_calories,
        created_at=orm_plan.created_at,
    )


def daily_log_to_domain(orm_log: ORMDailyLog) -> domain.DailyLog:
    """Convert SQLAlchemy DailyLog model to domain DailyLog entity."""
    return domain.DailyLog(
        id=orm_log.id,
        user_id=orm_log.user_id,
        date=orm_log.date,
        mood=domain.Mood(orm_log.mood),
        energy_level=orm_log.energy_level,
        productivity=orm_log.productivity,
        sleep_hours=_decimal(orm_log.sleep_hours),
        important_events=tuple(orm_log.important_events or ()),
        goals=tuple(orm_log.goals or ()),
        note=orm_log.note,
        reflection=orm_log.reflection,
        created_at=orm_log.created_at,
    )


def note_to_domain(orm_note: ORMNote) -> domain.Note:
    """Convert SQLAlchemy Note model to domain Note entity."""
    return domain.Note(
        id=orm_note.id,
        user_id=orm_note.user_id,
        date=orm_note.date,
        note=orm_note.note,
        created_at=orm_note.created_at,
    )
