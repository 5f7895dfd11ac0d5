"""Tests for mapper functions."""

from datetime import date, datetime
from decimal import Decimal

from lifetrack.database.mappers import (
    daily_log_to_domain,
    fixed_expense_to_domain,
    income_to_domain,
    meal_plan_to_domain,
    user_to_domain,
)
from lifetrack.database.models import (
    DailyLog as ORMDailyLog,
    FixedExpense as ORMFixedExpense,
    FixedExpenseItem as ORMFixedExpenseItem,
    Income as ORMIncome,
    Meal as ORMMeal,
    MealPlan as ORMMealPlan,
    User as ORMUser,
)
from lifetrack.domain.entities import IncomeCategory, MealType, Mood, PeriodType


def test_user_to_domain():
    created = datetime(2024, 1, 1, 12, 0)
    orm_user = ORMUser(id=1, name="Ada", email="ada@example.com", created_at=created)

    user = user_to_domain(orm_user)

    assert (user.id, user.name, user.email, user.created_at) == (
        1,
        "Ada",
        "ada@example.com",
        created,
    )


def test_income_to_domain_converts_category_and_amount():
    orm_income = ORMIncome(
        id=3,
        user_id=1,
        amount=150.5,
        date=date(2024, 3, 1),
        source="Salary",
        category="Passive",
    )

    income = income_to_domain(orm_income)

    assert income.amount == Decimal("150.5")
    assert isinstance(income.amount, Decimal)
    assert income.category == IncomeCategory.PASSIVE
    assert income.icon is None


def test_fixed_expense_to_domain_keeps_item_order():
    orm_fixed = ORMFixedExpense(
        id=2,
        user_id=1,
        category="Groceries",
        period_type="Weekly",
        period_start=date(2024, 3, 11),
        period_end=date(2024, 3, 17),
        total_amount=Decimal("13.00"),
        items=[
            ORMFixedExpenseItem(
                position=0,
                name="Milk",
                quantity=Decimal("4"),
                unit_price=Decimal("2.50"),
                total_price=Decimal("10.00"),
            ),
            ORMFixedExpenseItem(
                position=1,
                name="Bread",
                quantity=Decimal("1"),
                unit_price=Decimal("3.00"),
                total_price=Decimal("3.00"),
            ),
        ],
    )

    fixed = fixed_expense_to_domain(orm_fixed)

    assert fixed.period_type == PeriodType.WEEKLY
    assert [item.name for item in fixed.items] == ["Milk", "Bread"]
    assert fixed.items[0].total_price == Decimal("10.00")
    assert fixed.total_amount == Decimal("13.00")


def test_meal_plan_to_domain():
    orm_plan = ORMMealPlan(
        id=4,
        user_id=1,
        date=date(2024, 3, 13),
        total_cost=Decimal("8.50"),
        total_calories=450,
        meals=[
            ORMMeal(
                position=0,
                type="Lunch",
                name="Salad",
                ingredients=["Lettuce", "Tomato"],
                cost=Decimal("8.50"),
                calories=450,
            )
        ],
    )

    plan = meal_plan_to_domain(orm_plan)

    assert plan.meals[0].type == MealType.LUNCH
    assert plan.meals[0].ingredients == ("Lettuce", "Tomato")
    assert plan.total_calories == 450


def test_daily_log_to_domain_handles_missing_lists():
    orm_log = ORMDailyLog(
        id=5,
        user_id=1,
        date=date(2024, 3, 13),
        mood="Tired",
        important_events=None,
        goals=["Sleep early"],
    )

    log = daily_log_to_domain(orm_log)

    assert log.mood == Mood.TIRED
    assert log.important_events == ()
    assert log.goals == ("Sleep early",)
    assert log.sleep_hours is None
