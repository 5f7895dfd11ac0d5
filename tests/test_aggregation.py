"""Tests for AggregationService."""

from datetime import date
from decimal import Decimal

import pytest

from lifetrack.domain.aggregation import AggregationService, rank_groups
from lifetrack.domain.entities import GroupTotal, TrendPoint
from lifetrack.domain.filters import RecordKind

MONDAY = date(2024, 3, 11)


@pytest.fixture
def aggregation(temp_db):
    return AggregationService(temp_db)


def _expense(service, user_id, amount, category, when=MONDAY):
    return service.create_expense(
        user_id=user_id, amount=amount, date=when, title=category, category=category
    )


def test_sums_of_nothing_are_zero(aggregation, user_id):
    totals = aggregation.period_totals(user_id)

    assert totals.income == Decimal("0")
    assert totals.expenses == Decimal("0")
    assert totals.balance == Decimal("0")
    assert aggregation.top_expense_categories(user_id) == ()
    assert aggregation.top_income_sources(user_id) == ()
    assert aggregation.count(user_id, RecordKind.INCOME) == 0


def test_period_totals_by_window(aggregation, income_service, expense_service, user_id):
    income_service.create_income(user_id, "100", MONDAY, "Salary", "Active")
    income_service.create_income(user_id, "50", date(2024, 2, 20), "Salary", "Active")
    _expense(expense_service, user_id, "30", "Food")

    weekly = aggregation.period_totals(user_id, MONDAY)
    monthly = aggregation.period_totals(user_id, date(2024, 3, 1))
    all_time = aggregation.period_totals(user_id)

    assert (weekly.income, weekly.expenses, weekly.balance) == (
        Decimal("100"),
        Decimal("30"),
        Decimal("70"),
    )
    assert monthly.income == Decimal("100")
    assert all_time.income == Decimal("150")


def test_window_start_is_inclusive(aggregation, income_service, user_id):
    income_service.create_income(user_id, "10", MONDAY, "Salary", "Active")
    income_service.create_income(user_id, "20", date(2024, 3, 10), "Salary", "Active")

    assert aggregation.sum_amount(user_id, RecordKind.INCOME, MONDAY) == Decimal("10")


def test_sum_is_exact_to_the_cent(aggregation, expense_service, user_id):
    for _ in range(3):
        _expense(expense_service, user_id, "0.10", "Food")

    assert aggregation.sum_amount(user_id, RecordKind.EXPENSE) == Decimal("0.30")


def test_top_expense_categories(aggregation, expense_service, user_id):
    for amount, category in [
        ("40", "Food"),
        ("10", "Food"),
        ("20", "Transport"),
        ("5", "Bills"),
        ("1", "Other"),
        ("100", "Shopping"),
        ("3", "Health"),
    ]:
        _expense(expense_service, user_id, amount, category)

    top = aggregation.top_expense_categories(user_id)

    assert [(g.key, g.total) for g in top] == [
        ("Shopping", Decimal("100")),
        ("Food", Decimal("50")),
        ("Transport", Decimal("20")),
        ("Bills", Decimal("5")),
        ("Health", Decimal("3")),
    ]


def test_top_expense_categories_without_limit(aggregation, expense_service, user_id):
    for index in range(7):
        _expense(expense_service, user_id, str(index + 1), f"Category {index}")

    assert len(aggregation.top_expense_categories(user_id)) == 5
    assert len(aggregation.top_expense_categories(user_id, limit=None)) == 7


def test_equal_totals_keep_key_order(aggregation, expense_service, user_id):
    _expense(expense_service, user_id, "10", "Beta")
    _expense(expense_service, user_id, "10", "Alpha")

    top = aggregation.top_expense_categories(user_id)

    assert [g.key for g in top] == ["Alpha", "Beta"]


def test_top_income_sources(aggregation, income_service, user_id):
    income_service.create_income(user_id, "1000", MONDAY, "Salary", "Active")
    income_service.create_income(user_id, "200", MONDAY, "Freelance", "Business")
    income_service.create_income(user_id, "300", MONDAY, "Freelance", "Business")

    top = aggregation.top_income_sources(user_id)

    assert top == (
        GroupTotal(key="Salary", total=Decimal("1000.00")),
        GroupTotal(key="Freelance", total=Decimal("500.00")),
    )


def test_aggregation_is_scoped_to_user(
    aggregation, income_service, expense_service, user_id, other_user_id
):
    income_service.create_income(other_user_id, "999", MONDAY, "Salary", "Active")
    _expense(expense_service, other_user_id, "999", "Food")
    income_service.create_income(user_id, "1", MONDAY, "Salary", "Active")

    assert aggregation.period_totals(user_id).income == Decimal("1")
    assert aggregation.period_totals(user_id).expenses == Decimal("0")
    assert aggregation.top_expense_categories(user_id) == ()
    assert aggregation.count(user_id, RecordKind.INCOME) == 1


def test_repeated_calls_agree(aggregation, income_service, expense_service, user_id):
    income_service.create_income(user_id, "42.50", MONDAY, "Salary", "Active")
    _expense(expense_service, user_id, "12.25", "Food")

    assert aggregation.period_totals(user_id) == aggregation.period_totals(user_id)
    assert aggregation.top_expense_categories(user_id) == aggregation.top_expense_categories(
        user_id
    )


def test_count_since_date(aggregation, meal_plan_service, user_id):
    meal_plan_service.create_meal_plan(user_id, date(2024, 3, 4))
    meal_plan_service.create_meal_plan(user_id, MONDAY)
    meal_plan_service.create_meal_plan(user_id, date(2024, 3, 13))

    assert aggregation.count(user_id, RecordKind.MEAL_PLAN) == 3
    assert aggregation.count(user_id, RecordKind.MEAL_PLAN, MONDAY) == 2


def test_trend_groups_by_day(aggregation, income_service, user_id):
    income_service.create_income(user_id, "5", date(2024, 3, 5), "Gift", "Other")
    income_service.create_income(user_id, "10", date(2024, 3, 1), "Salary", "Active")
    income_service.create_income(user_id, "5", date(2024, 3, 1), "Tips", "Active")
    income_service.create_income(user_id, "99", date(2024, 2, 29), "Salary", "Active")

    trend = aggregation.trend(user_id, RecordKind.INCOME, date(2024, 3, 1), date(2024, 3, 31))

    assert trend == (
        TrendPoint(year=2024, month=3, day=1, amount=Decimal("15.00")),
        TrendPoint(year=2024, month=3, day=5, amount=Decimal("5.00")),
    )
    assert trend[0].date == date(2024, 3, 1)


def test_fixed_expense_total(aggregation, fixed_expense_service, user_id):
    fixed_expense_service.create_fixed_expense(
        user_id=user_id,
        category="Internet",
        period_type="Monthly",
        period_start=date(2024, 3, 1),
        period_end=date(2024, 3, 31),
        items=[{"name": "Fiber", "unit_price": "45.99"}],
    )

    assert aggregation.fixed_expense_total(user_id) == Decimal("45.99")


def test_rank_groups_is_stable():
    groups = rank_groups(
        [("a", Decimal("1")), ("b", Decimal("3")), ("c", Decimal("1")), (None, Decimal("2"))],
        limit=3,
    )

    assert [(g.key, g.total) for g in groups] == [
        ("b", Decimal("3")),
        ("", Decimal("2")),
        ("a", Decimal("1")),
    ]
