"""Tests for MealPlanService."""

from datetime import date
from decimal import Decimal

import pytest

from lifetrack.domain.entities import Meal, MealType
from lifetrack.domain.errors import NotFoundError, ValidationError
from lifetrack.domain.meal_plan import build_meal, total_calories, total_cost

PLAN_DATE = date(2024, 3, 13)

MEALS = [
    {"type": "Lunch", "name": "Salad", "cost": "8.50", "calories": 450},
    {"type": "dinner", "name": "Pasta", "cost": 12, "calories": 700, "ingredients": ["Penne"]},
    {"type": "Snack", "name": "Apple"},
]


def test_totals_are_summed_from_meals(meal_plan_service, user_id):
    plan_id = meal_plan_service.create_meal_plan(user_id, PLAN_DATE, meals=MEALS)

    plan = meal_plan_service.get_meal_plan(user_id, plan_id)
    assert plan.total_cost == Decimal("20.50")
    assert plan.total_calories == 1150
    assert [meal.type for meal in plan.meals] == [MealType.LUNCH, MealType.DINNER, MealType.SNACK]
    assert plan.meals[1].ingredients == ("Penne",)
    assert plan.meals[2].cost is None


def test_explicit_totals_override(meal_plan_service, user_id):
    plan_id = meal_plan_service.create_meal_plan(
        user_id, PLAN_DATE, meals=MEALS, total_cost_override="25", total_calories_override=1200
    )

    plan = meal_plan_service.get_meal_plan(user_id, plan_id)
    assert plan.total_cost == Decimal("25")
    assert plan.total_calories == 1200


def test_empty_plan(meal_plan_service, user_id):
    plan_id = meal_plan_service.create_meal_plan(user_id, PLAN_DATE)

    plan = meal_plan_service.get_meal_plan(user_id, plan_id)
    assert plan.meals == ()
    assert plan.total_cost == Decimal("0")
    assert plan.total_calories == 0


def test_update_meals_recomputes_totals(meal_plan_service, user_id):
    plan_id = meal_plan_service.create_meal_plan(user_id, PLAN_DATE, meals=MEALS)

    meal_plan_service.update_meal_plan(
        user_id, plan_id, meals=[{"type": "Breakfast", "name": "Oats", "cost": "1.20", "calories": 300}]
    )

    plan = meal_plan_service.get_meal_plan(user_id, plan_id)
    assert [meal.name for meal in plan.meals] == ["Oats"]
    assert plan.total_cost == Decimal("1.20")
    assert plan.total_calories == 300


def test_plans_for_date(meal_plan_service, user_id):
    meal_plan_service.create_meal_plan(user_id, PLAN_DATE, meals=MEALS[:1])
    meal_plan_service.create_meal_plan(user_id, date(2024, 3, 12), meals=MEALS[1:2])

    plans = meal_plan_service.get_meal_plans_for_date(user_id, PLAN_DATE)

    assert [plan.date for plan in plans] == [PLAN_DATE]


def test_list_oldest_first(meal_plan_service, user_id):
    for day in (13, 11, 12):
        meal_plan_service.create_meal_plan(user_id, date(2024, 3, day))

    assert [plan.date.day for plan in meal_plan_service.list_meal_plans(user_id)] == [11, 12, 13]


def test_delete(meal_plan_service, user_id, other_user_id):
    plan_id = meal_plan_service.create_meal_plan(user_id, PLAN_DATE, meals=MEALS)

    with pytest.raises(NotFoundError):
        meal_plan_service.delete_meal_plan(other_user_id, plan_id)

    meal_plan_service.delete_meal_plan(user_id, plan_id)
    assert meal_plan_service.list_meal_plans(user_id) == []


class TestBuildMeal:
    def test_unknown_type(self):
        with pytest.raises(ValidationError, match="Invalid meal type 'Brunch'"):
            build_meal({"type": "Brunch", "name": "Eggs"})

    def test_missing_type(self):
        with pytest.raises(ValidationError, match="Meal type is required"):
            build_meal({"name": "Eggs"})

    def test_negative_calories(self):
        with pytest.raises(ValidationError, match="Calories cannot be negative"):
            build_meal({"type": "Lunch", "name": "Eggs", "calories": -10})

    def test_non_numeric_calories(self):
        with pytest.raises(ValidationError, match="Invalid calories 'lots'"):
            build_meal({"type": "Lunch", "name": "Eggs", "calories": "lots"})

    def test_entity_passes_through(self):
        meal = Meal(type=MealType.DINNER, name="Soup", cost=Decimal("3"))

        assert build_meal(meal) == meal


def test_total_helpers_skip_missing_values():
    meals = [
        Meal(type=MealType.LUNCH, name="A", cost=Decimal("1.50"), calories=100),
        Meal(type=MealType.LUNCH, name="B"),
    ]

    assert total_cost(meals) == Decimal("1.50")
    assert total_calories(meals) == 100


class TestMealStats:
    def test_totals_and_averages(self, meal_plan_service, user_id, other_user_id):
        meal_plan_service.create_meal_plan(user_id, PLAN_DATE, meals=MEALS)
        meal_plan_service.create_meal_plan(
            user_id,
            date(2024, 3, 14),
            meals=[{"type": "Breakfast", "name": "Oats", "cost": "2", "calories": 300}],
        )
        meal_plan_service.create_meal_plan(other_user_id, PLAN_DATE, meals=MEALS)

        stats = meal_plan_service.get_meal_stats(user_id)

        assert stats.total_plans == 2
        assert stats.total_meals == 4
        assert stats.total_cost == Decimal("22.50")
        assert stats.total_calories == 1450
        assert stats.average_cost == Decimal("11.25")
        assert stats.average_calories == Decimal("725.00")

    def test_no_plans_gives_zeros(self, meal_plan_service, user_id):
        stats = meal_plan_service.get_meal_stats(user_id)

        assert stats.to_dict() == {
            "total_plans": 0,
            "total_meals": 0,
            "total_cost": 0.0,
            "total_calories": 0,
            "average_cost": 0.0,
            "average_calories": 0.0,
        }
