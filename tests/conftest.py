"""Shared pytest fixtures for lifetrack tests."""

import os
import tempfile
from datetime import date, datetime

import pytest
from click.testing import CliRunner

from lifetrack.database.factories import create_sqlite_database
from lifetrack.domain.daily_log import DailyLogService
from lifetrack.domain.dashboard import DashboardService
from lifetrack.domain.expense import ExpenseService
from lifetrack.domain.fixed_expense import FixedExpenseService
from lifetrack.domain.income import IncomeService
from lifetrack.domain.meal_plan import MealPlanService
from lifetrack.domain.note import NoteService
from lifetrack.domain.user import UserService

# Wednesday; the week starts on Monday 2024-03-11
NOW = datetime(2024, 3, 13, 10, 30)
TODAY = NOW.date()
MONDAY = date(2024, 3, 11)
LAST_MONTH = date(2024, 2, 20)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def clock():
    """Clock frozen at NOW."""
    return lambda: NOW


@pytest.fixture
def user_service(temp_db):
    return UserService(temp_db)


@pytest.fixture
def income_service(temp_db):
    return IncomeService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    return ExpenseService(temp_db)


@pytest.fixture
def fixed_expense_service(temp_db):
    return FixedExpenseService(temp_db)


@pytest.fixture
def meal_plan_service(temp_db):
    return MealPlanService(temp_db)


@pytest.fixture
def daily_log_service(temp_db):
    return DailyLogService(temp_db)


@pytest.fixture
def note_service(temp_db):
    return NoteService(temp_db)


@pytest.fixture
def dashboard_service(temp_db, clock):
    """DashboardService whose "now" is NOW."""
    return DashboardService(temp_db, clock=clock)


@pytest.fixture
def user_id(user_service):
    """Create a sample user and return its ID."""
    return user_service.create_user(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def other_user_id(user_service):
    """Create a second user whose records must never leak into the first."""
    return user_service.create_user(name="Charles Babbage", email="charles@example.com")


@pytest.fixture
def cli_runner():
    """Create a CLI runner for testing."""
    return CliRunner()
