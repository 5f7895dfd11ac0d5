"""Database layer for lifetrack application."""

from lifetrack.database.base import Database
from lifetrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
