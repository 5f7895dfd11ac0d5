"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from lifetrack.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "LIFETRACK_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".lifetrack"
DEFAULT_DB_NAME = "lifetrack.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Work out which SQLite file to use.

    An explicit path wins, then the LIFETRACK_DB_PATH environment variable,
    then ~/.lifetrack/lifetrack.db. The parent directory of the default
    location is created on demand.
    """
    if database_path:
        return Path(database_path).expanduser()

    from_env = os.environ.get(DB_PATH_ENV)
    if from_env:
        return Path(from_env).expanduser()

    DEFAULT_DB_DIR.mkdir(parents=True, exist_ok=True)
    return DEFAULT_DB_DIR / DEFAULT_DB_NAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to the SQLite file (see resolve_database_path)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
