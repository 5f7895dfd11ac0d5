"""User domain service."""

import re
from typing import Optional

from lifetrack.database.base import Database
from lifetrack.domain.entities import User as UserEntity
from lifetrack.domain.errors import ConflictError, ValidationError, duplicate_user_email
from lifetrack.domain.validation import require_text

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class UserService:
    """Service for registering users."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_user(self, name: str, email: str) -> int:
        """Register a user.

        Args:
            name: Full name
            email: Email address, stored lower-cased

        Returns:
            User ID

        Raises:
            ValidationError: If name is empty or email is malformed
            ConflictError: If a user with the same email exists
        """
        name = require_text(name, "Name")
        email = require_text(email, "Email").lower()
        if not EMAIL_PATTERN.fullmatch(email):
            raise ValidationError(f"Invalid email address '{email}'")

        if self.db.get_user_by_email(email) is not None:
            raise ConflictError(duplicate_user_email(email))

        return self.db.create_user(name=name, email=email)

    def get_user(self, user_id: int) -> Optional[UserEntity]:
        """Get user by ID."""
        return self.db.get_user(user_id)

    def list_users(self) -> list[UserEntity]:
        """List all users."""
        return self.db.list_users()
