"""Utility for resolving user emails to IDs."""

from lifetrack.domain.user import UserService


def resolve_user(user_service: UserService, user: str | int) -> int:
    """Resolve user email or ID to user ID.

    Args:
        user_service: UserService instance
        user: User email (str) or ID (int or string representation of int)

    Returns:
        User ID

    Raises:
        ValueError: If user is not found
    """
    try:
        user_id = int(user)
    except (ValueError, TypeError):
        user_id = None

    if user_id is not None:
        if user_service.get_user(user_id) is None:
            raise ValueError(f"User ID {user_id} not found")
        return user_id

    email = str(user).strip().lower()
    for candidate in user_service.list_users():
        if candidate.email == email:
            return candidate.id

    raise ValueError(f"User '{user}' not found")
