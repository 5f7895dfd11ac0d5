"""Tests for UserService and user resolution."""

import pytest

from lifetrack.domain.errors import ConflictError, ValidationError
from lifetrack.utils.user_resolver import resolve_user


def test_create_user(user_service):
    user_id = user_service.create_user(name="Ada Lovelace", email="Ada@Example.com")

    user = user_service.get_user(user_id)
    assert user.name == "Ada Lovelace"
    assert user.email == "ada@example.com"
    assert user.created_at is not None


def test_duplicate_email_is_rejected(user_service, user_id):
    with pytest.raises(ConflictError, match="already exists"):
        user_service.create_user(name="Impostor", email="ADA@example.com")


@pytest.mark.parametrize("email", ["", "ada", "ada@example", "ada @example.com"])
def test_invalid_email_is_rejected(user_service, email):
    with pytest.raises(ValidationError):
        user_service.create_user(name="Ada", email=email)


def test_blank_name_is_rejected(user_service):
    with pytest.raises(ValidationError, match="Name is required"):
        user_service.create_user(name="  ", email="ada@example.com")


def test_list_users_sorted_by_name(user_service, user_id, other_user_id):
    names = [user.name for user in user_service.list_users()]

    assert names == ["Ada Lovelace", "Charles Babbage"]


def test_get_missing_user(user_service):
    assert user_service.get_user(999) is None


class TestResolveUser:
    def test_by_id(self, user_service, user_id):
        assert resolve_user(user_service, user_id) == user_id
        assert resolve_user(user_service, str(user_id)) == user_id

    def test_by_email(self, user_service, user_id):
        assert resolve_user(user_service, "ADA@example.com") == user_id

    def test_unknown_id(self, user_service):
        with pytest.raises(ValueError, match="User ID 42 not found"):
            resolve_user(user_service, 42)

    def test_unknown_email(self, user_service, user_id):
        with pytest.raises(ValueError, match="not found"):
            resolve_user(user_service, "nobody@example.com")
