"""
Tests for shared models.
"""

import pytest
from datetime import date
from pydantic import ValidationError

from shared.models import User


class TestUser:
    """Tests for the User record shared by auth and users."""

    def test_create_with_required_fields(self):
        """Should create user with only required fields."""
        user = User(
            id="user-123",
            username="alice",
            password_hash="$2b$04$hash",
            email="alice@example.com",
        )
        assert user.birthdate is None
        assert user.favorite_movies == []

    def test_parses_birthdate(self):
        user = User(
            id="user-123",
            username="alice",
            password_hash="$2b$04$hash",
            email="alice@example.com",
            birthdate="1990-04-01",
        )
        assert user.birthdate == date(1990, 4, 1)

    def test_is_immutable(self):
        """Records change only through the store."""
        user = User(id="u", username="alice", password_hash="h", email="a@example.com")
        with pytest.raises(ValidationError):
            user.username = "mallory"

    def test_ignores_extra_columns(self):
        user = User(
            id="u",
            username="alice",
            password_hash="h",
            email="a@example.com",
            created_at="2024-01-01T00:00:00Z",
        )
        assert not hasattr(user, "created_at")

    def test_password_hash_required(self):
        with pytest.raises(ValidationError):
            User(id="u", username="alice", email="a@example.com")
