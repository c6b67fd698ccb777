"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
The environment is set before any application import: the app reads its
settings (and refuses to start without a JWT secret) at import time.
"""

import os
from datetime import datetime, timezone, timedelta

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["STORE_BACKEND"] = "memory"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container, set_container
from modules.auth.passwords import PasswordHasher
from modules.movies.memory import InMemoryMovieStore
from modules.movies.models import Movie, Genre, Director
from modules.users.memory import InMemoryUserStore
from shared.config import Settings
from shared.models import User

TEST_PASSWORD = "p@ss1234"


def create_test_token(
    user_id: str = "test-user-123",
    username: str = "testuser",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        username: Username (subject) to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    issued = now - timedelta(days=8) if expired else now
    payload = {
        "sub": username,
        "id": user_id,
        "username": username,
        "email": email,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(days=7)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers_for(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_services():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        store_backend="memory",
        password_hash_rounds=4,
    )


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def sample_movie() -> Movie:
    return Movie(
        id="movie-1",
        title="Inception",
        description="A thief who steals corporate secrets through dreams.",
        genre=Genre(name="Sci-Fi", description="Science fiction"),
        director=Director(name="Christopher Nolan", bio="British-American director"),
        actors=["Leonardo DiCaprio"],
        image_url="https://example.com/inception.jpg",
        featured=True,
    )


@pytest.fixture
def movie_store(sample_movie: Movie) -> InMemoryMovieStore:
    return InMemoryMovieStore([sample_movie])


@pytest.fixture
def container(
    settings: Settings,
    user_store: InMemoryUserStore,
    movie_store: InMemoryMovieStore,
) -> ServiceContainer:
    """Install a container wired to fresh in-memory stores."""
    container = ServiceContainer(
        settings=settings,
        user_store=user_store,
        movie_store=movie_store,
    )
    set_container(container)
    return container


@pytest.fixture
def client(container: ServiceContainer) -> TestClient:
    """Test client for a fresh app using the in-memory container."""
    return TestClient(create_app())


@pytest.fixture
def stored_user(user_store: InMemoryUserStore, hasher: PasswordHasher) -> User:
    """A user already present in the store, with password TEST_PASSWORD."""
    user = User(
        id="test-user-123",
        username="testuser",
        password_hash=hasher.hash(TEST_PASSWORD),
        email="test@example.com",
    )
    user_store.add(user)
    return user


@pytest.fixture
def auth_token(stored_user: User) -> str:
    """Create a valid auth token for the stored user."""
    return create_test_token(user_id=stored_user.id, username=stored_user.username)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return auth_headers_for(auth_token)
