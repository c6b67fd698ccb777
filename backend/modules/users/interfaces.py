"""
Users module interfaces.

IUserStore is the credential store contract: the auth module reads it to
verify logins and tokens, the users module reads and writes it. Any
backend failure is raised as StoreUnavailableError.
"""

from datetime import date
from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import User

from .models import RegisterUserRequest, UpdateUserRequest


@runtime_checkable
class IUserStore(Protocol):
    """
    Interface for user persistence.

    Implementations: UserRepository (Supabase) and InMemoryUserStore.
    """

    async def find_by_username(self, username: str) -> Optional[User]:
        """Return the user with this exact username, or None."""
        ...

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this identifier, or None."""
        ...

    async def list_all(self) -> list[User]:
        """Return every stored user."""
        ...

    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        email: str,
        birthdate: Optional[date] = None,
    ) -> User:
        """
        Insert a new user and return it with its assigned identifier.

        Raises:
            UsernameTakenError: If the username is already stored
        """
        ...

    async def update(self, user_id: str, fields: dict[str, Any]) -> Optional[User]:
        """
        Apply field changes and return the updated user, or None if gone.

        Raises:
            UsernameTakenError: If a username change collides
        """
        ...

    async def delete(self, user_id: str) -> bool:
        """Delete a user. Returns False if nothing was deleted."""
        ...

    async def add_favorite(self, user_id: str, movie_id: str) -> Optional[User]:
        """Add a movie ID to the user's favorites (no-op if present)."""
        ...

    async def remove_favorite(self, user_id: str, movie_id: str) -> Optional[User]:
        """Remove a movie ID from the user's favorites (no-op if absent)."""
        ...

    async def ping(self) -> None:
        """
        Check that the store is reachable.

        Raises:
            StoreUnavailableError: If it is not
        """
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.

    Ownership is enforced before these methods are called; they assume
    the caller is allowed to act on the named user.
    """

    async def register(self, request: RegisterUserRequest) -> User:
        """
        Register a new user with a freshly hashed password.

        Raises:
            UsernameTakenError: If the username exists (pre-check or race)
        """
        ...

    async def list_users(self) -> list[User]:
        """List all users."""
        ...

    async def get_user(self, username: str) -> User:
        """
        Get a user by username.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...

    async def update_user(self, username: str, request: UpdateUserRequest) -> User:
        """
        Replace a user's profile.

        Raises:
            UserNotFoundError: If no such user exists
            UsernameTakenError: If the new username belongs to someone else
        """
        ...

    async def delete_user(self, username: str) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...

    async def add_favorite(self, username: str, movie_id: str) -> User:
        """
        Add a movie to the user's favorites.

        Raises:
            UserNotFoundError: If no such user exists
            MovieNotFoundError: If the movie is not in the catalog
        """
        ...

    async def remove_favorite(self, username: str, movie_id: str) -> User:
        """
        Remove a movie from the user's favorites.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...
