"""
In-memory user store.

Keeps records in a dict keyed by ID. Used with STORE_BACKEND=memory for
local development and by the test suite. Every method runs without an
await in between, so each call is atomic with respect to the event loop.
"""

import uuid
from datetime import date
from typing import Any, Iterable, Optional

from shared.models import User

from .exceptions import UsernameTakenError


class InMemoryUserStore:
    """IUserStore backed by a plain dict."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {u.id: u for u in users}

    def add(self, user: User) -> None:
        self._users[user.id] = user

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def list_all(self) -> list[User]:
        return list(self._users.values())

    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        email: str,
        birthdate: Optional[date] = None,
    ) -> User:
        if self._username_taken(username):
            raise UsernameTakenError(username)

        user = User(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=password_hash,
            email=email,
            birthdate=birthdate,
        )
        self._users[user.id] = user
        return user

    async def update(self, user_id: str, fields: dict[str, Any]) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None

        new_username = fields.get("username")
        if new_username and self._username_taken(new_username, exclude_id=user_id):
            raise UsernameTakenError(new_username)

        updated = user.model_copy(update=fields)
        self._users[user_id] = updated
        return updated

    async def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None

    async def add_favorite(self, user_id: str, movie_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        if movie_id in user.favorite_movies:
            return user

        updated = user.model_copy(
            update={"favorite_movies": [*user.favorite_movies, movie_id]}
        )
        self._users[user_id] = updated
        return updated

    async def remove_favorite(self, user_id: str, movie_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None

        updated = user.model_copy(
            update={"favorite_movies": [m for m in user.favorite_movies if m != movie_id]}
        )
        self._users[user_id] = updated
        return updated

    async def ping(self) -> None:
        return None

    def _username_taken(self, username: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            u.username == username and u.id != exclude_id
            for u in self._users.values()
        )
