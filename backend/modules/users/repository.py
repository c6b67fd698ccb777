"""
User repository for database access.

Encapsulates the Supabase queries and data mapping for the `users` table:

    id              uuid primary key default gen_random_uuid()
    username        text unique not null
    password_hash   text not null
    email           text not null
    birthdate       date
    favorite_movies text[] not null default '{}'
"""

from datetime import date
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.models import User
from shared.repository import BaseRepository, UNIQUE_VIOLATION

from .exceptions import UsernameTakenError

TABLE = "users"


class UserRepository(BaseRepository[User]):
    """
    IUserStore backed by Supabase.

    Note: This repository does NOT perform authorization checks.
    Ownership is enforced by the API layer before any call reaches it.
    """

    async def find_by_username(self, username: str) -> Optional[User]:
        query = self._db.table(TABLE).select("*").eq("username", username).limit(1)
        result = await self._execute(query, "users.find_by_username")
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def find_by_id(self, user_id: str) -> Optional[User]:
        query = self._db.table(TABLE).select("*").eq("id", user_id).limit(1)
        result = await self._execute(query, "users.find_by_id")
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def list_all(self) -> list[User]:
        query = self._db.table(TABLE).select("*").order("username")
        result = await self._execute(query, "users.list_all")
        return [self._map_to_user(row) for row in result.data]

    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        email: str,
        birthdate: Optional[date] = None,
    ) -> User:
        data = self._to_row({
            "username": username,
            "password_hash": password_hash,
            "email": email,
            "birthdate": birthdate,
            "favorite_movies": [],
        })
        try:
            result = await self._execute(
                self._db.table(TABLE).insert(data), "users.create"
            )
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UsernameTakenError(username) from e
            raise
        return self._map_to_user(result.data[0])

    async def update(self, user_id: str, fields: dict[str, Any]) -> Optional[User]:
        query = self._db.table(TABLE).update(self._to_row(fields)).eq("id", user_id)
        try:
            result = await self._execute(query, "users.update")
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UsernameTakenError(fields.get("username", "")) from e
            raise
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def delete(self, user_id: str) -> bool:
        query = self._db.table(TABLE).delete().eq("id", user_id)
        result = await self._execute(query, "users.delete")
        return bool(result.data)

    async def add_favorite(self, user_id: str, movie_id: str) -> Optional[User]:
        user = await self.find_by_id(user_id)
        if user is None:
            return None
        if movie_id in user.favorite_movies:
            return user
        return await self.update(
            user_id, {"favorite_movies": [*user.favorite_movies, movie_id]}
        )

    async def remove_favorite(self, user_id: str, movie_id: str) -> Optional[User]:
        user = await self.find_by_id(user_id)
        if user is None:
            return None
        if movie_id not in user.favorite_movies:
            return user
        return await self.update(
            user_id,
            {"favorite_movies": [m for m in user.favorite_movies if m != movie_id]},
        )

    async def ping(self) -> None:
        await self._execute(self._db.table(TABLE).select("id").limit(1), "users.ping")

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_row(fields: dict[str, Any]) -> dict[str, Any]:
        """Convert model values to JSON-safe column values."""
        row = dict(fields)
        if isinstance(row.get("birthdate"), date):
            row["birthdate"] = row["birthdate"].isoformat()
        return row

    @staticmethod
    def _map_to_user(row: dict[str, Any]) -> User:
        """Map a database row to a User model."""
        return User(
            id=str(row["id"]),
            username=row["username"],
            password_hash=row["password_hash"],
            email=row["email"],
            birthdate=row.get("birthdate"),
            favorite_movies=[str(m) for m in row.get("favorite_movies") or []],
        )
