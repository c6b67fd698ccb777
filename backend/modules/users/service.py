"""
User service implementation.

Registration, profile updates and favorites on top of IUserStore.
Ownership has already been checked by the API layer when these run.
"""

import logging

from fastapi.concurrency import run_in_threadpool

from shared.models import User
from modules.auth.passwords import PasswordHasher
from modules.movies.interfaces import IMovieStore
from modules.movies.exceptions import MovieNotFoundError

from .interfaces import IUserStore, IUserService
from .models import RegisterUserRequest, UpdateUserRequest
from .exceptions import UserNotFoundError, UsernameTakenError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User operations backed by a user store and the movie catalog."""

    def __init__(
        self,
        store: IUserStore,
        movies: IMovieStore,
        hasher: PasswordHasher,
    ):
        self._store = store
        self._movies = movies
        self._hasher = hasher

    async def register(self, request: RegisterUserRequest) -> User:
        """
        Check-then-create. If another request wins the race between the two
        steps, the store's duplicate-key failure raises the same error as
        the pre-check.
        """
        if await self._store.find_by_username(request.username) is not None:
            raise UsernameTakenError(request.username)

        password_hash = await run_in_threadpool(self._hasher.hash, request.password)
        user = await self._store.create(
            username=request.username,
            password_hash=password_hash,
            email=str(request.email),
            birthdate=request.birthdate,
        )
        logger.info(f"Registered user {user.username!r}")
        return user

    async def list_users(self) -> list[User]:
        return await self._store.list_all()

    async def get_user(self, username: str) -> User:
        user = await self._store.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user

    async def update_user(self, username: str, request: UpdateUserRequest) -> User:
        user = await self.get_user(username)

        if request.username != username:
            if await self._store.find_by_username(request.username) is not None:
                raise UsernameTakenError(request.username)

        password_hash = await run_in_threadpool(self._hasher.hash, request.password)
        updated = await self._store.update(
            user.id,
            {
                "username": request.username,
                "password_hash": password_hash,
                "email": str(request.email),
                "birthdate": request.birthdate,
            },
        )
        if updated is None:
            raise UserNotFoundError(username)
        return updated

    async def delete_user(self, username: str) -> None:
        user = await self.get_user(username)
        if not await self._store.delete(user.id):
            raise UserNotFoundError(username)
        logger.info(f"Deleted user {username!r}")

    async def add_favorite(self, username: str, movie_id: str) -> User:
        user = await self.get_user(username)
        if await self._movies.find_by_id(movie_id) is None:
            raise MovieNotFoundError("movie", movie_id)

        updated = await self._store.add_favorite(user.id, movie_id)
        if updated is None:
            raise UserNotFoundError(username)
        return updated

    async def remove_favorite(self, username: str, movie_id: str) -> User:
        user = await self.get_user(username)
        updated = await self._store.remove_favorite(user.id, movie_id)
        if updated is None:
            raise UserNotFoundError(username)
        return updated
