"""
Authentication service implementation.

Credential verification, token issue/validation and the ownership rule,
on top of the user store.
"""

import logging
from datetime import timedelta

from fastapi.concurrency import run_in_threadpool

from shared.config import Settings
from shared.models import User
from modules.users.interfaces import IUserStore

from .interfaces import IAuthService
from .passwords import PasswordHasher
from .tokens import decode_token, issue_token
from .exceptions import (
    InvalidCredentialsError,
    PermissionDeniedError,
    UnknownSubjectError,
)

logger = logging.getLogger(__name__)


def authorize(user: User, owner_username: str) -> bool:
    """
    Ownership rule: a user may only act on resources under their own name.

    Exact username match. There are no roles and no overrides.
    """
    return user.username == owner_username


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Stateless apart from the signing secret read from settings: every
    request is verified from its token plus one store lookup.
    """

    def __init__(
        self,
        store: IUserStore,
        settings: Settings,
        hasher: PasswordHasher,
    ):
        self._store = store
        self._hasher = hasher
        self._secret = settings.jwt_secret
        self._token_ttl = timedelta(days=settings.token_ttl_days)

    async def authenticate(self, username: str, password: str) -> User:
        """
        Look up the user, then check the password.

        Both rejection paths raise the same error; only the logged reason
        differs.
        """
        user = await self._store.find_by_username(username)
        if user is None:
            await run_in_threadpool(self._hasher.burn, password)
            logger.info(f"Login rejected for {username!r}: incorrect username")
            raise InvalidCredentialsError("incorrect username")

        if not await run_in_threadpool(self._hasher.verify, password, user.password_hash):
            logger.info(f"Login rejected for {username!r}: incorrect password")
            raise InvalidCredentialsError("incorrect password")

        logger.info(f"Login accepted for {username!r}")
        return user

    def issue_token(self, user: User) -> str:
        return issue_token(user, self._secret, expires_in=self._token_ttl)

    async def validate_token(self, token: str) -> User:
        """
        Decode the token, then resolve its subject against the store.

        A token whose user was deleted, or renamed since the token was
        issued, is rejected even though it is correctly signed.
        """
        payload = decode_token(token, self._secret)

        user = await self._store.find_by_id(payload.id)
        if user is None or user.username != payload.sub:
            logger.debug(f"Token subject {payload.sub!r} no longer resolves")
            raise UnknownSubjectError(payload.sub)

        return user

    def ensure_owner(self, user: User, owner_username: str) -> None:
        if not authorize(user, owner_username):
            logger.info(f"Permission denied: {user.username!r} on {owner_username!r}")
            raise PermissionDeniedError(user.username, owner_username)
