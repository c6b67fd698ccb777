"""
Bearer token authentication and ownership checks.

Two FastAPI dependencies gate the protected routes:
- get_current_user: token → user record, or 401
- require_owner: the user must match the {username} path parameter, or 403

Both run before the route handler, so a rejected request never reaches
the data store through the handler.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import User
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import ExpiredTokenError, PermissionDeniedError

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> User:
    """
    Dependency that requires authentication.

    Validates the bearer token, resolves it to the stored user and
    attaches that user to `request.state.user`.

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"username": user.username}
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    try:
        user = await auth.validate_token(credentials.credentials)
    except ExpiredTokenError:
        raise AuthError("Token has expired")
    except AuthenticationError as e:
        logger.debug(f"Token rejected: {e.code}")
        raise AuthError("Invalid token")

    request.state.user = user
    return user


async def require_owner(
    username: str,
    user: User = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> User:
    """
    Dependency for routes under /users/{username}.

    Usage:
        @router.delete("/{username}")
        async def delete_user(username: str, user: User = Depends(require_owner)):
            ...
    """
    try:
        auth.ensure_owner(user, username)
    except PermissionDeniedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Permission denied",
        )
    return user

