"""
Bearer token issue and decode.

Tokens are HS256-signed JWTs. They are self-contained: nothing is stored
server-side, and a token stops being valid at `exp` or as soon as the
signing secret changes.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError

from shared.models import User

from .models import TokenPayload
from .exceptions import (
    BadSignatureError,
    ExpiredTokenError,
    MalformedTokenError,
    MissingTokenError,
)

ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(days=7)
REQUIRED_CLAIMS = ["sub", "id", "iat", "exp"]


def issue_token(
    user: User,
    secret: str,
    *,
    expires_in: timedelta = TOKEN_LIFETIME,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Sign a token for a user who has just been authenticated.

    Args:
        user: The authenticated user
        secret: Process-wide signing secret
        expires_in: Lifetime of the token (7 days unless overridden)
        issued_at: Issue time, defaults to now

    Returns:
        Compact JWS string
    """
    now = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": user.username,
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_token(token: str, secret: str) -> TokenPayload:
    """
    Check a token's structure, signature and expiry, in that order.

    Pure function: no store access. Resolving the subject to a current
    user is the caller's job.

    Raises:
        MissingTokenError: If the token is empty
        MalformedTokenError: If it cannot be parsed or lacks claims
        BadSignatureError: If the signature does not match `secret`
        ExpiredTokenError: If `exp` is in the past
    """
    if not token:
        raise MissingTokenError()

    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidSignatureError:
        raise BadSignatureError()
    except jwt.InvalidTokenError as e:
        raise MalformedTokenError(f"Malformed authentication token: {e}")

    try:
        return TokenPayload(**claims)
    except ValidationError as e:
        raise MalformedTokenError(f"Malformed authentication token: {e.error_count()} invalid claims")
