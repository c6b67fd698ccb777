"""
Authentication module.

Handles password hashing, credential verification, bearer token issue and
validation, and the ownership rule for user-owned resources.

Public API:
- IAuthService: Interface for auth operations
- PasswordHasher: bcrypt hashing
- issue_token / decode_token: JWT handling
- authorize: Ownership rule
- Auth exceptions: InvalidCredentialsError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenPayload, LoginRequest, LoginResponse
from .passwords import PasswordHasher
from .tokens import issue_token, decode_token, TOKEN_LIFETIME
from .service import authorize
from .exceptions import (
    InvalidCredentialsError,
    MissingTokenError,
    MalformedTokenError,
    BadSignatureError,
    ExpiredTokenError,
    UnknownSubjectError,
    PermissionDeniedError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenPayload",
    "LoginRequest",
    "LoginResponse",
    # Building blocks
    "PasswordHasher",
    "issue_token",
    "decode_token",
    "TOKEN_LIFETIME",
    "authorize",
    # Exceptions
    "InvalidCredentialsError",
    "MissingTokenError",
    "MalformedTokenError",
    "BadSignatureError",
    "ExpiredTokenError",
    "UnknownSubjectError",
    "PermissionDeniedError",
]
