"""
Users module.

Registration, profile management and favorite movies. The user store
defined here is also the credential store read by the auth module.

Public API:
- IUserStore: Interface for user persistence
- IUserService: Interface for user operations
- Request/response models for the user routes
- User exceptions: UserNotFoundError, UsernameTakenError
"""

from .interfaces import IUserStore, IUserService
from .models import (
    RegisterUserRequest,
    UpdateUserRequest,
    UserResponse,
    MessageResponse,
)
from .exceptions import UserNotFoundError, UsernameTakenError

__all__ = [
    # Interfaces
    "IUserStore",
    "IUserService",
    # Models
    "RegisterUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "MessageResponse",
    # Exceptions
    "UserNotFoundError",
    "UsernameTakenError",
]
