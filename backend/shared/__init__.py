"""
Shared infrastructure for Kraftflix backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: The user record shared by auth and users
- repository: Base class for Supabase-backed stores

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    init_supabase_client,
    get_supabase_client,
    reset_client_cache,
)
from .exceptions import (
    KraftflixError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    StoreUnavailableError,
)
from .models import User

__all__ = [
    "Settings",
    "get_settings",
    "init_supabase_client",
    "get_supabase_client",
    "reset_client_cache",
    "KraftflixError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "StoreUnavailableError",
    "User",
]
