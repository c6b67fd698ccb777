"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The store backend (Supabase or in-memory) is picked here from settings;
nothing else in the application knows which one is in use.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.users.interfaces import IUserStore, IUserService
    from modules.movies.interfaces import IMovieStore
    from modules.movies.service import MovieService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Stores passed to the constructor are used as-is; otherwise they are
    built from settings on first access.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        user_store: "IUserStore | None" = None,
        movie_store: "IMovieStore | None" = None,
    ) -> None:
        self._settings = settings
        self._user_store = user_store
        self._movie_store = movie_store
        self._hasher: "PasswordHasher | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._movie_service: "MovieService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def user_store(self) -> "IUserStore":
        """Get the user (credential) store."""
        if self._user_store is None:
            if self.settings.store_backend == "memory":
                from modules.users.memory import InMemoryUserStore
                self._user_store = InMemoryUserStore()
            else:
                from modules.users.repository import UserRepository
                from shared.database import get_supabase_client
                self._user_store = UserRepository(get_supabase_client())
        return self._user_store

    @property
    def movie_store(self) -> "IMovieStore":
        """Get the movie catalog store."""
        if self._movie_store is None:
            if self.settings.store_backend == "memory":
                from modules.movies.memory import InMemoryMovieStore
                self._movie_store = InMemoryMovieStore()
            else:
                from modules.movies.repository import MovieRepository
                from shared.database import get_supabase_client
                self._movie_store = MovieRepository(get_supabase_client())
        return self._movie_store

    @property
    def hasher(self) -> "PasswordHasher":
        """Get the password hasher."""
        if self._hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._hasher = PasswordHasher(rounds=self.settings.password_hash_rounds)
        return self._hasher

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                store=self.user_store,
                settings=self.settings,
                hasher=self.hasher,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                store=self.user_store,
                movies=self.movie_store,
                hasher=self.hasher,
            )
        return self._user_service

    @property
    def movies(self) -> "MovieService":
        """Get the movie service instance."""
        if self._movie_service is None:
            from modules.movies.service import MovieService
            self._movie_service = MovieService(self.movie_store)
        return self._movie_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_store = None
        self._movie_store = None
        self._hasher = None
        self._auth_service = None
        self._user_service = None
        self._movie_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-built container (tests wire in-memory stores this way)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_movie_service() -> "MovieService":
    """FastAPI dependency for movie service."""
    return get_container().movies


def get_user_store() -> "IUserStore":
    """FastAPI dependency for the user store (readiness checks)."""
    return get_container().user_store
