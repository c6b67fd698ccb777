"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import User


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def authenticate(self, username: str, password: str) -> User:
        """
        Verify a username/password pair against the credential store.

        Args:
            username: Submitted username
            password: Submitted plaintext password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: Unknown username or wrong password
            StoreUnavailableError: If the store lookup fails
        """
        ...

    def issue_token(self, user: User) -> str:
        """
        Sign a bearer token for an authenticated user.

        Only call this with a user returned by authenticate().
        """
        ...

    async def validate_token(self, token: str) -> User:
        """
        Validate a bearer token and resolve it to the current user record.

        Args:
            token: Bearer token from the Authorization header

        Returns:
            The user named by the token

        Raises:
            AuthenticationError: If the token is missing, malformed, badly
                signed, expired, or names a user that no longer exists
            StoreUnavailableError: If the store lookup fails
        """
        ...

    def ensure_owner(self, user: User, owner_username: str) -> None:
        """
        Check that the authenticated user owns the requested resource.

        Raises:
            PermissionDeniedError: If the usernames differ
        """
        ...
