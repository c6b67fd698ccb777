"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, username: str):
        super().__init__(
            f"User not found: {username}",
            code="USER_NOT_FOUND",
            details={"username": username},
        )


class UsernameTakenError(ValidationError):
    """
    Raised when a username is already registered.

    Used both for the pre-check before creation and for a duplicate-key
    failure reported by the store, so a lost race looks the same as a
    failed pre-check.
    """

    def __init__(self, username: str):
        super().__init__(
            f"{username} already exists",
            code="USERNAME_TAKEN",
            details={"username": username},
        )
