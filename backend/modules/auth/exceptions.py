"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
layer, which turns them into HTTP responses. None of them carries data
about a user other than the one making the request.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a username/password pair does not match a stored user.

    Unknown username and wrong password share this class and message;
    `reason` is kept in details for logs only.
    """

    def __init__(self, reason: str):
        super().__init__(
            "Incorrect username or password",
            code="INVALID_CREDENTIALS",
            details={"reason": reason},
        )

    @property
    def reason(self) -> str:
        return self.details["reason"]


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(AuthenticationError):
    """Raised when a token cannot be parsed or lacks required claims."""

    def __init__(self, message: str = "Malformed authentication token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class BadSignatureError(AuthenticationError):
    """Raised when a token's signature does not match the signing secret."""

    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message, code="BAD_SIGNATURE")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UnknownSubjectError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, subject: str):
        super().__init__(
            "Token subject does not exist",
            code="UNKNOWN_SUBJECT",
            details={"subject": subject},
        )


class PermissionDeniedError(AuthorizationError):
    """Raised when an authenticated user acts on another user's resources."""

    def __init__(self, username: str, owner: str):
        super().__init__(
            "Permission denied",
            code="PERMISSION_DENIED",
            details={"username": username, "owner": owner},
        )
