"""
Movies module exceptions.
"""

from shared.exceptions import NotFoundError


class MovieNotFoundError(NotFoundError):
    """Raised when a catalog lookup finds nothing."""

    def __init__(self, kind: str, key: str):
        super().__init__(
            f"{kind.capitalize()} not found: {key}",
            code="MOVIE_NOT_FOUND",
            details={"kind": kind, "key": key},
        )
