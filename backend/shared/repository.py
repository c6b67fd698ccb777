"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of backend failures into
StoreUnavailableError.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from .exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() to run a query and normalize failures

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class MovieRepository(BaseRepository[Movie]):
            async def find_by_id(self, movie_id: str) -> Optional[Movie]:
                query = self._db.table("movies").select("*").eq("id", movie_id)
                result = await self._execute(query, "movies.find_by_id")
                if not result.data:
                    return None
                return self._map_to_movie(result.data[0])
    """

    def __init__(self, db: AsyncClient) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase AsyncClient instance for database operations.
        """
        self._db = db

    async def _execute(self, query: Any, operation: str) -> Any:
        """
        Await a PostgREST query builder.

        Unique violations are re-raised untouched so subclasses can map them
        to a domain error. Everything else becomes StoreUnavailableError.
        """
        try:
            return await query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise
            logger.error(f"Store error during {operation}: {e.message}")
            raise StoreUnavailableError(operation=operation) from e
        except httpx.HTTPError as e:
            logger.error(f"Store unreachable during {operation}: {e}")
            raise StoreUnavailableError(operation=operation) from e
