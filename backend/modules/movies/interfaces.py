"""
Movies module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Movie, Genre, Director


@runtime_checkable
class IMovieStore(Protocol):
    """
    Interface for catalog reads.

    Implementations: MovieRepository (Supabase) and InMemoryMovieStore.
    Backend failures are raised as StoreUnavailableError.
    """

    async def list_all(self) -> list[Movie]:
        """Return the whole catalog."""
        ...

    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        """Return the movie with this identifier, or None."""
        ...

    async def find_by_title(self, title: str) -> Optional[Movie]:
        """Return the movie with this exact title, or None."""
        ...

    async def find_director(self, name: str) -> Optional[Director]:
        """Return the first director with this name, or None."""
        ...

    async def find_genre(self, name: str) -> Optional[Genre]:
        """Return the first genre with this name, or None."""
        ...
