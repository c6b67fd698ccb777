"""
In-memory movie catalog.

Seeded through the constructor; there is no write path in the API.
"""

from typing import Iterable, Optional

from .models import Movie, Genre, Director


class InMemoryMovieStore:
    """IMovieStore backed by a plain dict."""

    def __init__(self, movies: Iterable[Movie] = ()) -> None:
        self._movies: dict[str, Movie] = {m.id: m for m in movies}

    def add(self, movie: Movie) -> None:
        self._movies[movie.id] = movie

    async def list_all(self) -> list[Movie]:
        return list(self._movies.values())

    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        return self._movies.get(movie_id)

    async def find_by_title(self, title: str) -> Optional[Movie]:
        return next((m for m in self._movies.values() if m.title == title), None)

    async def find_director(self, name: str) -> Optional[Director]:
        return next(
            (m.director for m in self._movies.values()
             if m.director and m.director.name == name),
            None,
        )

    async def find_genre(self, name: str) -> Optional[Genre]:
        return next(
            (m.genre for m in self._movies.values()
             if m.genre and m.genre.name == name),
            None,
        )
