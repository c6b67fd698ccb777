"""
Movie catalog service.
"""

from .interfaces import IMovieStore
from .models import Movie, Genre, Director
from .exceptions import MovieNotFoundError


class MovieService:
    """Catalog lookups that turn a missing record into MovieNotFoundError."""

    def __init__(self, store: IMovieStore):
        self._store = store

    async def list_movies(self) -> list[Movie]:
        return await self._store.list_all()

    async def get_movie(self, title: str) -> Movie:
        movie = await self._store.find_by_title(title)
        if movie is None:
            raise MovieNotFoundError("movie", title)
        return movie

    async def get_director(self, name: str) -> Director:
        director = await self._store.find_director(name)
        if director is None:
            raise MovieNotFoundError("director", name)
        return director

    async def get_genre(self, name: str) -> Genre:
        genre = await self._store.find_genre(name)
        if genre is None:
            raise MovieNotFoundError("genre", name)
        return genre
