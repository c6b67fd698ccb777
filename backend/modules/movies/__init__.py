"""
Movies module.

Read-only access to the movie catalog: all movies, a single movie by
title, and director/genre lookups.

Public API:
- IMovieStore: Interface for catalog persistence
- Movie, Genre, Director: Catalog models
- MovieNotFoundError
"""

from .interfaces import IMovieStore
from .models import Movie, Genre, Director
from .exceptions import MovieNotFoundError

__all__ = [
    "IMovieStore",
    "Movie",
    "Genre",
    "Director",
    "MovieNotFoundError",
]
