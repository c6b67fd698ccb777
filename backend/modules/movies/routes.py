"""
Movie catalog endpoints.

Listing the catalog is public; every other lookup needs a valid token
but no ownership check.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_movie_service
from api.middleware.auth import get_current_user
from shared.models import User

from .models import Movie, Genre, Director
from .service import MovieService
from .exceptions import MovieNotFoundError

router = APIRouter()


@router.get("", response_model=list[Movie])
async def list_movies(
    service: MovieService = Depends(get_movie_service),
) -> list[Movie]:
    """List the whole catalog."""
    return await service.list_movies()


@router.get("/directors/{name}", response_model=Director)
async def get_director(
    name: str,
    user: User = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> Director:
    """Get a director by name."""
    try:
        return await service.get_director(name)
    except MovieNotFoundError:
        raise HTTPException(status_code=404, detail="Director not found")


@router.get("/genres/{name}", response_model=Genre)
async def get_genre(
    name: str,
    user: User = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> Genre:
    """Get a genre by name."""
    try:
        return await service.get_genre(name)
    except MovieNotFoundError:
        raise HTTPException(status_code=404, detail="Genre not found")


@router.get("/{title}", response_model=Movie)
async def get_movie(
    title: str,
    user: User = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """Get a single movie by its title."""
    try:
        return await service.get_movie(title)
    except MovieNotFoundError:
        raise HTTPException(status_code=404, detail="Movie not found")
