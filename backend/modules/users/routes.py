"""
User endpoints.

Registration is open. Listing users needs a valid token. Everything under
/users/{username} additionally requires the token to belong to that user;
a mismatch is rejected before the handler touches the store.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_user_service
from api.middleware.auth import get_current_user, require_owner
from shared.models import User

from .interfaces import IUserService
from .models import (
    RegisterUserRequest,
    UpdateUserRequest,
    UserResponse,
    MessageResponse,
)
from .exceptions import UserNotFoundError, UsernameTakenError
from modules.movies.exceptions import MovieNotFoundError

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
async def register_user(
    request: RegisterUserRequest,
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Register a new user.

    Username: at least 5 alphanumeric characters. The password is stored
    as a bcrypt hash only.
    """
    try:
        user = await service.register(request)
    except UsernameTakenError:
        raise HTTPException(status_code=400, detail=f"{request.username} already exists")
    return UserResponse.from_user(user)


@router.get("", response_model=list[UserResponse])
async def list_users(
    user: User = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users. Requires authentication, no ownership."""
    return [UserResponse.from_user(u) for u in await service.list_users()]


@router.get("/{username}", response_model=UserResponse)
async def get_user(
    username: str,
    user: User = Depends(require_owner),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Get your own profile."""
    try:
        return UserResponse.from_user(await service.get_user(username))
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.put("/{username}", response_model=UserResponse)
async def update_user(
    username: str,
    request: UpdateUserRequest,
    user: User = Depends(require_owner),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Replace your own profile.

    Changing the username invalidates existing tokens; log in again
    with the new name.
    """
    try:
        updated = await service.update_user(username, request)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except UsernameTakenError:
        raise HTTPException(status_code=400, detail=f"{request.username} already exists")
    return UserResponse.from_user(updated)


@router.delete("/{username}", response_model=MessageResponse)
async def delete_user(
    username: str,
    user: User = Depends(require_owner),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete your own account."""
    try:
        await service.delete_user(username)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail=f"{username} was not found")
    return MessageResponse(message=f"{username} was deleted.")


@router.post("/{username}/movies/{movie_id}", response_model=UserResponse)
async def add_favorite_movie(
    username: str,
    movie_id: str,
    user: User = Depends(require_owner),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Add a movie to your favorites. Adding it twice is a no-op."""
    try:
        updated = await service.add_favorite(username, movie_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except MovieNotFoundError:
        raise HTTPException(status_code=404, detail="Movie not found")
    return UserResponse.from_user(updated)


@router.delete("/{username}/movies/{movie_id}", response_model=UserResponse)
async def remove_favorite_movie(
    username: str,
    movie_id: str,
    user: User = Depends(require_owner),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Remove a movie from your favorites."""
    try:
        updated = await service.remove_favorite(username, movie_id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.from_user(updated)
