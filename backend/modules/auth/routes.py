"""
Login endpoint.

Exchanges a username/password pair for a bearer token. No session or
cookie is created; the token is the only proof of authentication.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_auth_service
from modules.users.models import UserResponse

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse
from .exceptions import InvalidCredentialsError

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Log in with `Username` and `Password`.

    Returns the user (without password hash) and a token valid for 7 days.
    Unknown usernames and wrong passwords get the same 400 response.
    """
    try:
        user = await auth.authenticate(request.username, request.password)
    except InvalidCredentialsError:
        raise HTTPException(status_code=400, detail="Incorrect username or password")

    token = auth.issue_token(user)
    return LoginResponse(user=UserResponse.from_user(user), token=token)
