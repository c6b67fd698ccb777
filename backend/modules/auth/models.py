"""
Authentication module data models.

These models define the login request/response bodies and the claims
carried by a bearer token.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from modules.users.models import UserResponse


class TokenPayload(BaseModel):
    """
    Decoded bearer token claims.

    `sub` is the username; `id` is the identifier used to resolve the
    user on every request.
    """

    model_config = ConfigDict(extra="ignore")

    sub: str = Field(..., min_length=1, description="Subject (username)")
    id: str = Field(..., min_length=1, description="User identifier")
    username: str = Field(..., description="Username at issue time")
    email: Optional[str] = Field(None, description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., alias="Username")
    password: str = Field(..., alias="Password")


class LoginResponse(BaseModel):
    """Successful login: the public user and a signed token."""

    user: UserResponse
    token: str
