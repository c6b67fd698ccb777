"""
Users module data models.

Request and response bodies keep the field names of the public API
(`Username`, `Email`, `FavoriteMovies`, ...). Internally everything is
snake_case; aliases do the translation in both directions.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import User

USERNAME_PATTERN = r"^[A-Za-z0-9]+$"


class RegisterUserRequest(BaseModel):
    """Request body for POST /users."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(
        ...,
        alias="Username",
        min_length=5,
        pattern=USERNAME_PATTERN,
        description="At least 5 alphanumeric characters",
    )
    password: str = Field(..., alias="Password", min_length=1)
    email: EmailStr = Field(..., alias="Email")
    birthdate: Optional[date] = Field(None, alias="Birthdate")


class UpdateUserRequest(RegisterUserRequest):
    """
    Request body for PUT /users/{username}.

    A full replacement of the profile, so the same rules as registration
    apply. The password is re-hashed on every update.
    """

    pass


class UserResponse(BaseModel):
    """
    Public view of a user record.

    Built from the stored record field by field; the password hash has no
    counterpart here.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str = Field(..., alias="Username")
    email: str = Field(..., alias="Email")
    birthdate: Optional[date] = Field(None, alias="Birthdate")
    favorite_movies: list[str] = Field(
        default_factory=list,
        alias="FavoriteMovies",
    )

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            birthdate=user.birthdate,
            favorite_movies=list(user.favorite_movies),
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
