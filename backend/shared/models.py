"""
Shared data models used across modules.

The user record is owned by the credential store but read by both the
auth module (credential and token verification) and the users module
(profile management), so it lives here rather than in either of them.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A stored user record.

    This is the identity attached to every authenticated request.
    The password hash never leaves the backend: response models copy
    the public fields explicitly instead of serializing this model.
    """

    id: str = Field(..., description="Opaque, immutable user identifier")
    username: str = Field(..., description="Unique public username (token subject)")
    password_hash: str = Field(..., repr=False, description="bcrypt hash, never plaintext")
    email: str = Field(..., description="User's email address")
    birthdate: Optional[date] = Field(None, description="Optional birth date")
    favorite_movies: list[str] = Field(
        default_factory=list,
        description="Movie IDs, set semantics",
    )

    model_config = {
        "frozen": True,  # Records change only through the store
        "extra": "ignore",  # Ignore extra columns from the database
    }
