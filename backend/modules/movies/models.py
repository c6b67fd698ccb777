"""
Movie catalog models.

Serialized with the catalog's public field names (`Title`, `Genre.Name`,
`Director.Bio`, ...).
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Genre(BaseModel):
    """A movie genre."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., alias="Name")
    description: Optional[str] = Field(None, alias="Description")


class Director(BaseModel):
    """A movie director."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., alias="Name")
    bio: Optional[str] = Field(None, alias="Bio")


class Movie(BaseModel):
    """A catalog entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id")
    title: str = Field(..., alias="Title")
    description: str = Field(..., alias="Description")
    genre: Optional[Genre] = Field(None, alias="Genre")
    director: Optional[Director] = Field(None, alias="Director")
    actors: list[str] = Field(default_factory=list, alias="Actors")
    image_url: Optional[str] = Field(None, alias="ImageUrl")
    featured: bool = Field(default=False, alias="Featured")
