"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Error body for failures raised outside the route handlers (e.g. store outages)."""

    error: str
    detail: Optional[str] = None
    code: Optional[str] = None
