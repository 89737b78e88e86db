"""Pydantic schemas for `User` references embedded in forum payloads."""

from typing import Optional

from app.schemas.common import CamelModel


class AuthorSummary(CamelModel):
    """Populated author: the public subset of the user profile."""
    id: int
    name: str
    profile_image: Optional[str] = None
