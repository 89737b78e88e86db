"""Pydantic schemas for forum categories and locales."""

from typing import List

from app.schemas.common import CamelModel


class CategoryResponse(CamelModel):
    """Category id plus the i18n key the client renders."""
    id: str
    name_key: str


class LanguagesResponse(CamelModel):
    default: str
    supported: List[str]
