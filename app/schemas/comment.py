"""Pydantic schemas for forum comments."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from app.schemas.common import CamelModel, LocalizedText, validate_localized_text
from app.schemas.user import AuthorSummary


class CommentCreate(CamelModel):
    """Schema for creating a comment or a reply."""
    content: LocalizedText
    parent_comment: Optional[int] = None

    @field_validator("content")
    @classmethod
    def validate_locales(cls, v: LocalizedText) -> LocalizedText:
        return validate_localized_text(v)


class CommentUpdate(CamelModel):
    """Schema for updating a comment. The locale map is replaced."""
    content: LocalizedText

    @field_validator("content")
    @classmethod
    def validate_locales(cls, v: LocalizedText) -> LocalizedText:
        return validate_localized_text(v)


class CommentResponse(CamelModel):
    """Stored comment with its full locale map."""
    id: int
    content: LocalizedText
    author: AuthorSummary
    post: int
    parent_comment: Optional[int] = None
    likes: List[int] = []
    is_edited: bool = False
    created_at: datetime
    updated_at: datetime


class LocalizedCommentResponse(CamelModel):
    """Comment projected to one locale, with direct replies for top-level comments."""
    id: int
    content: Optional[str] = None
    author: AuthorSummary
    post: int
    parent_comment: Optional[int] = None
    likes: List[int] = []
    is_edited: bool = False
    created_at: datetime
    updated_at: datetime
    replies: List["LocalizedCommentResponse"] = []
