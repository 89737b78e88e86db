"""Pydantic schemas for Post (Community Forum)."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.models.post import PostCategory, PostStatus
from app.schemas.common import CamelModel, LocalizedText, validate_localized_text
from app.schemas.user import AuthorSummary
from app.schemas.comment import LocalizedCommentResponse


class AttachmentSchema(CamelModel):
    """File attached to a post."""
    file_name: str = Field(..., min_length=1, max_length=255)
    file_url: str = Field(..., min_length=1, max_length=1000)
    file_type: Optional[str] = Field(None, max_length=100)


class PostCreate(CamelModel):
    """Schema for creating a post.

    `title` and `content` carry every locale the caller wants stored.
    """
    title: LocalizedText = Field(..., description="Title per locale, e.g. {\"en\": \"Hello\"}")
    content: LocalizedText = Field(..., description="Body per locale")
    category: PostCategory
    tags: List[str] = Field(default_factory=list)
    attachments: List[AttachmentSchema] = Field(default_factory=list)
    is_sticky: bool = False
    is_announcement: bool = False
    status: PostStatus = PostStatus.PUBLISHED

    @field_validator("title", "content")
    @classmethod
    def validate_locales(cls, v: LocalizedText) -> LocalizedText:
        return validate_localized_text(v)

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: List[str]) -> List[str]:
        return [tag.strip() for tag in v if tag and tag.strip()]

    @field_validator("is_sticky", "is_announcement", mode="before")
    @classmethod
    def null_flag_is_false(cls, v):
        return False if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def null_status_is_published(cls, v):
        return PostStatus.PUBLISHED if v is None else v


class PostUpdate(PostCreate):
    """Schema for updating a post. Replaces every mutable field; locale maps are not merged."""
    pass


class PostResponse(CamelModel):
    """Stored post with full locale maps (returned by mutations)."""
    id: int
    title: LocalizedText
    content: LocalizedText
    author: AuthorSummary
    category: PostCategory
    tags: List[str] = []
    likes: List[int] = []
    views: int = 0
    attachments: List[AttachmentSchema] = []
    is_sticky: bool = False
    is_announcement: bool = False
    status: PostStatus
    created_at: datetime
    updated_at: datetime


class LocalizedPostResponse(CamelModel):
    """Post projected to one locale. A title or body missing in both locales is null."""
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    author: AuthorSummary
    category: PostCategory
    tags: List[str] = []
    likes: List[int] = []
    views: int = 0
    attachments: List[AttachmentSchema] = []
    is_sticky: bool = False
    is_announcement: bool = False
    status: PostStatus
    comment_count: int = 0
    created_at: datetime
    updated_at: datetime


class PostDetailResponse(LocalizedPostResponse):
    """Localized post with top-level comments and their direct replies."""
    comments: List[LocalizedCommentResponse] = []


class PaginationInfo(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class PostListResponse(CamelModel):
    """Sticky posts plus one page of regular posts."""
    sticky_posts: List[LocalizedPostResponse]
    posts: List[LocalizedPostResponse]
    pagination: PaginationInfo


class LikeToggleResponse(CamelModel):
    """Outcome of a like toggle."""
    liked: bool
    like_count: int


class PostListParams(CamelModel):
    """Filters, sort and pagination for the post listing."""
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
    sort: str = "createdAt"
    order: str = Field("desc", pattern="^(asc|desc)$")
    category: Optional[PostCategory] = None
    search: Optional[str] = None
    tag: Optional[str] = None
    lang: str = "en"
