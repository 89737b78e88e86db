"""Post model for the community forum."""

from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column,
    Integer,
    String,
    JSON,
    TIMESTAMP,
    ForeignKey,
    Index,
    Boolean,
    UniqueConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from ..database import Base


class PostCategory(str, Enum):
    """Forum post categories."""
    GENERAL = "general"
    ORGANIC_FARMING = "organic_farming"
    COW_CARE = "cow_care"
    PRODUCT_INFO = "product_info"
    MARKET_TRENDS = "market_trends"
    BIODIVERSITY = "biodiversity"
    TECHNICAL = "technical"


# i18n resource keys rendered by the web client
CATEGORY_NAME_KEYS = {
    PostCategory.GENERAL: "forum.categories.general",
    PostCategory.ORGANIC_FARMING: "forum.categories.organicFarming",
    PostCategory.COW_CARE: "forum.categories.cowCare",
    PostCategory.PRODUCT_INFO: "forum.categories.productInfo",
    PostCategory.MARKET_TRENDS: "forum.categories.marketTrends",
    PostCategory.BIODIVERSITY: "forum.categories.biodiversity",
    PostCategory.TECHNICAL: "forum.categories.technical",
}


class PostStatus(str, Enum):
    """Publication state. Only published posts are listed."""
    PUBLISHED = "published"
    DRAFT = "draft"
    ARCHIVED = "archived"


class Post(Base):
    """Forum post with per-locale title and content."""

    __tablename__ = "forum_posts"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Post Content, {"en": "...", "hi": "..."}
    title = Column(JSON, nullable=False)
    content = Column(JSON, nullable=False)
    category = Column(
        SQLEnum(PostCategory, name="forum_post_category", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True
    )
    # [{"fileName": ..., "fileUrl": ..., "fileType": ...}]
    attachments = Column(JSON, nullable=False, default=list)

    # Metadata
    views = Column(Integer, nullable=False, default=0)
    is_sticky = Column(Boolean, nullable=False, default=False, index=True)
    is_announcement = Column(Boolean, nullable=False, default=False)
    status = Column(
        SQLEnum(PostStatus, name="forum_post_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PostStatus.PUBLISHED,
        index=True
    )

    # Timestamps
    created_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_forum_post_listing', 'status', 'is_sticky', 'created_at'),
        Index('idx_forum_post_category_created', 'category', 'created_at'),
    )

    # Relationships
    author = relationship("User", foreign_keys=[author_id])
    tag_rows = relationship(
        "PostTag",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostTag.position"
    )
    likes = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan"
    )

    @property
    def tags(self):
        return [row.tag for row in self.tag_rows]

    @tags.setter
    def tags(self, values):
        # Rows are reused by position so (post_id, position) never collides on flush
        values = list(values or [])
        rows = list(self.tag_rows)
        for row, tag in zip(rows, values):
            row.tag = tag
        for position in range(len(rows), len(values)):
            rows.append(PostTag(tag=values[position], position=position))
        self.tag_rows = rows[:len(values)]

    @property
    def like_user_ids(self):
        return [like.user_id for like in self.likes]


class PostTag(Base):
    """Free-text tag attached to a post, kept in display order."""

    __tablename__ = "forum_post_tags"

    id = Column(Integer, primary_key=True)
    post_id = Column(
        Integer,
        ForeignKey("forum_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    position = Column(Integer, nullable=False, default=0)
    tag = Column(String(100), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('post_id', 'position', name='uq_forum_post_tag_position'),
    )

    post = relationship("Post", back_populates="tag_rows")
