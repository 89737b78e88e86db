"""Comment model for forum posts."""

from datetime import datetime
from sqlalchemy import Column, Integer, JSON, TIMESTAMP, ForeignKey, Index, Boolean
from sqlalchemy.orm import relationship
from ..database import Base


class Comment(Base):
    """Comment on a post, optionally replying to another comment."""

    __tablename__ = "forum_comments"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    post_id = Column(
        Integer,
        ForeignKey("forum_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    # Not a foreign key: stored as sent and left dangling when the parent is removed
    parent_comment_id = Column(Integer, nullable=True, index=True)

    # Comment Content, {"en": "...", "hi": "..."}
    content = Column(JSON, nullable=False)
    is_edited = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(TIMESTAMP, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_forum_comment_post_parent', 'post_id', 'parent_comment_id', 'created_at'),
    )

    # Relationships
    author = relationship("User", foreign_keys=[author_id])
    likes = relationship(
        "CommentLike",
        back_populates="comment",
        cascade="all, delete-orphan"
    )

    @property
    def like_user_ids(self):
        return [like.user_id for like in self.likes]
