"""PostLike model for post likes."""

from datetime import datetime
from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from ..database import Base


class PostLike(Base):
    """One row per (post, user); the post's likes set."""

    __tablename__ = "forum_post_likes"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    post_id = Column(
        Integer,
        ForeignKey("forum_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Timestamps
    created_at = Column(TIMESTAMP, default=datetime.utcnow)

    # Constraints
    __table_args__ = (
        # A user likes a post at most once
        UniqueConstraint('post_id', 'user_id', name='uq_forum_post_like'),
        Index('idx_forum_post_like_user', 'user_id', 'created_at'),
    )

    # Relationships
    post = relationship("Post", back_populates="likes")
    user = relationship("User", foreign_keys=[user_id])
