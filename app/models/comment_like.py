"""CommentLike model for comment likes."""

from datetime import datetime
from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base


class CommentLike(Base):
    __tablename__ = "forum_comment_likes"

    id = Column(Integer, primary_key=True, index=True)
    comment_id = Column(
        Integer,
        ForeignKey("forum_comments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    created_at = Column(TIMESTAMP, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint('comment_id', 'user_id', name='uq_forum_comment_like'),
    )

    comment = relationship("Comment", back_populates="likes")
    user = relationship("User", foreign_keys=[user_id])
