"""
SQLAlchemy Models for GOSHALA
"""

from ..database import Base
from .user import User, UserRole
from .post import Post, PostTag, PostCategory, PostStatus, CATEGORY_NAME_KEYS
from .post_like import PostLike
from .comment import Comment
from .comment_like import CommentLike

# Export all models
__all__ = [
    "Base",
    "User",
    "UserRole",
    "Post",
    "PostTag",
    "PostCategory",
    "PostStatus",
    "CATEGORY_NAME_KEYS",
    "PostLike",
    "Comment",
    "CommentLike",
]
