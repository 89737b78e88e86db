"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .user import crud_user
from .post import crud_post
from .comment import crud_comment
from .like import crud_post_like, crud_comment_like


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_user",
    "crud_post",
    "crud_comment",
    "crud_post_like",
    "crud_comment_like",
]
