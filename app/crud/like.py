"""Like toggling for posts and comments."""

import logging
from typing import Any, Tuple, Type

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.database import Base
from app.models.post import Post
from app.models.post_like import PostLike
from app.models.comment import Comment
from app.models.comment_like import CommentLike

logger = logging.getLogger(__name__)


class CRUDLike(CRUDBase[Any, dict, dict]):
    """Membership of users in a post's or comment's likes set.

    `target_field` is the like table's column referencing `target_model`.
    """

    def __init__(self, model: Type[Base], *, target_model: Type[Base], target_field: str):
        super().__init__(model)
        self.target_model = target_model
        self.target_field = target_field

    def _target_column(self):
        return getattr(self.model, self.target_field)

    def count_likes(self, db: Session, *, target_id: int) -> int:
        stmt = select(func.count(self.model.id)).where(self._target_column() == target_id)
        return db.scalar(stmt) or 0

    def toggle_like(
        self,
        db: Session,
        *,
        target_id: int,
        user_id: int
    ) -> Tuple[bool, int]:
        """
        Add the user to the likes set, or remove them if already present.

        The removal is a single DELETE and the unique constraint rejects a
        duplicate insert, so concurrent toggles cannot double-like.

        Returns:
            (is_liked: bool, like_count: int)

        Raises:
            ValueError: if the liked post/comment does not exist
        """
        exists = db.scalar(select(self.target_model.id).where(self.target_model.id == target_id))
        if exists is None:
            raise ValueError(f"{self.target_model.__name__} not found")

        membership = (self._target_column() == target_id) & (self.model.user_id == user_id)
        try:
            result = db.execute(
                delete(self.model).where(membership).execution_options(synchronize_session=False)
            )
            if result.rowcount:
                is_liked = False
            else:
                db.add(self.model(**{self.target_field: target_id, "user_id": user_id}))
                db.flush()
                is_liked = True
            db.commit()
        except IntegrityError:
            # A concurrent request from the same user inserted the row first
            db.rollback()
            is_liked = True
        except Exception:
            db.rollback()
            raise

        db.expire_all()
        like_count = self.count_likes(db, target_id=target_id)
        logger.info(
            f"[FORUM] {self.target_model.__name__} id={target_id} "
            f"{'liked' if is_liked else 'unliked'} by user_id={user_id}"
        )
        return is_liked, like_count


# Singleton instances
crud_post_like = CRUDLike(PostLike, target_model=Post, target_field="post_id")
crud_comment_like = CRUDLike(CommentLike, target_model=Comment, target_field="comment_id")
