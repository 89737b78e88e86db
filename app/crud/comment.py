"""CRUD operations for forum comments."""

import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import select, delete, or_
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.post import Post
from app.models.comment import Comment
from app.models.comment_like import CommentLike
from app.schemas.comment import CommentCreate, CommentUpdate

logger = logging.getLogger(__name__)


class CRUDComment(CRUDBase[Comment, CommentCreate, CommentUpdate]):
    """CRUD operations for Comment."""

    def _with_relations(self, stmt):
        return stmt.options(
            selectinload(Comment.author),
            selectinload(Comment.likes),
        )

    def create_comment(
        self,
        db: Session,
        *,
        post_id: int,
        author_id: int,
        comment_in: CommentCreate
    ) -> Comment:
        """Create a comment on a post.

        `parent_comment` is stored as sent; it is not checked against the post.

        Raises:
            ValueError: if the post does not exist
        """
        post_exists = db.scalar(select(Post.id).where(Post.id == post_id))
        if post_exists is None:
            raise ValueError("Post not found")

        comment = Comment(
            post_id=post_id,
            author_id=author_id,
            parent_comment_id=comment_in.parent_comment,
            content=comment_in.content,
            is_edited=False,
        )
        try:
            db.add(comment)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return self.get_by_id(db, comment_id=comment.id)

    def get_by_id(self, db: Session, *, comment_id: int) -> Optional[Comment]:
        """Get comment by ID with author and likes loaded."""
        stmt = self._with_relations(select(Comment).where(Comment.id == comment_id))
        return db.scalars(stmt).first()

    def update_content(
        self,
        db: Session,
        *,
        db_obj: Comment,
        comment_in: CommentUpdate
    ) -> Comment:
        """Replace the content map and flag the comment as edited."""
        db_obj.content = comment_in.content
        db_obj.is_edited = True
        try:
            db.add(db_obj)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return self.get_by_id(db, comment_id=db_obj.id)

    def get_thread(
        self,
        db: Session,
        *,
        post_id: int
    ) -> List[Tuple[Comment, List[Comment]]]:
        """Top-level comments of a post, oldest first, each with its direct replies.

        Replies of replies are not resolved.
        """
        top_stmt = (
            select(Comment)
            .where(Comment.post_id == post_id, Comment.parent_comment_id.is_(None))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        top_level = list(db.scalars(self._with_relations(top_stmt)).all())
        if not top_level:
            return []

        reply_stmt = (
            select(Comment)
            .where(Comment.parent_comment_id.in_([c.id for c in top_level]))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        replies_by_parent: Dict[int, List[Comment]] = {}
        for reply in db.scalars(self._with_relations(reply_stmt)).all():
            replies_by_parent.setdefault(reply.parent_comment_id, []).append(reply)

        return [(comment, replies_by_parent.get(comment.id, [])) for comment in top_level]

    def delete_with_replies(self, db: Session, *, db_obj: Comment) -> int:
        """Delete a comment and its direct replies in one transaction.

        Deeper descendants keep their (now dangling) parent reference.
        Returns the number of comments removed.
        """
        comment_id = db_obj.id
        affected = or_(Comment.id == comment_id, Comment.parent_comment_id == comment_id)
        try:
            db.execute(
                delete(CommentLike)
                .where(CommentLike.comment_id.in_(select(Comment.id).where(affected)))
                .execution_options(synchronize_session=False)
            )
            result = db.execute(
                delete(Comment).where(affected).execution_options(synchronize_session=False)
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.expire_all()
        logger.info(f"[FORUM] Deleted comment id={comment_id} ({result.rowcount} row(s))")
        return result.rowcount


# Singleton instance
crud_comment = CRUDComment(Comment)
