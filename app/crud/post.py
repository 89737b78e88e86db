"""CRUD operations and listing queries for Post."""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import select, update, delete, func, asc, desc
from sqlalchemy.orm import Session, selectinload

from app.config import settings
from app.crud.base import CRUDBase
from app.models.post import Post, PostTag, PostStatus
from app.models.post_like import PostLike
from app.models.comment import Comment
from app.models.comment_like import CommentLike
from app.schemas.post import PostCreate, PostUpdate, PostListParams

logger = logging.getLogger(__name__)


def _like_count_column():
    return (
        select(func.count(PostLike.id))
        .where(PostLike.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )


SORT_COLUMNS = {
    "createdAt": lambda: Post.created_at,
    "updatedAt": lambda: Post.updated_at,
    "views": lambda: Post.views,
    "likes": _like_count_column,
}


class CRUDPost(CRUDBase[Post, PostCreate, PostUpdate]):
    """CRUD operations for Post."""

    def _with_relations(self, stmt):
        return stmt.options(
            selectinload(Post.author),
            selectinload(Post.tag_rows),
            selectinload(Post.likes),
        )

    def create_post(
        self,
        db: Session,
        *,
        author_id: int,
        post_in: PostCreate
    ) -> Post:
        """Create a new post owned by `author_id`."""
        post = Post(
            author_id=author_id,
            title=post_in.title,
            content=post_in.content,
            category=post_in.category,
            tags=post_in.tags,
            attachments=[a.model_dump(by_alias=True) for a in post_in.attachments],
            is_sticky=post_in.is_sticky,
            is_announcement=post_in.is_announcement,
            status=post_in.status,
            views=0,
        )
        try:
            db.add(post)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return self.get_by_id(db, post_id=post.id)

    def update_post(
        self,
        db: Session,
        *,
        db_obj: Post,
        post_in: PostUpdate
    ) -> Post:
        """Overwrite every mutable field. Locale maps are replaced, not merged."""
        db_obj.title = post_in.title
        db_obj.content = post_in.content
        db_obj.category = post_in.category
        db_obj.tags = post_in.tags
        db_obj.attachments = [a.model_dump(by_alias=True) for a in post_in.attachments]
        db_obj.is_sticky = post_in.is_sticky
        db_obj.is_announcement = post_in.is_announcement
        db_obj.status = post_in.status
        try:
            db.add(db_obj)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return self.get_by_id(db, post_id=db_obj.id)

    def get_by_id(self, db: Session, *, post_id: int) -> Optional[Post]:
        """Get post by ID with author, tags and likes loaded."""
        stmt = self._with_relations(select(Post).where(Post.id == post_id))
        return db.scalars(stmt).first()

    def increment_views(self, db: Session, *, post_id: int) -> bool:
        """Add one view in the database. Returns False when the post does not exist."""
        stmt = (
            update(Post)
            .where(Post.id == post_id)
            .values(views=Post.views + 1)
            .execution_options(synchronize_session=False)
        )
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount > 0

    def _listing_conditions(self, params: PostListParams) -> list:
        conditions = [Post.status == PostStatus.PUBLISHED]

        if params.category:
            conditions.append(Post.category == params.category)

        if params.search:
            # Substring match on the title in the requested locale only
            title_text = Post.title[params.lang].as_string()
            conditions.append(
                func.lower(title_text).contains(params.search.lower(), autoescape=True)
            )

        if params.tag:
            conditions.append(
                Post.id.in_(select(PostTag.post_id).where(PostTag.tag == params.tag))
            )

        return conditions

    def get_sticky_posts(self, db: Session, *, params: PostListParams) -> List[Post]:
        """Newest pinned posts matching the filters, ignoring the requested sort."""
        stmt = (
            select(Post)
            .where(*self._listing_conditions(params), Post.is_sticky == True)  # noqa: E712
            .order_by(desc(Post.created_at), desc(Post.id))
            .limit(settings.STICKY_POST_LIMIT)
        )
        return list(db.scalars(self._with_relations(stmt)).all())

    def get_regular_posts(self, db: Session, *, params: PostListParams) -> List[Post]:
        """One page of non-sticky posts sorted as requested."""
        direction = asc if params.order == "asc" else desc
        sort_column = SORT_COLUMNS.get(params.sort, SORT_COLUMNS["createdAt"])()

        stmt = (
            select(Post)
            .where(*self._listing_conditions(params), Post.is_sticky == False)  # noqa: E712
            .order_by(direction(sort_column), direction(Post.id))
            .offset((params.page - 1) * params.limit)
            .limit(params.limit)
        )
        return list(db.scalars(self._with_relations(stmt)).all())

    def count_regular_posts(self, db: Session, *, params: PostListParams) -> int:
        """Total of non-sticky posts matching the filters."""
        stmt = select(func.count(Post.id)).where(
            *self._listing_conditions(params), Post.is_sticky == False  # noqa: E712
        )
        return db.scalar(stmt) or 0

    def list_posts(
        self,
        db: Session,
        *,
        params: PostListParams
    ) -> Tuple[List[Post], List[Post], int]:
        """Return (sticky posts, page of regular posts, regular total)."""
        sticky = self.get_sticky_posts(db, params=params)
        posts = self.get_regular_posts(db, params=params)
        total = self.count_regular_posts(db, params=params)
        return sticky, posts, total

    def get_comment_counts(self, db: Session, *, post_ids: Iterable[int]) -> Dict[int, int]:
        """Map post id -> number of comments (replies included)."""
        ids = list(post_ids)
        if not ids:
            return {}
        stmt = (
            select(Comment.post_id, func.count(Comment.id))
            .where(Comment.post_id.in_(ids))
            .group_by(Comment.post_id)
        )
        return {post_id: count for post_id, count in db.execute(stmt).all()}

    def delete_post(self, db: Session, *, db_obj: Post) -> None:
        """Delete a post together with every comment on it, in one transaction."""
        post_id = db_obj.id
        comment_ids = select(Comment.id).where(Comment.post_id == post_id)
        try:
            db.execute(
                delete(CommentLike)
                .where(CommentLike.comment_id.in_(comment_ids))
                .execution_options(synchronize_session=False)
            )
            result = db.execute(
                delete(Comment)
                .where(Comment.post_id == post_id)
                .execution_options(synchronize_session=False)
            )
            db.delete(db_obj)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.expire_all()
        logger.info(f"[FORUM] Deleted post id={post_id} with {result.rowcount} comment(s)")


# Singleton instance
crud_post = CRUDPost(Post)
