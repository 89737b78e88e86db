"""Turn forum rows into API schemas, projecting locale maps where requested."""

from typing import Dict, List, Optional

from app.models.comment import Comment
from app.models.post import Post
from app.models.user import User
from app.schemas.comment import CommentResponse, LocalizedCommentResponse
from app.schemas.post import (
    AttachmentSchema,
    LocalizedPostResponse,
    PostDetailResponse,
    PostResponse,
)
from app.schemas.user import AuthorSummary
from app.utils.localization import resolve_localized


def author_summary(user: Optional[User], user_id: int) -> AuthorSummary:
    """Public author fields; a missing user renders with an empty name."""
    if user is None:
        return AuthorSummary(id=user_id, name="")
    return AuthorSummary(id=user.id, name=user.name, profile_image=user.profile_image)


def _post_fields(post: Post) -> dict:
    return dict(
        id=post.id,
        author=author_summary(post.author, post.author_id),
        category=post.category,
        tags=post.tags,
        likes=post.like_user_ids,
        views=post.views or 0,
        attachments=[AttachmentSchema.model_validate(a) for a in (post.attachments or [])],
        is_sticky=bool(post.is_sticky),
        is_announcement=bool(post.is_announcement),
        status=post.status,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def present_post(post: Post) -> PostResponse:
    """Stored post with every locale."""
    return PostResponse(title=post.title, content=post.content, **_post_fields(post))


def present_localized_post(post: Post, lang: str, comment_count: int = 0) -> LocalizedPostResponse:
    return LocalizedPostResponse(
        title=resolve_localized(post.title, lang),
        content=resolve_localized(post.content, lang),
        comment_count=comment_count,
        **_post_fields(post),
    )


def _comment_fields(comment: Comment) -> dict:
    return dict(
        id=comment.id,
        author=author_summary(comment.author, comment.author_id),
        post=comment.post_id,
        parent_comment=comment.parent_comment_id,
        likes=comment.like_user_ids,
        is_edited=bool(comment.is_edited),
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def present_comment(comment: Comment) -> CommentResponse:
    """Stored comment with every locale."""
    return CommentResponse(content=comment.content, **_comment_fields(comment))


def present_localized_comment(
    comment: Comment,
    lang: str,
    replies: Optional[List[Comment]] = None,
) -> LocalizedCommentResponse:
    return LocalizedCommentResponse(
        content=resolve_localized(comment.content, lang),
        replies=[present_localized_comment(reply, lang) for reply in replies or []],
        **_comment_fields(comment),
    )


def present_post_detail(post: Post, thread, lang: str, comment_count: int = 0) -> PostDetailResponse:
    """Localized post plus its two-level comment tree from `crud_comment.get_thread`."""
    comments = [present_localized_comment(comment, lang, replies) for comment, replies in thread]
    return PostDetailResponse(
        title=resolve_localized(post.title, lang),
        content=resolve_localized(post.content, lang),
        comment_count=comment_count,
        comments=comments,
        **_post_fields(post),
    )


def present_post_page(posts: List[Post], lang: str, comment_counts: Dict[int, int]) -> List[LocalizedPostResponse]:
    return [present_localized_post(post, lang, comment_counts.get(post.id, 0)) for post in posts]
