"""Community forum endpoints: categories and posts."""

import logging
import math
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_active_user, get_db
from app.config import settings
from app.core.exceptions import NotAuthorizedException, PostNotFoundException
from app.core.permissions import can_mutate
from app.crud import crud_comment, crud_post, crud_post_like
from app.models.post import CATEGORY_NAME_KEYS, PostCategory
from app.models.user import User
from app.schemas.category import CategoryResponse, LanguagesResponse
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.post import (
    LikeToggleResponse,
    PaginationInfo,
    PostCreate,
    PostDetailResponse,
    PostListParams,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from app.services import forum_presenter
from app.utils.localization import normalize_locale

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/forum",
    tags=["Community Forum"],
)


@router.get(
    "/categories",
    response_model=ApiResponse[List[CategoryResponse]],
    status_code=status.HTTP_200_OK,
    summary="List forum categories",
)
def list_categories() -> ApiResponse[List[CategoryResponse]]:
    """Fixed category set with the i18n keys the client renders."""
    categories = [
        CategoryResponse(id=category.value, name_key=CATEGORY_NAME_KEYS[category])
        for category in PostCategory
    ]
    return ApiResponse(data=categories)


@router.get(
    "/languages",
    response_model=ApiResponse[LanguagesResponse],
    status_code=status.HTTP_200_OK,
    summary="List content locales",
)
def list_languages() -> ApiResponse[LanguagesResponse]:
    return ApiResponse(
        data=LanguagesResponse(
            default=settings.DEFAULT_LOCALE,
            supported=settings.SUPPORTED_LOCALES,
        )
    )


@router.get(
    "/posts",
    response_model=ApiResponse[PostListResponse],
    status_code=status.HTTP_200_OK,
    summary="List published posts",
    description="""
    Get published posts with pagination, sorting and filtering.

    Up to five sticky posts (newest first) are returned separately in
    `stickyPosts`; `posts` and `pagination` cover non-sticky posts only.

    **Sorting options:** `createdAt` (default), `updatedAt`, `views`, `likes`

    **Access:** Public
    """,
)
def list_posts(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Posts per page"),
    sort: str = Query("createdAt", pattern="^(createdAt|updatedAt|views|likes)$", description="Sort field"),
    order: str = Query("desc", pattern="^(asc|desc)$", description="Sort direction"),
    category: Optional[PostCategory] = Query(None, description="Exact category"),
    search: Optional[str] = Query(None, max_length=200, description="Case-insensitive title substring"),
    tag: Optional[str] = Query(None, max_length=100, description="Exact tag"),
    lang: Optional[str] = Query(None, description="Locale for title/content"),
    db: Session = Depends(get_db),
) -> ApiResponse[PostListResponse]:
    """List published posts."""
    params = PostListParams(
        page=page,
        limit=limit,
        sort=sort,
        order=order,
        category=category,
        search=search or None,
        tag=tag or None,
        lang=normalize_locale(lang),
    )

    sticky, posts, total = crud_post.list_posts(db, params=params)
    comment_counts = crud_post.get_comment_counts(
        db, post_ids=[post.id for post in sticky + posts]
    )

    return ApiResponse(
        data=PostListResponse(
            sticky_posts=forum_presenter.present_post_page(sticky, params.lang, comment_counts),
            posts=forum_presenter.present_post_page(posts, params.lang, comment_counts),
            pagination=PaginationInfo(
                total=total,
                page=params.page,
                limit=params.limit,
                total_pages=math.ceil(total / params.limit),
            ),
        )
    )


@router.get(
    "/posts/{post_id}",
    response_model=ApiResponse[PostDetailResponse],
    status_code=status.HTTP_200_OK,
    summary="Get post detail",
    description="""
    Get a post with its top-level comments and their direct replies.
    Every call counts one view.

    **Access:** Public
    """,
)
def get_post_detail(
    post_id: int,
    lang: Optional[str] = Query(None, description="Locale for title/content"),
    db: Session = Depends(get_db),
) -> ApiResponse[PostDetailResponse]:
    """Get post detail with comments."""
    if not crud_post.increment_views(db, post_id=post_id):
        raise PostNotFoundException()

    post = crud_post.get_by_id(db, post_id=post_id)
    if not post:
        raise PostNotFoundException()

    thread = crud_comment.get_thread(db, post_id=post_id)
    comment_count = crud_post.get_comment_counts(db, post_ids=[post_id]).get(post_id, 0)
    return ApiResponse(
        data=forum_presenter.present_post_detail(
            post, thread, normalize_locale(lang), comment_count=comment_count
        )
    )


@router.post(
    "/posts",
    response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create new post",
    description="""
    Create a forum post. `title` and `content` are locale maps such as
    `{"en": "Hello", "hi": "नमस्ते"}`.

    **Access:** Authenticated users
    """,
)
def create_post(
    post_in: PostCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ApiResponse[PostResponse]:
    """Create a new forum post."""
    post = crud_post.create_post(db, author_id=current_user.id, post_in=post_in)
    logger.info(f"[FORUM] Post created: id={post.id}, author_id={current_user.id}")
    return ApiResponse(data=forum_presenter.present_post(post))


@router.put(
    "/posts/{post_id}",
    response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_200_OK,
    summary="Update post",
    description="""
    Replace a post's title, content, category, tags, attachments, flags and
    status. Locale maps are overwritten, so send every locale to keep.

    **Access:** Post author or admin
    """,
)
def update_post(
    post_id: int,
    post_in: PostUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ApiResponse[PostResponse]:
    """Update a post."""
    post = crud_post.get_by_id(db, post_id=post_id)
    if not post:
        raise PostNotFoundException()

    if not can_mutate(current_user, post.author_id):
        logger.warning(f"[FORUM] User {current_user.id} denied update on post {post_id}")
        raise NotAuthorizedException("update this post")

    updated_post = crud_post.update_post(db, db_obj=post, post_in=post_in)
    logger.info(f"[FORUM] Post updated: id={post_id}, by user_id={current_user.id}")
    return ApiResponse(data=forum_presenter.present_post(updated_post))


@router.delete(
    "/posts/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete post",
    description="""
    Delete a post and every comment on it, replies included.

    **Access:** Post author or admin
    """,
)
def delete_post(
    post_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Delete a post with its comments."""
    post = crud_post.get_by_id(db, post_id=post_id)
    if not post:
        raise PostNotFoundException()

    if not can_mutate(current_user, post.author_id):
        logger.warning(f"[FORUM] User {current_user.id} denied delete on post {post_id}")
        raise NotAuthorizedException("delete this post")

    crud_post.delete_post(db, db_obj=post)
    return MessageResponse(message="Post deleted successfully")


@router.post(
    "/posts/{post_id}/like",
    response_model=ApiResponse[LikeToggleResponse],
    status_code=status.HTTP_200_OK,
    summary="Toggle like on post",
    description="""
    Like or unlike a post. If already liked, it will unlike. If not liked, it will like.

    **Access:** Authenticated users
    """,
)
def toggle_like_post(
    post_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ApiResponse[LikeToggleResponse]:
    """Toggle like on a post."""
    try:
        is_liked, like_count = crud_post_like.toggle_like(
            db, target_id=post_id, user_id=current_user.id
        )
    except ValueError:
        raise PostNotFoundException()

    return ApiResponse(
        data=LikeToggleResponse(liked=is_liked, like_count=like_count),
        message="Post liked successfully" if is_liked else "Post unliked successfully",
    )
