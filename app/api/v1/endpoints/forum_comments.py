"""Community forum endpoints: comments and replies."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_active_user, get_db
from app.core.exceptions import (
    CommentNotFoundException,
    NotAuthorizedException,
    PostNotFoundException,
)
from app.core.permissions import can_mutate
from app.crud import crud_comment, crud_comment_like
from app.models.user import User
from app.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.post import LikeToggleResponse
from app.services import forum_presenter

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/forum",
    tags=["Community Forum"],
)


@router.post(
    "/posts/{post_id}/comments",
    response_model=ApiResponse[CommentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
    description="""
    Add a comment to a post. Pass `parentComment` to reply to another comment.

    **Access:** Authenticated users
    """,
)
def create_comment(
    post_id: int,
    comment_in: CommentCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ApiResponse[CommentResponse]:
    """Create a comment or reply."""
    try:
        comment = crud_comment.create_comment(
            db,
            post_id=post_id,
            author_id=current_user.id,
            comment_in=comment_in,
        )
    except ValueError:
        raise PostNotFoundException()

    logger.info(
        f"[FORUM] Comment created: id={comment.id}, post_id={post_id}, "
        f"parent={comment.parent_comment_id}, author_id={current_user.id}"
    )
    return ApiResponse(data=forum_presenter.present_comment(comment))


@router.put(
    "/comments/{comment_id}",
    response_model=ApiResponse[CommentResponse],
    status_code=status.HTTP_200_OK,
    summary="Update comment",
    description="""
    Replace a comment's content. The comment is marked as edited.

    **Access:** Comment author or admin
    """,
)
def update_comment(
    comment_id: int,
    comment_in: CommentUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ApiResponse[CommentResponse]:
    comment = crud_comment.get_by_id(db, comment_id=comment_id)
    if not comment:
        raise CommentNotFoundException()

    if not can_mutate(current_user, comment.author_id):
        logger.warning(f"[FORUM] User {current_user.id} denied update on comment {comment_id}")
        raise NotAuthorizedException("update this comment")

    updated = crud_comment.update_content(db, db_obj=comment, comment_in=comment_in)
    return ApiResponse(data=forum_presenter.present_comment(updated))


@router.delete(
    "/comments/{comment_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete comment",
    description="""
    Delete a comment and its direct replies.

    **Access:** Comment author or admin
    """,
)
def delete_comment(
    comment_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    comment = crud_comment.get_by_id(db, comment_id=comment_id)
    if not comment:
        raise CommentNotFoundException()

    if not can_mutate(current_user, comment.author_id):
        logger.warning(f"[FORUM] User {current_user.id} denied delete on comment {comment_id}")
        raise NotAuthorizedException("delete this comment")

    crud_comment.delete_with_replies(db, db_obj=comment)
    return MessageResponse(message="Comment deleted successfully")


@router.post(
    "/comments/{comment_id}/like",
    response_model=ApiResponse[LikeToggleResponse],
    status_code=status.HTTP_200_OK,
    summary="Toggle like on comment",
)
def toggle_like_comment(
    comment_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ApiResponse[LikeToggleResponse]:
    """Toggle like on a comment."""
    try:
        is_liked, like_count = crud_comment_like.toggle_like(
            db, target_id=comment_id, user_id=current_user.id
        )
    except ValueError:
        raise CommentNotFoundException()

    return ApiResponse(
        data=LikeToggleResponse(liked=is_liked, like_count=like_count),
        message="Comment liked successfully" if is_liked else "Comment unliked successfully",
    )
