"""Custom exceptions for the GOSHALA forum."""

from fastapi import HTTPException, status


class ForumException(HTTPException):
    """Base exception for forum errors."""
    pass


class PostNotFoundException(ForumException):
    """Raised when a post id does not resolve to a stored post."""

    def __init__(self, detail: str = "Post not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class CommentNotFoundException(ForumException):
    """Raised when a comment id does not resolve to a stored comment."""

    def __init__(self, detail: str = "Comment not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class NotAuthorizedException(ForumException):
    """
    Raised when the acting user is neither the author nor an admin.

    Status Code: 403 Forbidden

    Usage:
        >>> raise NotAuthorizedException("update this post")

    Response Body:
        {
            "success": false,
            "message": "Not authorized to update this post"
        }
    """

    def __init__(self, action: str = "perform this action"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action}",
        )


__all__ = [
    "ForumException",
    "PostNotFoundException",
    "CommentNotFoundException",
    "NotAuthorizedException",
]
