"""FastAPI dependency injection functions for authentication and database access."""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.core.security import get_token_subject
from app.crud import crud_user
from app.database import get_db
from app.models.user import User

logger = logging.getLogger(__name__)

# Bearer tokens are issued by the external identity service
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=settings.AUTH_TOKEN_URL)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Dependency to get current authenticated user from JWT token.

    Args:
        token: JWT token from Authorization header
        db: Database session

    Returns:
        User: Authenticated user model

    Raises:
        HTTPException: 401 if token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    subject = get_token_subject(token)
    if subject is None:
        logger.warning("[AUTH] Token decode failed or has no subject")
        raise credentials_exception

    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        logger.warning(f"[AUTH] Token subject is not a user id: {subject!r}")
        raise credentials_exception

    user = crud_user.get(db, user_id)
    if user is None:
        logger.warning(f"[AUTH] User not found for id: {user_id}")
        raise credentials_exception

    return user


def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """
    Dependency to verify current user is active.

    Raises:
        HTTPException: 403 if user is inactive
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user"
        )
    return current_user


__all__ = [
    "oauth2_scheme",
    "get_db",
    "get_current_user",
    "get_current_active_user",
]
